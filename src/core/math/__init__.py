"""
Core math modules для remap-value

Математические примитивы линейного ремаппинга с защитой от вырожденных интервалов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_REMAP,
    # Float checks
    is_close,
    is_degenerate_interval,
    is_valid_float,
    # Clamp
    clamp,
    clamp_between,
    # Interpolation
    lerp,
    normalized_position,
)

# Remap
from src.core.math.remap import (
    RemapValue,
    clamped_remap_value,
    remap_value,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_REMAP",
    # Numerical Safeguards — Float checks
    "is_close",
    "is_degenerate_interval",
    "is_valid_float",
    # Numerical Safeguards — Clamp
    "clamp",
    "clamp_between",
    # Numerical Safeguards — Interpolation
    "lerp",
    "normalized_position",
    # Remap — Types
    "RemapValue",
    # Remap — Functions
    "clamped_remap_value",
    "remap_value",
]
