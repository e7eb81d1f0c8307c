"""
Domain models and value objects.

Contains the immutable range mapping configuration models.
"""

from src.core.domain.range_mapping import Interval, RangeMapping

__all__ = [
    "Interval",
    "RangeMapping",
]
