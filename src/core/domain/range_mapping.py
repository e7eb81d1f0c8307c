"""
RangeMapping — Модель конфигурации ремаппинга

Immutable Pydantic модели для хранимых (переиспользуемых) отображений
между интервалами. Полная совместимость с JSON Schema
(contracts/schema/range_mapping.json).

Вычисления делегируются src.core.math.remap, модели только хранят
границы и флаг clamp.
"""

import logging

from pydantic import BaseModel, Field, model_validator

from src.core.math.numerical_safeguards import (
    EPS_REMAP,
    clamp_between,
    is_degenerate_interval,
)
from src.core.math.remap import clamped_remap_value, remap_value

logger = logging.getLogger("remap.domain")


# =============================================================================
# MODELS
# =============================================================================


class Interval(BaseModel):
    """
    Числовой интервал [start, end].

    Порядок границ произвольный: start > end допустим и означает
    инвертированное направление интервала.
    """

    start: float = Field(..., allow_inf_nan=False, description="Начало интервала")
    end: float = Field(..., allow_inf_nan=False, description="Конец интервала")

    model_config = {"frozen": True}

    @property
    def lower(self) -> float:
        return min(self.start, self.end)

    @property
    def upper(self) -> float:
        return max(self.start, self.end)

    @property
    def width(self) -> float:
        """Знаковая ширина: end - start."""
        return self.end - self.start

    @property
    def is_inverted(self) -> bool:
        return self.start > self.end

    @property
    def is_degenerate(self) -> bool:
        return is_degenerate_interval(self.start, self.end, EPS_REMAP)

    def contains(self, value: float) -> bool:
        """Принадлежность замкнутому интервалу (независимо от порядка границ)."""
        return self.lower <= value <= self.upper

    def clamp(self, value: float) -> float:
        return clamp_between(value, self.start, self.end)

    def reversed(self) -> "Interval":
        return Interval(start=self.end, end=self.start)


class RangeMapping(BaseModel):
    """
    Отображение значений из source интервала в target интервал.

    Содержит:
    - source: исходный интервал
    - target: целевой интервал
    - clamped: ограничивать ли входное значение source интервалом
    """

    source: Interval = Field(..., description="Исходный интервал")
    target: Interval = Field(..., description="Целевой интервал")
    clamped: bool = Field(False, description="Clamp входного значения по source")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _warn_degenerate_source(self) -> "RangeMapping":
        if self.source.is_degenerate:
            logger.warning(
                "Degenerate source interval [%s, %s]: every value maps to target start %s",
                self.source.start,
                self.source.end,
                self.target.start,
            )
        return self

    @classmethod
    def from_bounds(
        cls,
        from_source: float,
        to_source: float,
        from_target: float,
        to_target: float,
        clamped: bool = False,
    ) -> "RangeMapping":
        """Построение из пяти скалярных границ (порядок как у remap_value)."""
        return cls(
            source=Interval(start=from_source, end=to_source),
            target=Interval(start=from_target, end=to_target),
            clamped=clamped,
        )

    def apply(self, value: float) -> float:
        """
        Применение отображения к значению.

        Args:
            value: Значение в координатах source интервала

        Returns:
            Значение в координатах target интервала
        """
        remap = clamped_remap_value if self.clamped else remap_value
        return remap(
            value,
            self.source.start,
            self.source.end,
            self.target.start,
            self.target.end,
        )

    def inverse(self) -> "RangeMapping":
        """Обратное отображение target → source с тем же флагом clamped."""
        return RangeMapping(source=self.target, target=self.source, clamped=self.clamped)
