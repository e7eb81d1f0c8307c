"""
Remap — линейный ремаппинг значения между интервалами

Модуль переводит значение из исходного интервала [from_source, to_source]
в целевой интервал [from_target, to_target]:
    t = (value - from_source) / (to_source - from_source)
    mapped = from_target + t * (to_target - from_target)

Два варианта:
- remap_value: без clamp, значения вне исходного интервала
  экстраполируются пропорционально за пределы целевого
- clamped_remap_value: значение сначала ограничивается исходным
  интервалом, результат всегда лежит внутри целевого

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вырожденный исходный интервал (abs(to - from) < eps) → from_target,
   без исключений, без NaN/Inf
2. Порядок границ обоих интервалов произвольный
3. Функции чистые и реентерабельные
"""

from src.core.math.numerical_safeguards import (
    EPS_REMAP,
    clamp_between,
    is_degenerate_interval,
    lerp,
    normalized_position,
)


def remap_value(
    value: float,
    from_source: float,
    to_source: float,
    from_target: float,
    to_target: float,
    eps: float = EPS_REMAP,
) -> float:
    """
    Линейный ремаппинг значения из одного интервала в другой.

    Значение НЕ ограничивается исходным интервалом: значения вне него
    отображаются пропорционально и могут выйти за целевой интервал.

    Args:
        value: Значение для ремаппинга
        from_source: Начало исходного интервала
        to_source: Конец исходного интервала
        from_target: Начало целевого интервала
        to_target: Конец целевого интервала
        eps: Порог вырожденности исходного интервала (default: EPS_REMAP)

    Returns:
        Отображённое значение, или from_target если исходный интервал вырожден

    Raises:
        ValueError: Если eps <= 0 (с eps по умолчанию не возникает)

    Examples:
        >>> remap_value(5.0, 0.0, 10.0, 0.0, 100.0)
        50.0
        >>> remap_value(-5.0, 0.0, 10.0, 0.0, 100.0)
        -50.0
        >>> remap_value(5.0, 5.0, 5.0, 20.0, 40.0)
        20.0
        >>> remap_value(7.5, 0.0, 10.0, 100.0, 0.0)
        25.0
    """
    if is_degenerate_interval(from_source, to_source, eps):
        return from_target

    t = normalized_position(value, from_source, to_source, eps)
    return lerp(from_target, to_target, t)


def clamped_remap_value(
    value: float,
    from_source: float,
    to_source: float,
    from_target: float,
    to_target: float,
    eps: float = EPS_REMAP,
) -> float:
    """
    Ремаппинг с предварительным ограничением значения исходным интервалом.

    Границы исходного интервала упорядочиваются перед clamp, поэтому
    инвертированный интервал (from_source > to_source) ограничивает
    корректно. Результат всегда лежит в замкнутом интервале между
    from_target и to_target, в том числе для целевых интервалов, ширина
    которых переполняет float.

    Raises:
        ValueError: Если eps <= 0 (с eps по умолчанию не возникает)

    Examples:
        >>> clamped_remap_value(-5.0, 0.0, 10.0, 0.0, 100.0)
        0.0
        >>> clamped_remap_value(-5.0, 10.0, 0.0, 0.0, 100.0)
        100.0
    """
    if is_degenerate_interval(from_source, to_source, eps):
        return from_target

    clamped_value = clamp_between(value, from_source, to_source)
    t = normalized_position(clamped_value, from_source, to_source, eps)

    # t в [0, 1]: выпуклая комбинация не переполняется для конечных границ
    mapped = (1.0 - t) * from_target + t * to_target

    # Округление может вынести результат на ulp за границу
    return clamp_between(mapped, from_target, to_target)


class RemapValue:
    """Статический фасад: RemapValue.map / RemapValue.clamped_map."""

    map = staticmethod(remap_value)
    clamped_map = staticmethod(clamped_remap_value)
