"""
Numerical Safeguards — примитивы для линейного ремаппинга

Модуль содержит численные примитивы, из которых собирается ремаппинг
значений между интервалами:
- Epsilon-параметры для защиты от вырожденных интервалов
- Проверки валидности float (NaN/Inf)
- Epsilon-сравнения float
- Clamp с произвольным порядком границ
- Нормализация (inverse lerp) и линейная интерполяция (lerp)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (вырожденный интервал → 0.0)
2. Порядок границ интервала не важен для clamp_between
3. Все операции детерминированы и не имеют side effects
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon single precision (FLT_EPSILON = 2^-23)
# Интервал с шириной меньше EPS_REMAP считается вырожденным
EPS_REMAP: Final[float] = 2.0**-23

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_degenerate_interval(start: float, end: float, eps: float = EPS_REMAP) -> bool:
    """
    Проверка, является ли интервал [start, end] вырожденным.

    Интервал вырожден, если его ширина по модулю меньше eps.
    Нормализация внутри такого интервала не определена.

    Args:
        start: Начало интервала
        end: Конец интервала (может быть меньше start)
        eps: Порог ширины (default: EPS_REMAP)

    Returns:
        True если abs(end - start) < eps

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> is_degenerate_interval(5.0, 5.0)
        True
        >>> is_degenerate_interval(0.0, 10.0)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(end - start) < eps


# =============================================================================
# CLAMP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_between(value: float, bound_a: float, bound_b: float) -> float:
    """
    Ограничение значения интервалом, границы которого заданы в любом порядке.

    Границы сначала упорядочиваются, поэтому clamp_between(v, 10, 0)
    эквивалентен clamp(v, 0, 10).

    Examples:
        >>> clamp_between(-5.0, 10.0, 0.0)
        0.0
        >>> clamp_between(15.0, 10.0, 0.0)
        10.0
    """
    lower = min(bound_a, bound_b)
    upper = max(bound_a, bound_b)
    return clamp(value, lower, upper)


# =============================================================================
# НОРМАЛИЗАЦИЯ И ИНТЕРПОЛЯЦИЯ
# =============================================================================


def normalized_position(
    value: float,
    start: float,
    end: float,
    eps: float = EPS_REMAP,
) -> float:
    """
    Относительная позиция значения внутри интервала (inverse lerp).

    t = (value - start) / (end - start)

    Результат не ограничивается [0, 1]: значения вне интервала дают
    t < 0 или t > 1. Для вырожденного интервала возвращается 0.0,
    т.е. позиция начала интервала.

    Args:
        value: Исходное значение
        start: Начало интервала (соответствует t = 0)
        end: Конец интервала (соответствует t = 1)
        eps: Порог вырожденности (default: EPS_REMAP)

    Returns:
        Нормализованная позиция t

    Examples:
        >>> normalized_position(5.0, 0.0, 10.0)
        0.5
        >>> normalized_position(-5.0, 0.0, 10.0)
        -0.5
        >>> normalized_position(3.0, 5.0, 5.0)
        0.0
    """
    if is_degenerate_interval(start, end, eps):
        return 0.0

    width = end - start
    if not math.isfinite(width):
        # Ширина переполнилась: считаем в половинном масштабе
        return (value / 2 - start / 2) / (end / 2 - start / 2)

    return (value - start) / width


def lerp(start: float, end: float, t: float) -> float:
    """
    Линейная интерполяция: start + t * (end - start).

    t не ограничивается, t вне [0, 1] даёт экстраполяцию.
    Если end - start переполняется (например, [-1e308, 1e308]),
    используется форма (1 - t) * start + t * end, не вычисляющая ширину.

    Examples:
        >>> lerp(0.0, 100.0, 0.5)
        50.0
        >>> lerp(100.0, 0.0, 0.75)
        25.0
        >>> lerp(-1e308, 1e308, 0.0)
        -1e+308
    """
    width = end - start
    if not math.isfinite(width):
        return (1.0 - t) * start + t * end

    return start + t * width
