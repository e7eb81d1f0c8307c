"""
Tests for RangeMapping Pydantic Models

Покрывает:
- Interval: границы, ширина, инверсия, вырожденность, contains/clamp
- RangeMapping: apply (clamped/unclamped), inverse, from_bounds
- Валидация (NaN/Inf, неверные типы)
- Immutability (frozen=True)
- JSON сериализация/десериализация
- Логирование вырожденного source интервала
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.domain import Interval, RangeMapping
from src.core.math import clamped_remap_value, remap_value


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def percent_mapping() -> RangeMapping:
    """[0, 10] → [0, 100] без clamp."""
    return RangeMapping.from_bounds(0.0, 10.0, 0.0, 100.0)


@pytest.fixture
def valid_mapping_data():
    """Валидные данные RangeMapping."""
    return {
        "source": {"start": -1.0, "end": 1.0},
        "target": {"start": 0.0, "end": 255.0},
        "clamped": True,
    }


# =============================================================================
# INTERVAL
# =============================================================================


class TestInterval:
    """Тесты для Interval"""

    def test_ordered_interval(self) -> None:
        """Обычный упорядоченный интервал"""
        interval = Interval(start=2.0, end=8.0)
        assert interval.lower == 2.0
        assert interval.upper == 8.0
        assert interval.width == 6.0
        assert not interval.is_inverted
        assert not interval.is_degenerate

    def test_inverted_interval(self) -> None:
        """Инвертированный интервал: lower/upper упорядочены, width отрицательная"""
        interval = Interval(start=8.0, end=2.0)
        assert interval.lower == 2.0
        assert interval.upper == 8.0
        assert interval.width == -6.0
        assert interval.is_inverted

    def test_degenerate_interval(self) -> None:
        """Совпадающие границы — вырожденный интервал"""
        assert Interval(start=3.0, end=3.0).is_degenerate

    def test_contains_is_closed_and_order_independent(self) -> None:
        """contains: замкнутый интервал, порядок границ не важен"""
        for interval in (Interval(start=0.0, end=10.0), Interval(start=10.0, end=0.0)):
            assert interval.contains(0.0)
            assert interval.contains(10.0)
            assert interval.contains(5.0)
            assert not interval.contains(-0.1)
            assert not interval.contains(10.1)

    def test_clamp(self) -> None:
        """clamp учитывает инвертированные границы"""
        interval = Interval(start=10.0, end=0.0)
        assert interval.clamp(-5.0) == 0.0
        assert interval.clamp(15.0) == 10.0
        assert interval.clamp(4.0) == 4.0

    def test_reversed(self) -> None:
        """reversed меняет границы местами"""
        assert Interval(start=1.0, end=2.0).reversed() == Interval(start=2.0, end=1.0)

    def test_nan_rejected(self) -> None:
        """NaN границы отклоняются"""
        with pytest.raises(ValidationError):
            Interval(start=float("nan"), end=1.0)

    def test_inf_rejected(self) -> None:
        """Inf границы отклоняются"""
        with pytest.raises(ValidationError):
            Interval(start=0.0, end=float("inf"))

    def test_missing_field_rejected(self) -> None:
        """Отсутствующая граница отклоняется"""
        with pytest.raises(ValidationError):
            Interval(start=0.0)

    def test_frozen(self) -> None:
        """Interval immutable"""
        interval = Interval(start=0.0, end=1.0)
        with pytest.raises(ValidationError):
            interval.start = 5.0


# =============================================================================
# RANGE MAPPING
# =============================================================================


class TestRangeMapping:
    """Тесты для RangeMapping"""

    def test_from_bounds(self, percent_mapping: RangeMapping) -> None:
        """from_bounds раскладывает пять скаляров по интервалам"""
        assert percent_mapping.source == Interval(start=0.0, end=10.0)
        assert percent_mapping.target == Interval(start=0.0, end=100.0)
        assert percent_mapping.clamped is False

    def test_apply_unclamped(self, percent_mapping: RangeMapping) -> None:
        """apply без clamp совпадает с remap_value"""
        for value in (-5.0, 0.0, 5.0, 10.0, 12.5):
            assert percent_mapping.apply(value) == remap_value(value, 0.0, 10.0, 0.0, 100.0)
        assert percent_mapping.apply(-5.0) == pytest.approx(-50.0)

    def test_apply_clamped(self) -> None:
        """apply с clamp совпадает с clamped_remap_value"""
        mapping = RangeMapping.from_bounds(0.0, 10.0, 0.0, 100.0, clamped=True)
        for value in (-5.0, 0.0, 5.0, 10.0, 12.5):
            assert mapping.apply(value) == clamped_remap_value(value, 0.0, 10.0, 0.0, 100.0)
        assert mapping.apply(-5.0) == 0.0
        assert mapping.apply(12.5) == 100.0

    def test_inverse_round_trip(self) -> None:
        """inverse возвращает значение в source координаты"""
        mapping = RangeMapping.from_bounds(-2.0, 6.0, 100.0, 0.0)
        inverse = mapping.inverse()
        assert inverse.source == mapping.target
        assert inverse.target == mapping.source
        for value in (-2.0, 0.0, 3.3, 6.0):
            assert inverse.apply(mapping.apply(value)) == pytest.approx(value)

    def test_inverse_keeps_clamped_flag(self) -> None:
        """inverse сохраняет флаг clamped"""
        mapping = RangeMapping.from_bounds(0.0, 1.0, 0.0, 10.0, clamped=True)
        assert mapping.inverse().clamped is True

    def test_degenerate_source_maps_to_target_start(self) -> None:
        """Вырожденный source → target.start для любого значения"""
        mapping = RangeMapping.from_bounds(5.0, 5.0, 20.0, 40.0)
        assert mapping.apply(-100.0) == 20.0
        assert mapping.apply(5.0) == 20.0

    def test_degenerate_source_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Вырожденный source логируется как warning"""
        with caplog.at_level(logging.WARNING, logger="remap.domain"):
            RangeMapping.from_bounds(5.0, 5.0, 20.0, 40.0)
        assert any("Degenerate source interval" in r.getMessage() for r in caplog.records)

    def test_regular_source_does_not_log(self, caplog: pytest.LogCaptureFixture) -> None:
        """Обычный source не логирует warning"""
        with caplog.at_level(logging.WARNING, logger="remap.domain"):
            RangeMapping.from_bounds(0.0, 1.0, 20.0, 40.0)
        assert not caplog.records

    def test_frozen(self, percent_mapping: RangeMapping) -> None:
        """RangeMapping immutable"""
        with pytest.raises(ValidationError):
            percent_mapping.clamped = True


class TestRangeMappingSerialization:
    """JSON сериализация/десериализация RangeMapping"""

    def test_model_validate(self, valid_mapping_data) -> None:
        """Создание из dict"""
        mapping = RangeMapping.model_validate(valid_mapping_data)
        assert mapping.source.start == -1.0
        assert mapping.target.end == 255.0
        assert mapping.clamped is True

    def test_clamped_defaults_to_false(self, valid_mapping_data) -> None:
        """clamped по умолчанию False"""
        del valid_mapping_data["clamped"]
        assert RangeMapping.model_validate(valid_mapping_data).clamped is False

    def test_json_round_trip(self, valid_mapping_data) -> None:
        """model_dump_json → model_validate_json сохраняет модель"""
        mapping = RangeMapping.model_validate(valid_mapping_data)
        restored = RangeMapping.model_validate_json(mapping.model_dump_json())
        assert restored == mapping

    def test_model_dump_shape(self, valid_mapping_data) -> None:
        """model_dump совпадает с исходными данными"""
        assert RangeMapping.model_validate(valid_mapping_data).model_dump() == valid_mapping_data

    def test_invalid_nested_interval(self, valid_mapping_data) -> None:
        """Неверный тип вложенного интервала отклоняется"""
        valid_mapping_data["source"]["start"] = "low"
        with pytest.raises(ValidationError):
            RangeMapping.model_validate(valid_mapping_data)
