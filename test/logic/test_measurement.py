import math

import pytest

from orion.core import (
    Measurement,
    MeasurementErrorKind,
    ParseMeasurementError,
    ParseUnitError,
    Unit,
)
from orion.core.measurement import format_value, parse_value


def test_measurement_parse():
    m = Measurement.parse("3.0[V]")
    assert m.value == 3.0
    assert m.unit is Unit.VOLT

    m = Measurement.parse("-4.1[A]")
    assert m.value == -4.1
    assert m.unit is Unit.AMPERE

    assert Measurement.parse("22[kg]").unit is Unit.KILOGRAM
    assert Measurement.parse("1.5e3[Ω]") == Measurement(1500.0, Unit.OHM)


def test_measurement_parse_invalid_value():
    with pytest.raises(ParseMeasurementError) as excinfo:
        Measurement.parse("4x4[Car]")
    err = excinfo.value
    # value is checked before unit
    assert err.kind is MeasurementErrorKind.INVALID_VALUE
    assert err.text == "4x4[Car]"
    assert isinstance(err.cause, ValueError)
    assert err.__cause__ is err.cause


def test_measurement_parse_invalid_unit():
    with pytest.raises(ParseMeasurementError) as excinfo:
        Measurement.parse("4.4[cars]")
    err = excinfo.value
    assert err.kind is MeasurementErrorKind.INVALID_UNIT
    assert isinstance(err.cause, ParseUnitError)
    assert err.cause.text == "cars"


@pytest.mark.parametrize(
    "text",
    ["", "3.0V", "3[V] ", "3[V][A]", "[3[V]]", "3[V", "3V]", "3[[V]]"],
)
def test_measurement_parse_invalid_format(text):
    with pytest.raises(ParseMeasurementError) as excinfo:
        Measurement.parse(text)
    assert excinfo.value.kind is MeasurementErrorKind.INVALID_FORMAT
    assert excinfo.value.cause is None


@pytest.mark.parametrize(
    "text", [" 3[V]", "1_000[V]", "[V]", "3 [V]", "0x10[V]", "--1[V]", ".[V]"]
)
def test_measurement_parse_rejects_loose_floats(text):
    with pytest.raises(ParseMeasurementError) as excinfo:
        Measurement.parse(text)
    assert excinfo.value.kind is MeasurementErrorKind.INVALID_VALUE


def test_measurement_format():
    assert str(Measurement(3.0, Unit.VOLT)) == "3[V]"
    assert str(Measurement(1.1234, Unit.AMPERE)) == "1.1234[A]"
    assert str(Measurement(-124.0, Unit.KILOGRAM)) == "-124[kg]"
    assert str(Measurement(-12.2, Unit.SECOND)) == "-12.2[s]"
    assert str(Measurement(0.1, Unit.WATT)) == "0.1[W]"


def test_measurement_value_is_float():
    m = Measurement(3, Unit.KELVIN)
    assert isinstance(m.value, float)
    assert str(m) == "3[K]"


def test_measurement_special_values():
    assert Measurement.parse("1e500[V]").value == math.inf
    assert str(Measurement.parse("-inf[V]")) == "-inf[V]"
    assert math.isnan(Measurement.parse("nan[V]").value)
    assert str(Measurement.parse("-0[V]")) == "-0[V]"


@pytest.mark.parametrize(
    "text", ["3[V]", "-5[A]", "1.1234[A]", "0.001[s]", "2.5e-07[Ω]"]
)
def test_measurement_round_trip(text):
    m = Measurement.parse(text)
    assert str(m) == text
    assert Measurement.parse(str(m)) == m


def test_parse_value():
    assert parse_value("+3") == 3.0
    assert parse_value(".5") == 0.5
    assert parse_value("5.") == 5.0
    assert parse_value("1E3") == 1000.0
    assert parse_value("Infinity") == math.inf
    for text in ("", " 1", "1 ", "1_0", "e3", "1e", "one"):
        with pytest.raises(ValueError):
            parse_value(text)


def test_format_value():
    assert format_value(2.0) == "2"
    assert format_value(0.0) == "0"
    assert format_value(-0.0) == "-0"
    assert format_value(0.30000000000000004) == "0.30000000000000004"
    assert format_value(math.inf) == "inf"
