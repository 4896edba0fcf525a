"""A single measured value tagged with its unit, written `value[unit]`."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .errors import MeasurementErrorKind, ParseMeasurementError, ParseUnitError
from .unit import Unit

MEASUREMENT_RE = re.compile(r"([^\[\]]*)\[([^\[\]]*)\]")

# sign, mantissa, exponent; or the special values
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_value(text: str) -> float:
    """Parse a float literal, rejecting whitespace and `_` digit separators.

    Raises ValueError for anything else. Out-of-range literals give +/-inf.
    """
    if _FLOAT_RE.fullmatch(text) is None:
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def format_value(value: float) -> str:
    """Shortest round-tripping text, integral values without a trailing `.0`."""
    if math.isfinite(value) and value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Measurement:
    """A value and its unit.

    Examples
    --------
    ```python
    >>> m = Measurement.parse("-4.1[A]")
    >>> m.value, m.unit
    (-4.1, <Unit.AMPERE: 'A'>)
    >>> str(Measurement(3.0, Unit.VOLT))
    '3[V]'
    ```
    """

    value: float
    unit: Unit

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, text: str) -> Measurement:
        """Parse `value[unit]`.

        Raises
        ------
        ParseMeasurementError
            kind INVALID_FORMAT if the text is not `value[unit]`,
            INVALID_VALUE if value is not a float, INVALID_UNIT if unit is
            not a known symbol, checked in that order.
        """
        match = MEASUREMENT_RE.fullmatch(text)
        if match is None:
            raise ParseMeasurementError(MeasurementErrorKind.INVALID_FORMAT, text)
        raw_value, raw_unit = match.groups()

        try:
            value = parse_value(raw_value)
        except ValueError as err:
            raise ParseMeasurementError(
                MeasurementErrorKind.INVALID_VALUE, text, cause=err
            ) from err

        try:
            unit = Unit.parse(raw_unit)
        except ParseUnitError as err:
            raise ParseMeasurementError(
                MeasurementErrorKind.INVALID_UNIT, text, cause=err
            ) from err

        return cls(value, unit)

    def __str__(self):
        return f"{format_value(self.value)}[{self.unit}]"
