"""Canned user-facing messages printed by the CLI."""

from orion.core import (
    MeasurementErrorKind,
    MeasurementsListErrorKind,
    ParseMeasurementsListError,
)

COPYRIGHT = """
Copyright © 2015 Samuel Dolt <samuel@dolt.ch>
License GPLv3+: GNU GPL version 3 or later <http://gnu.org/licenses/gpl.html>

This is free software: you are free to change or redistribute it.
There is NO WARRANTY, to the extent permitted by law.
"""

INVALID_TIMESTAMP = """
Invalid timestamp - Timestamp must be a valid IETF RFC3339 string.

Example:

  - 1985-04-12T23:20:50.52Z

    Represents 20 minutes and 50.52 seconds after the 23rd hour of
    April 12th, 1985 in UTC

More info at `https://www.ietf.org/rfc/rfc3339.txt`
"""

INVALID_VALUE = """
Invalid value - Value should represent one or more measurements

Example:

  - 9[V]
  - 9[V] 3[A] 5[K]

Valid unit:
  - [V]  for Volt
  - [A]  for Ampere
  - [Ω]  for Ohm
  - [W]  for Watt
  - [K]  for Kelvin
  - [s]  for second
  - [kg] for Kilogram
"""

INVALID_DEVICE = """
Invalid device - Device should be port@node.driver

Example:

  - temp1@core-isa-000.lm-sensors
  - temp_0@arduino100.arduino_usb
"""

_VALUE_REASONS = {
    MeasurementsListErrorKind.INVALID_FORMAT: (
        "no measurement of the form value[unit] found"
    ),
    MeasurementErrorKind.INVALID_FORMAT: (
        "measurements must be value[unit], separated by one space"
    ),
    MeasurementErrorKind.INVALID_VALUE: "value is not a number",
    MeasurementErrorKind.INVALID_UNIT: "unknown unit",
}


def invalid_value_message(err: ParseMeasurementsListError) -> str:
    """INVALID_VALUE preceded by the reason for this particular failure."""
    inner = err.cause if err.cause is not None else err
    reason = _VALUE_REASONS[inner.kind]
    return f"\nIn {inner.text!r}: {reason}\n{INVALID_VALUE}"
