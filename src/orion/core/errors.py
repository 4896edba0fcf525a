"""Error types raised by the parsing and validation core.

Every parse failure is a typed exception carrying a `kind` (a closed `Enum`)
and, where an inner parse failed first, the wrapped inner error as `cause`.
The inner error is also chained as `__cause__`, so tracebacks show both.

Hierarchy
---------
```
OrionError
├── ParseUnitError
├── InvalidDeviceError
├── ParseMeasurementError        (kind: MeasurementErrorKind)
└── ParseMeasurementsListError   (kind: MeasurementsListErrorKind)
```
All of them are also `ValueError`s.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class OrionError(Exception):
    """Base exception for orion errors."""

    pass


class MeasurementErrorKind(Enum):
    INVALID_FORMAT = "Invalid format"
    INVALID_VALUE = "Invalid value"
    INVALID_UNIT = "Invalid unit"


class MeasurementsListErrorKind(Enum):
    INVALID_FORMAT = "Invalid format"
    INVALID_MEASUREMENT = "Invalid measurement"


class _ParseError(OrionError, ValueError):
    def __init__(self, kind: Enum, text: str, cause: Optional[Exception] = None):
        super().__init__(f"{kind.value}: {text!r}")
        self.kind = kind
        self.text = text
        self.cause = cause

    @property
    def description(self) -> str:
        return self.kind.value


class ParseUnitError(OrionError, ValueError):
    """Text is not one of the canonical unit symbols."""

    description = "Invalid format or unit"

    def __init__(self, text):
        super().__init__(f"{self.description}: {text!r}")
        self.text = text


class InvalidDeviceError(OrionError, ValueError):
    """Device parts do not form a valid `port@node.driver` slug."""

    def __init__(self, slug: str):
        super().__init__(f"Invalid device slug: {slug!r}")
        self.slug = slug


class ParseMeasurementError(_ParseError):
    """A single `value[unit]` token failed to parse.

    `cause` is the `ValueError` from the float conversion for
    `INVALID_VALUE`, the `ParseUnitError` for `INVALID_UNIT`, and None for
    `INVALID_FORMAT`.
    """

    kind: MeasurementErrorKind


class ParseMeasurementsListError(_ParseError):
    """A space-separated measurements string failed to parse.

    `cause` is the first `ParseMeasurementError` for `INVALID_MEASUREMENT`.
    """

    kind: MeasurementsListErrorKind
