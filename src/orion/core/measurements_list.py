"""Ordered, space-separated sequences of measurements."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .errors import (
    MeasurementsListErrorKind,
    ParseMeasurementError,
    ParseMeasurementsListError,
)
from .measurement import Measurement

# a bracketed unit anywhere in the string
_TOKEN_RE = re.compile(r"\[[^\[\] ]*\]")


class MeasurementsList:
    """Measurements in input order, e.g. `3[V] -5[A]`.

    Parsing never produces an empty list; an empty list only comes from
    `MeasurementsList.empty()` and is rejected when building a
    `MeasurementPoint`.
    """

    __slots__ = ("_items",)

    def __init__(self, measurements: Iterable[Measurement] = ()):
        self._items: tuple[Measurement, ...] = tuple(measurements)

    @classmethod
    def empty(cls) -> MeasurementsList:
        return cls()

    @classmethod
    def parse(cls, text: str) -> MeasurementsList:
        """Parse measurements separated by single spaces.

        Raises
        ------
        ParseMeasurementsListError
            kind INVALID_FORMAT if nothing in the text looks like
            `value[unit]`; kind INVALID_MEASUREMENT, wrapping the
            `ParseMeasurementError`, for the first token that fails.

        Notes
        -----
        Leading, trailing or doubled spaces produce empty tokens, which fail
        as INVALID_MEASUREMENT wrapping INVALID_FORMAT.
        """
        if _TOKEN_RE.search(text) is None:
            raise ParseMeasurementsListError(
                MeasurementsListErrorKind.INVALID_FORMAT, text
            )

        items = []
        for token in text.split(" "):
            try:
                items.append(Measurement.parse(token))
            except ParseMeasurementError as err:
                raise ParseMeasurementsListError(
                    MeasurementsListErrorKind.INVALID_MEASUREMENT, text, cause=err
                ) from err
        return cls(items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other):
        if not isinstance(other, MeasurementsList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self):
        return hash(self._items)

    def __str__(self):
        return " ".join(str(m) for m in self._items)

    def __repr__(self):
        return f"MeasurementsList({str(self)!r})"
