"""SI units accepted in measurement strings."""

from __future__ import annotations

from enum import Enum

from .errors import ParseUnitError


class Unit(Enum):
    """Closed set of units, each valued by its canonical symbol.

    Examples
    --------
    ```python
    >>> Unit.parse("V")
    <Unit.VOLT: 'V'>
    >>> str(Unit.OHM)
    'Ω'
    ```
    """

    VOLT = "V"
    OHM = "Ω"  # Greek capital omega, not U+2126 OHM SIGN
    AMPERE = "A"
    WATT = "W"
    KELVIN = "K"
    SECOND = "s"
    KILOGRAM = "kg"

    @classmethod
    def parse(cls, text: str) -> Unit:
        """Parse an exact unit symbol. Raises ParseUnitError otherwise."""
        if not isinstance(text, str):
            raise ParseUnitError(text)
        try:
            return cls(text)
        except ValueError:
            raise ParseUnitError(text) from None

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self):
        return self.value
