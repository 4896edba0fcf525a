"""Device identifiers.

A device is addressed by a slug of the form `port@node.driver`, e.g.
`temp1@core-isa-000.lm-sensors`. Each part may only contain ASCII letters,
digits, `_` or `-` (and may be empty).

Separator handling
------------------
Historically the node/driver separator was validated with an unescaped
regex `.`, so any single character was accepted there. `strict=True` (the
default) requires a literal `.`; `strict=False` keeps the old wildcard
behaviour for slugs recorded by older tools.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidDeviceError

_PART = r"[\w-]*"

_SLUG_RE = {
    True: re.compile(rf"({_PART})@({_PART})\.({_PART})", re.ASCII),
    False: re.compile(rf"({_PART})@({_PART}).({_PART})", re.ASCII),
}


@dataclass(frozen=True, eq=False)
class Device:
    """Immutable, validated device identifier.

    Construct through `from_parts` or `from_slug`, which return None for
    invalid input. Calling `Device(port, node, driver)` directly raises
    `InvalidDeviceError` instead.

    Attributes
    ----------
    port : str
    node : str
    driver : str
    slug : str
        `port@node.driver`
    """

    port: str
    node: str
    driver: str

    def __post_init__(self):
        if not all(isinstance(p, str) for p in self.parts):
            raise InvalidDeviceError(repr(self.parts))
        if not self.is_valid_slug(self.slug):
            raise InvalidDeviceError(self.slug)

    # ------------------------------------------------------------------------

    @classmethod
    def from_parts(
        cls, port: str, node: str, driver: str, strict: bool = True
    ) -> Optional[Device]:
        """Build a device from its three parts, None if they are invalid.

        ```python
        >>> Device.from_parts("port-10", "node_2", "drivers1").slug
        'port-10@node_2.drivers1'
        >>> Device.from_parts("port$", "node", "driver") is None
        True
        ```
        """
        if not all(isinstance(p, str) for p in (port, node, driver)):
            return None
        if not cls.is_valid_slug(f"{port}@{node}.{driver}", strict=strict):
            return None
        return cls(port, node, driver)

    @classmethod
    def from_slug(cls, slug: str, strict: bool = True) -> Optional[Device]:
        """Parse a `port@node.driver` slug, None if it does not match.

        With `strict=False` any single character separates node and driver,
        and the canonical slug of the result uses `.`.
        """
        if not isinstance(slug, str):
            return None
        match = _SLUG_RE[strict].fullmatch(slug)
        if match is None:
            return None
        port, node, driver = match.groups()
        return cls(port, node, driver)

    @staticmethod
    def is_valid_slug(slug: str, strict: bool = True) -> bool:
        return isinstance(slug, str) and _SLUG_RE[strict].fullmatch(slug) is not None

    # ------------------------------------------------------------------------

    @property
    def slug(self) -> str:
        return f"{self.port}@{self.node}.{self.driver}"

    @property
    def parts(self) -> tuple[str, str, str]:
        return (self.port, self.node, self.driver)

    def __eq__(self, other):
        if not isinstance(other, Device):
            return NotImplemented
        return self.slug == other.slug

    def __hash__(self):
        return hash(self.slug)

    def __str__(self):
        return self.slug

    def __repr__(self):
        return f"Device({self.slug!r})"
