"""A timestamped set of measurements from one device."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from orion.core import Device, MeasurementsList


@dataclass(frozen=True)
class MeasurementPoint:
    """One line of a device's data file.

    Validated on construction so that nothing is written for an incomplete
    point: `date` must be timezone-aware (it is stored in UTC) and `data`
    must hold at least one measurement.

    Attributes
    ----------
    date : datetime
        Time of the measurements, UTC.
    device : Device
        Source of the measurements.
    data : MeasurementsList
        The measurements themselves, in input order.
    """

    date: datetime
    device: Device
    data: MeasurementsList

    def __post_init__(self):
        if not isinstance(self.date, datetime) or self.date.tzinfo is None:
            raise ValueError(
                f"Measurement point needs an aware datetime: {self.date!r}"
            )
        if not isinstance(self.device, Device):
            raise TypeError(f"Expected a Device, got {type(self.device).__name__}")
        if not isinstance(self.data, MeasurementsList) or self.data.is_empty():
            raise ValueError("Measurement point needs at least one measurement")
        object.__setattr__(self, "date", self.date.astimezone(timezone.utc))

    @classmethod
    def now(cls, device: Device, data: MeasurementsList) -> MeasurementPoint:
        return cls(datetime.now(timezone.utc), device, data)

    @property
    def timestamp(self) -> str:
        """RFC3339 text of `date`, always with microseconds.

        e.g. `2015-06-01T12:00:00.000000+00:00`
        """
        return self.date.isoformat(timespec="microseconds")

    def to_line(self) -> str:
        return f"{self.timestamp} {self.data}\n"
