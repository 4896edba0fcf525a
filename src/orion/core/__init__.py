"""
Parsing and validation of the logger's domain values.

- `Unit`: one of `V`, `Ω`, `A`, `W`, `K`, `s`, `kg`
- `Device`: `port@node.driver`
- `Measurement`: `value[unit]`
- `MeasurementsList`: measurements separated by single spaces

Everything here is pure: no I/O, no logging, immutable results. Failures are
raised as the typed errors in `orion.core.errors`, except for `Device`
constructors which return None.

Examples
--------
```python
from orion.core import Device, MeasurementsList

device = Device.from_slug("temp1@core-isa-000.lm-sensors")
data = MeasurementsList.parse("3.0[V] -5[A]")
str(data)  # '3[V] -5[A]'
```
"""

from .device import Device
from .errors import (
    InvalidDeviceError,
    MeasurementErrorKind,
    MeasurementsListErrorKind,
    OrionError,
    ParseMeasurementError,
    ParseMeasurementsListError,
    ParseUnitError,
)
from .measurement import Measurement
from .measurements_list import MeasurementsList
from .unit import Unit

__all__ = [
    "Device",
    "Unit",
    "Measurement",
    "MeasurementsList",
    "OrionError",
    "InvalidDeviceError",
    "ParseUnitError",
    "ParseMeasurementError",
    "ParseMeasurementsListError",
    "MeasurementErrorKind",
    "MeasurementsListErrorKind",
]
