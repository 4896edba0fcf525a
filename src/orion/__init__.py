# -*- coding: utf-8 -*-
"""# Orion Logger

Log physical measurements from devices to per-device flat files.

- `orion.core`: parsing and validation of devices, units and measurements
- `orion.types`: the measurement point record and server messages
- `orion.util`: logging, timestamps, data files
- `orion.server`: request/reply logger server and client
- `orion.cli`: the `orion-logger` command
"""

from ._version import __version__
from .core import Device, Measurement, MeasurementsList, Unit
