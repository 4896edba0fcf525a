# -*- coding: utf-8 -*-
"""
Appending measurement points to per-device flat files.

Two layouts are supported under the data directory:

- `daily` (default): `<driver>/<node>/<port>/<year>/<month>/<day>/data.txt`
- `flat`: `<driver>/<node>/<port>.txt`

Each point is a single line: `<rfc3339-timestamp> <measurements>`.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from orion.core import Device, InvalidDeviceError, MeasurementsList
from orion.types.point import MeasurementPoint

from .defaults import DATA_FILENAME, DEFAULT_DATA_PATH, FLAT_FILE_EXT
from .timestamp import parse_rfc3339

LAYOUTS = ("daily", "flat")


def build_point(
    device: str, value: str, timestamp: str | None = None, strict: bool = True
) -> MeasurementPoint:
    """Validate raw text arguments into a `MeasurementPoint`.

    Checked in order: timestamp (None means now), value, device.

    Raises
    ------
    InvalidTimestampError
        If `timestamp` is not RFC3339.
    ParseMeasurementsListError
        If `value` is not a list of measurements.
    InvalidDeviceError
        If `device` is not a `port@node.driver` slug.
    """
    date = parse_rfc3339(timestamp) if timestamp else None
    data = MeasurementsList.parse(value)
    dev = Device.from_slug(device, strict=strict)
    if dev is None:
        raise InvalidDeviceError(device)
    if date is None:
        return MeasurementPoint.now(dev, data)
    return MeasurementPoint(date, dev, data)


def path_for(
    mp: MeasurementPoint, data_path: str | Path = DEFAULT_DATA_PATH, layout="daily"
) -> Path:
    """Data file that `mp` belongs in."""
    device = mp.device
    base = Path(data_path).joinpath(device.driver, device.node)
    if layout == "daily":
        return base.joinpath(
            device.port,
            str(mp.date.year),
            str(mp.date.month),
            str(mp.date.day),
            DATA_FILENAME,
        )
    if layout == "flat":
        return base.joinpath(device.port + FLAT_FILE_EXT)
    raise ValueError(f"Unknown data layout {layout!r}, expected one of {LAYOUTS}")


def create_line_for(mp: MeasurementPoint) -> str:
    line = mp.to_line()
    logger.debug("Line: {}", line.rstrip("\n"))
    return line


def add_value(
    mp: MeasurementPoint, data_path: str | Path = DEFAULT_DATA_PATH, layout="daily"
) -> Path:
    """Append `mp` to its data file, creating directories as needed.

    Returns
    -------
    Path
        The file written to.

    Raises
    ------
    OSError
        If the directory or file cannot be created or written.
    """
    file_path = path_for(mp, data_path, layout)
    line = create_line_for(mp)

    logger.debug("Create all parent directories of {}", file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Append line to {}", file_path)
    with file_path.open("a", encoding="utf-8") as f:
        f.write(line)
    return file_path
