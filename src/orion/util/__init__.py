# -*- coding: utf-8 -*-
"""
Utility functions and constants for orion.

- Logging configuration (loguru)
- RFC3339 timestamp validation
- Appending measurement points to data files

Examples
--------
```python
from orion.core import Device, MeasurementsList
from orion.types import MeasurementPoint
from orion.util import add_value

point = MeasurementPoint.now(
    Device.from_slug("temp1@core-isa-000.lm-sensors"),
    MeasurementsList.parse("21.5[K]"),
)
add_value(point, "/tmp/data")
```
"""

from .defaults import (
    DATA_PATH_ENVVAR,
    DEFAULT_DATA_PATH,
    DEFAULT_HOST_ADDR,
    DEFAULT_LOGLEVEL,
    DEFAULT_PORT,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    SINGLE_LINE_ERR_LOG,
    TEST_LOGLEVEL,
)
from .logging import (
    clear_log,
    format_error_response,
    log_default_path_client,
    log_default_path_server,
    log_level_from_flags,
    shutdown_client_log,
    start_client_log,
    start_server_log,
)
from .save import LAYOUTS, add_value, build_point, create_line_for, path_for
from .timestamp import (
    InvalidTimestampError,
    is_rfc3339_timestamp,
    is_rfc3339_utc_timestamp,
    parse_rfc3339,
)
