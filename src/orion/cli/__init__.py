"""
Command-line interface for the orion logger.

Built on Click, with a hierarchical command structure.

Examples
--------
Logging two measurements with the current time:
```bash
$ orion-logger add "3.0[V] -5[A]" --now from temp1@core-isa-000.lm-sensors
```

Logging with an explicit timestamp:
```bash
$ orion-logger add "21.5[K]" --timestamp 1985-04-12T23:20:50.52Z from t0@a100.usb
```

Running the logger server, and stopping it from another shell:
```bash
$ orion-logger -v server start
$ orion-logger server stop
```

CLI Tree
--------

```
$ orion-logger --tree
cli
└── add
└── server
    └── ping
    └── start
    └── stop
```

See Also
--------
orion.server : Server-client communication
orion.core : Parsing of devices and measurements
"""

from .base import cli, tree_option
