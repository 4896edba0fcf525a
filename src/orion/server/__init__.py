# -*- coding: utf-8 -*-
"""
Logger server and client.

The server runs in the foreground (`orion-logger server start`) and accepts
measurement points over a ZeroMQ request/reply socket. Clients use the
functions below to talk to it.

Examples
--------
```python
from orion.server import add_point, close_connection, open_connection, stop_server

conn = open_connection()
add_point(conn, "temp1@core-isa-000.lm-sensors", "21.5[K]")
stop_server(conn)
close_connection(conn)
```

See Also
--------
orion.server.client : Client-side communication functions
orion.server.server : Server implementation
"""

from .client import (
    add_point,
    close_connection,
    echo,
    open_connection,
    ping,
    stop_server,
)
from .server import start_server
