"""
Shared types for the logger front-ends.

- `MeasurementPoint`: the validated record written to disk
- Message classes for requests and responses, serialised with MessagePack
  (mashumaro) over ZeroMQ
- Connection dataclasses for both ends of the request/reply socket
- `CONSTS`: the fixed command strings

See Also
--------
orion.core : Domain value parsing
orion.server : Server and client
"""

from __future__ import annotations

from dataclasses import dataclass

import zmq
import zmq.asyncio

from .commands import CONSTS, PROTOCOL
from .messages import ErrorResponse, Message, MsgResponse, Request, Response
from .point import MeasurementPoint


@dataclass
class ClientConnection:
    """Client-side connection information."""

    context: zmq.Context
    msg_socket: zmq.Socket  # REQ socket (sync)
    host: str
    msg_port: int


@dataclass
class ServerConnection:
    """Server-side connection information."""

    context: zmq.asyncio.Context
    msg_socket: zmq.asyncio.Socket  # ROUTER socket
    host: str
    msg_port: int
    data_path: str
    layout: str
    request_count: int = 0
    shutdown_requested: bool = False


class CommsError(Exception):
    """Base exception for communication errors."""

    pass


__all__ = [
    "ClientConnection",
    "ServerConnection",
    "MeasurementPoint",
    "Message",
    "Request",
    "Response",
    "MsgResponse",
    "ErrorResponse",
    "CONSTS",
    "PROTOCOL",
    "CommsError",
]
