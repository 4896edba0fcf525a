# -*- coding: utf-8 -*-
"""
Client side of the logger request/reply interface.

Each public function wraps one server command (see `orion.server.server`)
and sends it with `_send_request`, which turns `ErrorResponse`s into
`CommsError`s.
"""

# ============================================================================

from __future__ import annotations

from typing import Optional

import zmq
from loguru import logger

from orion.types import (
    CONSTS,
    ClientConnection,
    CommsError,
    ErrorResponse,
    MsgResponse,
    Request,
    Response,
)
from orion.util import DEFAULT_HOST_ADDR, DEFAULT_PORT, DEFAULT_RETRIES, DEFAULT_TIMEOUT

# ============================================================================


def open_connection(
    host: str = DEFAULT_HOST_ADDR, msg_port: int = DEFAULT_PORT
) -> ClientConnection:
    """Open a REQ socket to the server.

    ZeroMQ connects lazily, so this never blocks; use `ping` to check the
    server is actually there.
    """
    logger.info("Connecting to server on {}:{}.", host, msg_port)
    context = zmq.Context()
    msg_socket = _new_socket(context, host, msg_port)
    return ClientConnection(context, msg_socket, host, msg_port)


def _new_socket(context: zmq.Context, host: str, msg_port: int) -> zmq.Socket:
    msg_socket = context.socket(zmq.REQ)
    msg_socket.connect(f"tcp://{host}:{msg_port}")
    return msg_socket


# ============================================================================


def close_connection(client_connection: ClientConnection):
    """Close the connection to the server.

    Arguments
    ---------
    client_connection : ClientConnection
        The connection object to close.
    """
    logger.info("Closing connection.")
    try:
        client_connection.msg_socket.setsockopt(zmq.LINGER, 0)
        client_connection.msg_socket.close()
    except zmq.ZMQError as e:
        logger.debug(f"Error closing socket: {e}")
    try:
        client_connection.context.term()
    except zmq.ZMQError as e:
        logger.debug(f"Error terminating ZMQ context: {e}")


# ============================================================================


def _get_response(
    client_connection: ClientConnection,
    request: Request,
    request_retries: int = DEFAULT_RETRIES,
    timeout: float = DEFAULT_TIMEOUT,
) -> Response:
    """Read a single response from the server (ZMQ lazy pirate).

    - Poll the REQ socket and receive only when a reply has arrived
    - Reconnect and resend the request if no reply arrives within timeout
    - Abandon the transaction after `request_retries` retries

    Raises
    ------
    CommsError
        If the server appears to be offline after retries.
    """
    retries_left = request_retries + 1  # (+1 to account for the first attempt)

    logger.debug("*REQUEST* (client->): {}", request)
    client_connection.msg_socket.send(request.to_msgpack())
    while True:
        try:
            if client_connection.msg_socket.poll(int(1000 * timeout), zmq.POLLIN):
                resp = Response.from_msgpack(client_connection.msg_socket.recv())
                logger.debug("*RESPONSE* (client<-): {}", resp)
                return resp
        except zmq.ZMQError as e:
            logger.warning(f"ZMQ error: {e}")

        retries_left -= 1
        logger.warning("No response from server...")
        # Socket is confused. Close and remove it.
        client_connection.msg_socket.setsockopt(zmq.LINGER, 0)
        client_connection.msg_socket.close()
        if retries_left == 0:
            logger.error("Server seems to be offline, abandoning.")
            # leave a usable socket behind for close_connection
            client_connection.msg_socket = _new_socket(
                client_connection.context,
                client_connection.host,
                client_connection.msg_port,
            )
            raise CommsError(
                f"No response from server on "
                f"{client_connection.host}:{client_connection.msg_port}"
            )

        logger.info("Reconnecting to server...")
        client_connection.msg_socket = _new_socket(
            client_connection.context,
            client_connection.host,
            client_connection.msg_port,
        )
        logger.info("Resending {}", request.command)
        client_connection.msg_socket.send(request.to_msgpack())


def _send_request(
    client_connection: ClientConnection,
    request: Request,
    request_retries: int = DEFAULT_RETRIES,
    timeout: float = DEFAULT_TIMEOUT,
) -> MsgResponse:
    """Send a request to the server and get a response.

    Raises
    ------
    CommsError
        If the server returns an error or does not answer.
    """
    resp = _get_response(client_connection, request, request_retries, timeout)
    if isinstance(resp, ErrorResponse):
        logger.error("Error during {}: '{}'", request.command, resp.value)
        raise CommsError(f"Error returned from {request.command}: {resp.value}")
    return resp


# ====================================================================================
# -----------------
# INTERFACE METHODS
# -----------------
# ====================================================================================


def ping(
    client_connection: ClientConnection,
    request_retries: int = DEFAULT_RETRIES,
    timeout: float = DEFAULT_TIMEOUT,
) -> bool:
    resp = _send_request(
        client_connection, Request(CONSTS.COMMS.PING), request_retries, timeout
    )
    return resp.value == CONSTS.COMMS.PONG


def echo(
    client_connection: ClientConnection,
    msg: str,
    request_retries: int = DEFAULT_RETRIES,
) -> str:
    resp = _send_request(
        client_connection, Request(CONSTS.COMMS.ECHO, {"msg": msg}), request_retries
    )
    return resp.value


def add_point(
    client_connection: ClientConnection,
    device: str,
    value: str,
    timestamp: Optional[str] = None,
    request_retries: int = DEFAULT_RETRIES,
) -> str:
    """Ask the server to log `value` for `device`.

    `timestamp` is RFC3339 text, or None for the server's current time.
    Validation happens on the server; a rejected point raises CommsError.
    """
    params = {"device": device, "value": value, "timestamp": timestamp}
    resp = _send_request(
        client_connection, Request(CONSTS.COMMS.ADD, params), request_retries
    )
    return resp.value


def stop_server(
    client_connection: ClientConnection, request_retries: int = DEFAULT_RETRIES
) -> str:
    resp = _send_request(
        client_connection, Request(CONSTS.COMMS.STOP), request_retries
    )
    return resp.value
