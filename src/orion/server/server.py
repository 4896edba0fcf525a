# -*- coding: utf-8 -*-
"""
Server side of the logger request/reply interface.

The server binds a ZeroMQ ROUTER socket and answers fixed-string commands
(see `orion.types.CONSTS`):

- PING -> PONG
- ECHO -> the message back, tagged with the request count
- ADD  -> validate a measurement point and append it to its data file
- STOP -> OK, then the server exits

Each handler receives the server connection, the requester's identity and
the unpacked request, and replies with `_send_response`. `request_router`
maps incoming commands onto handlers via `get_router_map`.
"""
# ============================================================================

import asyncio
from datetime import datetime
from typing import Awaitable, Callable

import zmq
import zmq.asyncio
from loguru import logger
from setproctitle import setproctitle

# ============================================================================
import orion.util
from orion.core import OrionError
from orion.types import (
    CONSTS,
    ErrorResponse,
    MsgResponse,
    Request,
    Response,
    ServerConnection,
)
from orion.util import (
    DEFAULT_DATA_PATH,
    DEFAULT_HOST_ADDR,
    DEFAULT_LOGLEVEL,
    DEFAULT_PORT,
    format_error_response,
)

POLL_INTERVAL = 100  # ms

# ============================================================================


async def _send_response(
    server_connection: ServerConnection, req_identity: bytes, response: Response
):
    logger.debug("*RESPONSE* (server->): {}", response)
    await server_connection.msg_socket.send_multipart(
        [req_identity, b"", response.to_msgpack()]
    )


# ============================================================================


async def client_handler(server_connection: ServerConnection):
    while not server_connection.shutdown_requested:
        if not await server_connection.msg_socket.poll(POLL_INTERVAL, zmq.POLLIN):
            continue
        req_identity, _, req = await server_connection.msg_socket.recv_multipart()
        server_connection.request_count += 1

        # if msg recv'd, convert bytes to object
        try:
            request = Request.from_msgpack(req)
        except Exception:
            logger.exception("Request unpacking error:")
            await _send_response(
                server_connection,
                req_identity,
                ErrorResponse(value=format_error_response()),
            )
            continue

        # now handle the request
        try:
            await request_router(server_connection, req_identity, request)
        except Exception:
            logger.exception("Uncaught error in request_router.")
            await _send_response(
                server_connection,
                req_identity,
                ErrorResponse(value=format_error_response()),
            )

    logger.info("Client handler exiting due to shutdown request")


# ============================================================================


async def start_server(
    host: str = DEFAULT_HOST_ADDR,
    msg_port: int = DEFAULT_PORT,
    data_path: str = DEFAULT_DATA_PATH,
    layout: str = "daily",
    log_to_file: bool = True,
    log_to_stdout: bool = False,
    log_path: str = "",
    clear_prev_log: bool = True,
    log_level: str = DEFAULT_LOGLEVEL,
):
    timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
    setproctitle(f"orion-logger-server_{timestamp}")

    orion.util.start_server_log(
        log_to_file=log_to_file,
        log_to_stdout=log_to_stdout,
        log_path=log_path,
        clear_prev=clear_prev_log,
        log_level=log_level,
    )

    logger.info("Starting msg server on {}:{}", host, msg_port)
    logger.info("Writing data under {} ({} layout)", data_path, layout)

    try:
        context = zmq.asyncio.Context()
        msg_socket = context.socket(zmq.ROUTER)
        msg_socket.bind(f"tcp://{host}:{msg_port}")  # bind on server side
        server_connection = ServerConnection(
            context=context,
            msg_socket=msg_socket,
            host=host,
            msg_port=msg_port,
            data_path=data_path,
            layout=layout,
        )
    except Exception as e:
        logger.exception("Error opening server-side connection.")
        raise e
    try:
        await client_handler(server_connection)
    finally:
        logger.info("Closing connection.")
        msg_socket.setsockopt(zmq.LINGER, 0)
        msg_socket.close()
        context.term()


# ============================================================================


def get_router_map() -> dict[
    str, Callable[[ServerConnection, bytes, Request], Awaitable[None]]
]:
    return {
        CONSTS.COMMS.PING: handle_ping,
        CONSTS.COMMS.STOP: handle_stop,
        CONSTS.COMMS.ECHO: handle_echo,
        CONSTS.COMMS.ADD: handle_add,
    }


async def request_router(
    server_connection: ServerConnection,
    req_identity: bytes,
    request: Request,
):
    logger.debug("*REQUEST* (server<-): {}", request)

    handler_func = get_router_map().get(request.command)
    if handler_func is None:
        logger.error("Unknown request: {}", request.command)
        await _send_response(
            server_connection,
            req_identity,
            ErrorResponse(value=f"Unknown request: {request.command}"),
        )
        return
    await handler_func(server_connection, req_identity, request)


# ============================================================================


async def handle_ping(
    server_connection: ServerConnection, req_identity: bytes, request: Request
):
    """Handle ping request from client."""
    await _send_response(
        server_connection, req_identity, MsgResponse(value=CONSTS.COMMS.PONG)
    )


# ============================================================================


async def handle_stop(
    server_connection: ServerConnection, req_identity: bytes, request: Request
):
    logger.info("Stop requested, shutting down server.")
    server_connection.shutdown_requested = True
    await _send_response(
        server_connection, req_identity, MsgResponse(value=CONSTS.COMMS.OK)
    )
    # let the reply leave before the socket is closed
    await asyncio.sleep(0.1)


# ============================================================================


async def handle_echo(
    server_connection: ServerConnection, req_identity: bytes, request: Request
):
    msg = request.params.get("msg") or ""
    await _send_response(
        server_connection,
        req_identity,
        MsgResponse(value=f"{msg} -> Reply #{server_connection.request_count}"),
    )


# ============================================================================


async def handle_add(
    server_connection: ServerConnection, req_identity: bytes, request: Request
):
    """Validate and store one measurement point.

    Params: `device` (slug), `value` (measurements list), `timestamp`
    (RFC3339, optional; the current time when missing or empty).
    """
    params = request.params
    try:
        point = orion.util.build_point(
            params.get("device") or "",
            params.get("value") or "",
            params.get("timestamp"),
        )
    except OrionError as e:
        logger.warning("Rejected measurement point: {}", e)
        await _send_response(
            server_connection, req_identity, ErrorResponse(value=str(e))
        )
        return

    try:
        path = orion.util.add_value(
            point, server_connection.data_path, server_connection.layout
        )
    except OSError:
        logger.exception("Error writing measurement point.")
        await _send_response(
            server_connection,
            req_identity,
            ErrorResponse(value=format_error_response()),
        )
        return

    logger.info("Logged {} to {}", point.device, path)
    await _send_response(
        server_connection, req_identity, MsgResponse(value=CONSTS.COMMS.OK)
    )
