import asyncio

import click
from click.core import ParameterSource
from loguru import logger

from orion._version import __version__
from orion.core import InvalidDeviceError, ParseMeasurementsListError
from orion.server import (
    add_point,
    close_connection,
    open_connection,
    ping,
    start_server,
    stop_server,
)
from orion.types import CommsError
from orion.util import (
    DATA_PATH_ENVVAR,
    DEFAULT_DATA_PATH,
    DEFAULT_HOST_ADDR,
    DEFAULT_PORT,
    DEFAULT_RETRIES,
    LAYOUTS,
    InvalidTimestampError,
    add_value,
    build_point,
    log_level_from_flags,
    shutdown_client_log,
    start_client_log,
)

from .messages import (
    COPYRIGHT,
    INVALID_DEVICE,
    INVALID_TIMESTAMP,
    invalid_value_message,
)


def print_tree(cmd, prefix="", parent_ctx=None):
    """Print command tree starting from given command."""
    ctx = click.Context(cmd, info_name=cmd.name, parent=parent_ctx)

    # Only print root name if no parent
    if not parent_ctx:
        click.echo(cmd.name)

    for sub in sorted(cmd.list_commands(ctx)):
        sub_cmd = cmd.get_command(ctx, sub)
        click.echo(f"{prefix}└── {sub}")
        if isinstance(sub_cmd, click.Group):
            print_tree(sub_cmd, prefix + "    ", ctx)


def tree_option(f):
    """Add --tree option to command."""

    def callback(ctx, param, value):
        if not value or ctx.resilient_parsing:
            return
        print_tree(ctx.command)
        ctx.exit()

    return click.option(
        "--tree",
        is_flag=True,
        help="Show command tree from this point",
        expose_value=False,
        is_eager=True,
        callback=callback,
    )(f)


def host_options(f):
    """Add the server address options to a command."""
    f = click.option(
        "--msg-port",
        "-mp",
        default=DEFAULT_PORT,
        type=int,
        help=f"Server message port (default: {DEFAULT_PORT})",
    )(f)
    return click.option(
        "--host-address",
        "-ha",
        default=DEFAULT_HOST_ADDR,
        help="Server network address (default: localhost)",
    )(f)


def data_options(f):
    """Add the data directory options to a command."""
    f = click.option(
        "--layout",
        type=click.Choice(LAYOUTS),
        default="daily",
        help="daily: driver/node/port/Y/M/D/data.txt, flat: driver/node/port.txt",
    )(f)
    return click.option(
        "--data-path",
        "-d",
        envvar=DATA_PATH_ENVVAR,
        default=DEFAULT_DATA_PATH,
        help=f"Root directory for data files (default: {DEFAULT_DATA_PATH}, "
        + f"env: {DATA_PATH_ENVVAR})",
    )(f)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--debug", is_flag=True, help="Very verbose output.")
@click.version_option(
    __version__,
    prog_name="Orion-Logger",
    message="%(prog)s (Orion-Backend) %(version)s\n" + COPYRIGHT,
)
@tree_option
@click.pass_context
def cli(ctx, verbose, debug):
    """Orion Logger - log measurements from devices to flat files.

    Combining --verbose and --debug enables trace level messages.
    """
    log_level = log_level_from_flags(verbose, debug)
    ctx.obj = {"log_level": log_level}
    start_client_log(log_level=log_level)
    ctx.call_on_close(shutdown_client_log)


@cli.command()
@click.argument("value")
@click.argument("from_", metavar="from", type=click.Choice(["from"]))
@click.argument("device")
@click.option("--now", is_flag=True, help="Use current time as timestamp")
@click.option(
    "--timestamp", "-t", default="", help="Use an IETF RFC3339 timestamp"
)
@data_options
@click.option(
    "--remote/--local",
    default=False,
    help="Send to a running logger server instead of writing directly",
)
@host_options
@click.pass_context
def add(
    ctx,
    value,
    from_,
    device,
    now,
    timestamp,
    data_path,
    layout,
    remote,
    host_address,
    msg_port,
):
    """Log a new set of measurements.

    VALUE is one or more measurements separated by single spaces, e.g.
    "9[V] 3[A]". DEVICE is port@node.driver. Use -- before a VALUE that
    starts with a minus sign.

    \b
    Example:
      orion-logger add "3.0[V] -5[A]" --now from temp1@core-isa-000.lm-sensors
    """
    if now == bool(timestamp):
        raise click.UsageError("Must use exactly one of --now or --timestamp.")
    if remote:
        for param in ("data_path", "layout"):
            if ctx.get_parameter_source(param) is ParameterSource.COMMANDLINE:
                raise click.UsageError(
                    "--data-path and --layout are set by the server, "
                    + "not with --remote."
                )

    try:
        point = build_point(device, value, None if now else timestamp)
    except InvalidTimestampError as e:
        logger.debug("Rejected timestamp: {}", e)
        click.echo(INVALID_TIMESTAMP, err=True)
        ctx.exit(1)
    except ParseMeasurementsListError as e:
        logger.debug("Rejected value: {}", e)
        click.echo(invalid_value_message(e), err=True)
        ctx.exit(1)
    except InvalidDeviceError as e:
        logger.debug("Rejected device: {}", e)
        click.echo(INVALID_DEVICE, err=True)
        ctx.exit(1)

    if remote:
        conn = open_connection(host_address, msg_port)
        try:
            add_point(conn, point.device.slug, str(point.data), point.timestamp)
        except CommsError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        finally:
            close_connection(conn)
        return

    try:
        path = add_value(point, data_path, layout)
    except OSError as e:
        logger.exception("Error appending measurement point.")
        click.echo(f"Error: could not write data file: {e}", err=True)
        ctx.exit(1)
    logger.info("Logged {} to {}", point.device, path)


@cli.group()
@tree_option
def server():
    """Manage orion-logger server."""
    pass


@server.command()
@host_options
@data_options
@click.option(
    "--log-to-file/--no-log-to-file",
    "-ltf/",
    default=True,
    help="Enable/disable logging to file (default: enabled)",
)
@click.option(
    "--log-to-stdout/--no-log-to-stdout",
    "-lts/",
    default=True,
    help="Enable/disable console logging (default: enabled)",
)
@click.option(
    "--log-path",
    "-lp",
    default="",
    help="Custom path for log file (default: ~/.orion/server.log)",
)
@click.option(
    "--clear-prev-log/--no-clear-prev-log",
    "-c/",
    default=True,
    help="Clear previous log file on startup (default: enabled)",
)
@click.option(
    "--log-level",
    "-ll",
    default=None,
    help="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR) "
    + "(default: from -v/--debug)",
)
@click.pass_context
def start(ctx, **kwargs):
    """Start the logger server in the foreground.

    Accepts measurement points over the network until stopped with
    `orion-logger server stop`.
    """
    if kwargs["log_level"] is None:
        kwargs["log_level"] = ctx.find_root().obj["log_level"]
    kwargs["host"] = kwargs.pop("host_address")
    asyncio.run(start_server(**kwargs))


@server.command()
@host_options
@click.option(
    "--retries",
    "-r",
    default=DEFAULT_RETRIES,
    type=int,
    help=f"Times to retry an unanswered request (default: {DEFAULT_RETRIES})",
)
@click.pass_context
def stop(ctx, host_address, msg_port, retries):
    """Ask a running logger server to stop."""
    conn = open_connection(host_address, msg_port)
    try:
        reply = stop_server(conn, request_retries=retries)
    except CommsError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    finally:
        close_connection(conn)
    click.echo(f"Recv '{reply}'.")


@server.command(name="ping")
@host_options
@click.option(
    "--retries",
    "-r",
    default=0,
    type=int,
    help="Times to retry an unanswered request (default: 0)",
)
@click.pass_context
def ping_server(ctx, host_address, msg_port, retries):
    """Check that a logger server is answering."""
    conn = open_connection(host_address, msg_port)
    try:
        ok = ping(conn, request_retries=retries)
    except CommsError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    finally:
        close_connection(conn)
    status = "up" if ok else "answering unexpectedly"
    click.echo(f"Server on {host_address}:{msg_port} is {status}.")
