# -*- coding: utf-8 -*-
"""
Loguru configuration for the CLI (client) and the logger server.
"""

import os
import pathlib
import sys
import traceback

from loguru import logger

from .defaults import DEFAULT_LOGLEVEL, SINGLE_LINE_ERR_LOG


def format_error_response():
    err_str = traceback.format_exc()
    if SINGLE_LINE_ERR_LOG:
        return "\t".join(line.strip() for line in err_str.splitlines())
    else:
        return err_str


def log_level_from_flags(verbose: bool = False, debug: bool = False) -> str:
    """Map the CLI verbosity flags onto a loguru level name.

    Both flags together give the most verbose level, TRACE.
    """
    if verbose and debug:
        return "TRACE"
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return DEFAULT_LOGLEVEL


def _start_log(
    role: str,
    log_path: str,
    log_to_file: bool,
    log_to_stdout: bool,
    clear_prev: bool,
    log_level: str,
    enqueue: bool,
):
    if log_to_file and clear_prev:
        clear_log(log_path)

    # drop loguru's default stderr sink (and any sinks from a previous start)
    logger.remove()

    if log_to_file:
        logger.add(log_path, level=log_level, enqueue=enqueue, colorize=False)
    if log_to_stdout:
        logger.add(sys.stderr, level=log_level, enqueue=enqueue, colorize=True)
    if log_to_file:
        logger.info("{} log started at {}", role, log_path)
    else:
        logger.info("{} log started.", role)


def _resolve_log_path(log_path, default: str) -> str:
    if not log_path:
        return default
    return os.path.abspath(log_path)


def start_client_log(
    log_to_file=False,
    log_to_stdout=True,
    log_path=None,
    clear_prev=True,
    log_level=DEFAULT_LOGLEVEL,
):
    """Configure loguru for a short-lived CLI process.

    Logs go to stderr only by default, so stdout stays free for command
    output.
    """
    _start_log(
        "Client",
        _resolve_log_path(log_path, log_default_path_client()),
        log_to_file,
        log_to_stdout,
        clear_prev,
        log_level,
        enqueue=False,
    )


def start_server_log(
    log_to_file=True,
    log_to_stdout=False,
    log_path=None,
    clear_prev=True,
    log_level=DEFAULT_LOGLEVEL,
):
    """Configure loguru for the logger server (enqueued sinks)."""
    _start_log(
        "Server",
        _resolve_log_path(log_path, log_default_path_server()),
        log_to_file,
        log_to_stdout,
        clear_prev,
        log_level,
        enqueue=True,
    )


def log_default_path_client() -> str:
    return str(pathlib.Path.home().joinpath(".orion/client.log"))


def log_default_path_server() -> str:
    return str(pathlib.Path.home().joinpath(".orion/server.log"))


def clear_log(log_path: str):
    """
    Clear the log file at the given path, if it exists.

    Arguments
    ---------
    log_path : str
        The path to the log file. Defaults are given by
        log_default_path_client() and log_default_path_server().
    """
    if os.path.exists(log_path):
        try:
            os.remove(log_path)
        except PermissionError:
            logger.error(
                f"Could not clear log file {log_path}. Permission denied. Continuing."
            )


def shutdown_client_log():
    try:
        logger.info("Closing down client log.")
        logger.remove()
    except Exception:
        logger.exception("Error shutting down client log - skipping.")

