from loguru import logger

from orion.util import (
    DEFAULT_LOGLEVEL,
    TEST_LOGLEVEL,
    clear_log,
    format_error_response,
    log_default_path_client,
    log_default_path_server,
    log_level_from_flags,
    shutdown_client_log,
    start_client_log,
    start_server_log,
)


def test_log_level_from_flags():
    assert log_level_from_flags() == DEFAULT_LOGLEVEL
    assert log_level_from_flags(verbose=True) == "INFO"
    assert log_level_from_flags(debug=True) == "DEBUG"
    assert log_level_from_flags(verbose=True, debug=True) == "TRACE"


def test_client_log_to_file(tmp_path):
    log_path = tmp_path / "client.log"
    start_client_log(
        log_to_file=True,
        log_to_stdout=False,
        log_path=str(log_path),
        log_level=TEST_LOGLEVEL,
    )
    logger.trace("hello from the test")
    shutdown_client_log()

    text = log_path.read_text()
    assert "Client log started at" in text
    assert "hello from the test" in text


def test_client_log_clears_previous(tmp_path):
    log_path = tmp_path / "client.log"
    log_path.write_text("old run\n")
    start_client_log(log_to_file=True, log_to_stdout=False, log_path=str(log_path))
    shutdown_client_log()
    assert "old run" not in log_path.read_text()


def test_server_log_to_file(tmp_path):
    log_path = tmp_path / "server.log"
    start_server_log(log_path=str(log_path), log_level="INFO")
    logger.info("server line")
    logger.complete()
    logger.remove()
    assert "server line" in log_path.read_text()


def test_clear_log_missing_file(tmp_path):
    clear_log(str(tmp_path / "missing.log"))


def test_default_log_paths():
    assert log_default_path_client().endswith(".orion/client.log")
    assert log_default_path_server().endswith(".orion/server.log")


def test_format_error_response():
    try:
        raise OSError("disk full")
    except OSError:
        text = format_error_response()
    assert "OSError: disk full" in text
