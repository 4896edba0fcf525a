import pytest
from loguru import logger


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks test as slow running test (real server sockets)"
    )


@pytest.fixture(autouse=True)
def reset_log():
    """Drop loguru sinks added during a test."""
    yield
    logger.remove()
