import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI installs sinks on captured streams; drop them after each test."""
    yield
    logger.remove()
