import pytest

from logging_config import configure_logging


@pytest.fixture(autouse=True)
def structured_logging():
    """Route structlog through stdlib logging on the current stderr."""
    configure_logging(level="DEBUG", fmt="text")
    yield
