import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """CLI runs rebind the loguru sink; restore the default after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
