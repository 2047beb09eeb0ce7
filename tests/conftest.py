from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# IERSCONV Imports
from iersconv.common.behavioral_config import BehavioralConfig


@pytest.fixture(autouse=True)
def _resetConfig() -> None:
    """Make sure every test starts from, and leaves behind, the default configuration.

    Note:
        Tests are free to overwrite config values, the shared config is rebuilt from the bundled
        defaults once they finish.
    """
    yield
    BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
