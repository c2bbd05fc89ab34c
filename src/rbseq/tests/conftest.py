import logging

import pytest

from rbseq.config.settings import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts from the default global settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_rbseq_logger():
    """Undo handler/propagation changes made by setup_logging."""
    logger = logging.getLogger("rbseq")
    level, propagate = logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
