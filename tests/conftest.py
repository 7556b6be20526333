import logging

import pytest

from yamljson.config import get_settings


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog sees yamljson records in every test."""
    yield
    logger = logging.getLogger("yamljson")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    get_settings.cache_clear()
