import logging

import pytest


@pytest.fixture(autouse=True)
def _detach_package_handlers():
    """setup_logging() binds handlers to the captured stdout of one test; drop them afterwards."""
    yield
    logger = logging.getLogger("hull_stepper")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
