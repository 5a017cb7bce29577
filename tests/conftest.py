import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    # configure_logging binds its handler to whatever sys.stderr was current
    yield
    logger = logging.getLogger("settingsflat")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
