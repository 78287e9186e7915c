import logging
from typing import Generator

import pytest

from restbuilder import Request
from restbuilder._utils import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None, None, None]:
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_debug_level(self):
        logger = setup_logging(debug=True)
        assert logger.name == "restbuilder"
        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_warning_level(self):
        logger = setup_logging(debug=False)
        assert logger.level == logging.WARNING

    def test_handler_added_once(self):
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers = []
        setup_logging(debug=True)
        setup_logging(debug=True)
        assert len(logger.handlers) == 1

    def test_request_debug_flag_enables_logging(self):
        Request("https://api.example/", debug=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
