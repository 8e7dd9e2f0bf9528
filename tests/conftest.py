import logging

import pytest

from services.stock_service import StockLedger


@pytest.fixture
def ledger():
    return StockLedger()


@pytest.fixture(autouse=True)
def reset_app_loggers():
    # setup_logger() attaches handlers once per process; drop them between tests
    yield
    for name in ("stockfeed", "warehouse"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
