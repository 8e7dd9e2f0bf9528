import logging

from utils.config import Settings
from utils.logger import setup_logger


def test_setup_logger_creates_log_dir_and_handlers(tmp_path):
    settings = Settings(log_dir=tmp_path / "logs")
    logger = setup_logger(settings)

    assert logger.name == "stockfeed"
    assert logger.level == logging.INFO
    assert (tmp_path / "logs").is_dir()
    assert len(logger.handlers) == 2


def test_setup_logger_is_idempotent(tmp_path):
    settings = Settings(log_dir=tmp_path)
    first = setup_logger(settings)
    second = setup_logger(settings)

    assert first is second
    assert len(second.handlers) == 2


def test_child_loggers_reach_the_log_file(tmp_path):
    settings = Settings(log_dir=tmp_path)
    logger = setup_logger(settings)

    logging.getLogger("stockfeed.ledger").error("Stock level negative: A")
    for handler in logger.handlers:
        handler.flush()

    text = (tmp_path / "stockfeed.log").read_text(encoding="utf-8")
    assert "[ERROR] stockfeed.ledger: Stock level negative: A" in text
