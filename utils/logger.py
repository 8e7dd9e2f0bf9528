# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler

from utils.config import Settings

def setup_logger(settings: Settings | None = None):
    """
    Configure the root logger of the stock feed.

    Features:
    - Daily rotating log files (one file per day)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates the log directory automatically

    Components log through children of this logger ("stockfeed.ledger",
    "stockfeed.feed"), so their records end up in the same handlers.
    """
    if settings is None:
        settings = Settings()

    # Create log directory if not exists
    log_dir = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / settings.log_file

    logger = logging.getLogger(settings.logger_name)
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=settings.backup_count,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.debug("Logger initialized (daily rotation enabled)")
    return logger
