# main.py
import sys
from pathlib import Path

from utils.config import Settings
from utils.logger import setup_logger
from data.repository import TransactionFileRepository
from services.report_service import ReportService
from services.stock_service import StockLedger
from services.feed_service import StockFeedService


def main(argv=None, settings: Settings | None = None) -> int:
    # Usage: stockfeed [transaction-file]
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = Settings()

    logger = setup_logger(settings)
    path = Path(argv[0]) if argv else settings.transaction_file

    feed = StockFeedService(
        repo=TransactionFileRepository(),
        ledger=StockLedger(logger=logger.getChild("ledger")),
        report_service=ReportService(),
        logger=logger.getChild("feed"),
    )

    try:
        feed.run(path)
    except (OSError, ValueError) as e:
        logger.exception(f"Stock feed failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
