# services/feed_service.py
import logging

from data.repository import TransactionFileRepository
from services.report_service import ReportService
from services.stock_service import StockLedger


class StockFeedService:
    def __init__(self, repo: TransactionFileRepository, ledger: StockLedger,
                 report_service: ReportService, logger: logging.Logger | None = None):
        self.repo = repo
        self.ledger = ledger
        self.report_service = report_service
        self.logger = logger or logging.getLogger("stockfeed.feed")

    def run(self, path):
        # Load the whole feed first, then apply it line by line in file order.
        transactions = self.repo.load(path)
        self.logger.info(f"Loaded {len(transactions)} transactions from {path}")

        for line in transactions:
            self.ledger.process(line)

        stock = self.ledger.stock
        self.logger.info(self.report_service.render(stock))
        return stock
