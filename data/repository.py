# data/repository.py
from pathlib import Path


class EmptySourceError(OSError):
    pass


class TransactionFileRepository:
    # Reads a stock feed file: one transaction per line.

    def load(self, path) -> list[str]:
        # Returns every non-blank line, in file order.
        # The whole file is read before anything is processed.
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Transaction file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
        lines = [line for line in lines if line.strip()]

        if not lines:
            raise EmptySourceError(f"Empty transaction file: {path}")
        return lines
