# utils/config.py
from dataclasses import dataclass
from pathlib import Path
# Runtime settings for the stock feed. Plain defaults, no env vars.


@dataclass
class Settings:
    transaction_file: Path = Path("data/resources/stock.txt")
    log_dir: Path = Path("data/logs")
    log_file: str = "stockfeed.log"
    logger_name: str = "stockfeed"
    backup_count: int = 7
