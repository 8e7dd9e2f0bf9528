# models/transaction.py
import re
from dataclasses import dataclass
from enum import Enum
# Transaction model: one line of the stock feed, parsed once into a kind and its arguments.

_AMOUNT = re.compile(r"[+-]?[0-9]+")


class TransactionType(Enum):
    SET_STOCK = "set-stock"
    ADD_STOCK = "add-stock"
    ORDER = "order"
    CANCELLED = "cancelled"
    ASSEMBLE = "assemble"


class UnknownTransactionError(ValueError):
    def __init__(self, keyword: str):
        super().__init__(f"Not a valid transaction type: {keyword}")
        self.keyword = keyword


@dataclass(frozen=True)
class Transaction:
    kind: TransactionType
    args: tuple[str, ...]
    raw: str


def parse_transaction(line: str) -> Transaction:
    tokens = line.split()
    if not tokens:
        raise ValueError("Empty transaction line")

    try:
        kind = TransactionType(tokens[0])
    except ValueError:
        raise UnknownTransactionError(tokens[0]) from None

    return Transaction(kind=kind, args=tuple(tokens[1:]), raw=line)


def parse_amount(token: str) -> int:
    # ASCII digits with an optional sign only; int() alone would take "1_000" or "١٠"
    if not _AMOUNT.fullmatch(token):
        raise ValueError(f"Not a valid quantity: {token}")
    return int(token)


def parse_pairs(tokens, strict: bool = True) -> list[tuple[str, int]]:
    # "A 10 B -5" -> [("A", 10), ("B", -5)]
    # strict=False drops a trailing SKU with no amount (order / assemble lines)
    if len(tokens) % 2 != 0:
        if strict:
            raise ValueError(f"SKU without amount: {tokens[-1]}")
        tokens = tokens[:-1]
    return [(tokens[i], parse_amount(tokens[i + 1])) for i in range(0, len(tokens), 2)]
