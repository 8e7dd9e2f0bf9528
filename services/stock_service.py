# services/stock_service.py
import logging
from types import MappingProxyType

from models.inventory import Inventory
from models.order import Order, OrderItem
from models.transaction import TransactionType, parse_pairs, parse_transaction


class StockLedger:
    """
    Applies stock feed transactions to an in-memory inventory.

    Each line is parsed into a Transaction and handed to the handler for its
    kind. Handlers return True when applied and False when the transaction
    had to be skipped (only an unknown order on cancellation). Bad keywords
    and bad numbers raise and stop the run.

    Negative stock is never rejected; it is logged as an error and kept.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("stockfeed.ledger")
        self.inventory = Inventory()
        self._orders: dict[str, Order] = {}  # order_ref -> open order
        self._handlers = {
            TransactionType.SET_STOCK: self.set_stock,
            TransactionType.ADD_STOCK: self.add_stock,
            TransactionType.ORDER: self.fulfil_order,
            TransactionType.CANCELLED: self.cancel_order,
            TransactionType.ASSEMBLE: self.assemble,
        }

    @property
    def stock(self):
        return self.inventory.snapshot()

    @property
    def orders(self):
        return MappingProxyType(
            {ref: tuple(order.items) for ref, order in self._orders.items()}
        )

    def process(self, line: str) -> None:
        transaction = parse_transaction(line)
        handler = self._handlers[transaction.kind]

        if not handler(list(transaction.args)):
            self.logger.info(f"Could not process transaction: {line}")

    def set_stock(self, args: list[str]) -> bool:
        # Repeated SKUs in one line are summed first, then each total replaces the current level.
        grouped: dict[str, int] = {}
        for sku, qty in parse_pairs(args):
            grouped[sku] = grouped.get(sku, 0) + qty

        for sku, qty in grouped.items():
            if self.inventory.set_stock(sku, qty) < 0:
                self.logger.error(f"Stock level negative: {sku}")
        return True

    def add_stock(self, args: list[str]) -> bool:
        # no negative check here, unlike set-stock / order / assemble
        for sku, qty in parse_pairs(args):
            self.inventory.add_stock(sku, qty)
        return True

    def fulfil_order(self, args: list[str]) -> bool:
        if not args:
            raise ValueError("Order transaction without an order reference")
        order_ref, items = args[0], self._items(args[1:])

        self._remove_stock(items)
        self._orders[order_ref] = Order(order_ref=order_ref, items=items)
        return True

    def cancel_order(self, args: list[str]) -> bool:
        if not args:
            raise ValueError("Cancellation without an order reference")
        order_ref = args[0]

        order = self._orders.get(order_ref)
        if order is None:
            self.logger.info(f"Order not found: {order_ref}")
            return False

        for item in order.items:
            self.inventory.add_stock(item.sku, item.qty)
        del self._orders[order_ref]
        return True

    def assemble(self, args: list[str]) -> bool:
        # Components are consumed like an order, but nothing is kept for cancellation.
        if not args:
            raise ValueError("Assemble transaction without a target SKU")
        target, components = args[0], self._items(args[1:])

        self._remove_stock(components)
        self.inventory.add_stock(target, 1)
        return True

    def _items(self, args: list[str]) -> list[OrderItem]:
        return [OrderItem(sku, qty) for sku, qty in parse_pairs(args, strict=False)]

    def _remove_stock(self, items: list[OrderItem]) -> None:
        for item in items:
            if self.inventory.reduce_stock(item.sku, item.qty) < 0:
                self.logger.error(f"Stock level negative: {item.sku}")
