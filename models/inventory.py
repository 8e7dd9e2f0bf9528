# models/inventory.py
from types import MappingProxyType
# Inventory model representing stock levels per SKU.
# Levels may go negative; callers decide whether that is worth reporting.
class Inventory:
    def __init__(self):
        self.stock: dict[str, int] = {}  # sku -> quantity

    def set_stock(self, sku: str, qty: int) -> int:
        self.stock[sku] = qty
        return qty

    def add_stock(self, sku: str, qty: int) -> int:
        self.stock[sku] = self.stock.get(sku, 0) + qty
        return self.stock[sku]

    def reduce_stock(self, sku: str, qty: int) -> int:
        self.stock[sku] = self.stock.get(sku, 0) - qty
        return self.stock[sku]

    def snapshot(self):
        # read-only copy, ordered by SKU
        return MappingProxyType(dict(sorted(self.stock.items())))
