# models/order.py
from dataclasses import dataclass, field
# Order model: the stock taken out by one "order" transaction, kept so it can be cancelled.
@dataclass(frozen=True)
class OrderItem:
    sku: str
    qty: int

@dataclass
class Order:
    order_ref: str
    items: list[OrderItem] = field(default_factory=list)
