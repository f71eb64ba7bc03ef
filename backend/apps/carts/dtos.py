from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class CartItemDTO:
    id: int
    product_id: int
    product_name: str
    quantity: int
    price: Decimal
    subtotal: Decimal


@dataclass
class CartDTO:
    id: int
    user_id: int
    items: List[CartItemDTO] = field(default_factory=list)
    total_items: int = 0
    total_amount: Decimal = Decimal("0.00")
