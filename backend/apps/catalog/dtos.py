from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class ProductDTO:
    id: int
    name: str
    description: str
    price: Decimal
    stock_quantity: int
    category: str
    image_url: str
    created_at: Optional[datetime]
