from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Optional


def _parse_price(raw) -> Optional[Decimal]:
    if raw is None:
        return None
    try:
        return Decimal(str(raw)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        return None


@dataclass
class ProductCreateCommand:
    name: str
    price: Decimal
    category: str
    stock_quantity: int = 0
    description: str = ""
    image_url: str = ""

    @staticmethod
    def from_raw(payload: Dict[str, Any]):
        data = dict(payload or {})
        # ids are always assigned by the store
        data.pop("id", None)
        return ProductCreateCommand(
            name=str(data.get("name", "")).strip(),
            price=_parse_price(data.get("price")) or Decimal("0.00"),
            category=str(data.get("category", "")).strip(),
            stock_quantity=int(data.get("stock_quantity") or 0),
            description=str(data.get("description") or "").strip(),
            image_url=str(data.get("image_url") or "").strip(),
        )

    def as_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "stock_quantity": self.stock_quantity,
            "description": self.description,
            "image_url": self.image_url,
        }


@dataclass
class ProductUpdateCommand:
    product_id: int
    name: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None
    stock_quantity: Optional[int] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    @staticmethod
    def from_raw(product_id: int, payload: Dict[str, Any]):
        data = dict(payload or {})
        data.pop("id", None)
        stock = data.get("stock_quantity")
        return ProductUpdateCommand(
            product_id=product_id,
            name=data.get("name"),
            price=_parse_price(data.get("price")),
            category=data.get("category"),
            stock_quantity=int(stock) if stock is not None else None,
            description=data.get("description"),
            image_url=data.get("image_url"),
        )

    def as_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "stock_quantity": self.stock_quantity,
            "description": self.description,
            "image_url": self.image_url,
        }
