from decimal import Decimal
from typing import Iterable, List, Optional

from .dtos import CartDTO, CartItemDTO
from .models import Cart, CartItem


class CartItemMapper:
    def to_dto(self, item: CartItem) -> CartItemDTO:
        price = item.price
        return CartItemDTO(
            id=item.id,
            product_id=item.product_id,
            product_name=getattr(item.product, "name", ""),
            quantity=item.quantity,
            price=price,
            subtotal=price * item.quantity,
        )

    def many_to_dto(self, items: Iterable[CartItem]) -> List[CartItemDTO]:
        return [self.to_dto(i) for i in items]


class CartMapper:
    def __init__(self, item_mapper: Optional[CartItemMapper] = None) -> None:
        self.item_mapper = item_mapper or CartItemMapper()

    def to_dto(self, cart: Cart) -> CartDTO:
        items = self.item_mapper.many_to_dto(cart.items.all())
        return CartDTO(
            id=cart.id,
            user_id=cart.user_id,
            items=items,
            total_items=sum(i.quantity for i in items),
            total_amount=sum((i.subtotal for i in items), Decimal("0.00")),
        )
