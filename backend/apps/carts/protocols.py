from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

from .models import Cart, CartItem

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO


class CartRepositoryProtocol(Protocol):
    def get_for_user(self, user_id: int) -> Optional[Cart]:
        ...

    def get(self, **filters) -> Optional[Cart]:
        ...

    def create(self, **data) -> Cart:
        ...

    def touch(self, cart: Cart) -> None:
        ...


class CartItemRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[CartItem]:
        ...

    def get_for_cart_product(self, cart_id: int, product_id: int) -> Optional[CartItem]:
        ...

    def create(self, **data) -> CartItem:
        ...

    def update(self, item: CartItem, **data) -> CartItem:
        ...

    def delete(self, item: CartItem) -> None:
        ...

    def delete_for_cart(self, cart_id: int) -> int:
        ...


class CartMapperProtocol(Protocol):
    def to_dto(self, cart: Cart) -> "CartDTO":
        ...
