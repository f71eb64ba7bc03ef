from __future__ import annotations

from django.db import IntegrityError, transaction

from apps.api.exceptions import (
    InsufficientStockError,
    InvalidOwnershipError,
    NotFoundError,
)
from apps.catalog.protocols import ProductRepositoryProtocol
from apps.common import get_logger
from apps.users.protocols import UserRepositoryProtocol
from .dtos import CartDTO
from .models import Cart
from .protocols import (
    CartItemRepositoryProtocol,
    CartMapperProtocol,
    CartRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartService:
    """
    Cart engine: one cart per user, one line per (cart, product).

    Every mutation runs in a single transaction and the cart is re-read from
    the store afterwards, so the returned DTO is exactly what was persisted.

    Stock is checked but never reserved. Two requests adding the same product
    can both pass the check and together exceed the available stock.
    """

    def __init__(
        self,
        carts: CartRepositoryProtocol,
        items: CartItemRepositoryProtocol,
        products: ProductRepositoryProtocol,
        users: UserRepositoryProtocol,
        cart_mapper: CartMapperProtocol,
    ):
        self.carts = carts
        self.items = items
        self.products = products
        self.users = users
        self.cart_mapper = cart_mapper
        self.logger = logger.bind(service="CartService")

    def get_or_create_cart(self, user_id: int) -> CartDTO:
        return self.cart_mapper.to_dto(self._ensure_cart(user_id))

    def get_cart(self, user_id: int) -> CartDTO:
        self.logger.debug("Fetching cart", user_id=user_id)
        return self.get_or_create_cart(user_id)

    def add_item(self, user_id: int, product_id: int, quantity: int) -> CartDTO:
        """
        Add `quantity` units of a product, merging into an existing line.

        Callers validate `quantity > 0`; the engine only guards stock.
        """
        self.logger.info(
            "Adding item to cart", user_id=user_id, product_id=product_id, quantity=quantity
        )
        with transaction.atomic():
            cart = self._ensure_cart(user_id)
            product = self.products.get(id=product_id)
            if not product:
                self.logger.warning("Add failed: product missing", product_id=product_id)
                raise NotFoundError("Product not found", details={"productId": product_id})

            stock = product.stock_quantity
            if stock < quantity:
                self.logger.warning(
                    "Add failed: insufficient stock",
                    product_id=product_id,
                    stock=stock,
                    requested=quantity,
                )
                raise InsufficientStockError(f"Insufficient stock. Only {stock} items available")

            existing = self.items.get_for_cart_product(cart.id, product_id)
            if existing:
                new_quantity = existing.quantity + quantity
                if stock < new_quantity:
                    available = stock - existing.quantity
                    self.logger.warning(
                        "Add failed: merged quantity exceeds stock",
                        product_id=product_id,
                        stock=stock,
                        in_cart=existing.quantity,
                        requested=quantity,
                    )
                    raise InsufficientStockError(
                        f"Cannot add {quantity} more. Only {available} more items available"
                    )
                # Price stays at the first snapshot
                self.items.update(existing, quantity=new_quantity)
            else:
                self.items.create(
                    cart=cart, product=product, quantity=quantity, price=product.price
                )
            self.carts.touch(cart)
        dto = self._reload(cart.id)
        self.logger.info("Item added to cart", cart_id=cart.id, items=len(dto.items))
        return dto

    def update_item(self, user_id: int, product_id: int, quantity: int) -> CartDTO:
        """Overwrite a line's quantity; zero or less removes the line."""
        self.logger.info(
            "Updating cart item", user_id=user_id, product_id=product_id, quantity=quantity
        )
        with transaction.atomic():
            cart = self._ensure_cart(user_id)
            item = self.items.get_for_cart_product(cart.id, product_id)
            if not item:
                self.logger.warning(
                    "Update failed: item missing", cart_id=cart.id, product_id=product_id
                )
                raise NotFoundError("Item not found in cart", details={"productId": product_id})

            if quantity <= 0:
                self.items.delete(item)
            else:
                stock = item.product.stock_quantity
                if stock < quantity:
                    self.logger.warning(
                        "Update failed: insufficient stock",
                        product_id=product_id,
                        stock=stock,
                        requested=quantity,
                    )
                    raise InsufficientStockError(
                        f"Insufficient stock. Only {stock} items available"
                    )
                self.items.update(item, quantity=quantity)
            self.carts.touch(cart)
        return self._reload(cart.id)

    def remove_item(self, user_id: int, item_id: int) -> CartDTO:
        self.logger.info("Removing cart item", user_id=user_id, item_id=item_id)
        with transaction.atomic():
            cart = self._ensure_cart(user_id)
            item = self.items.get(id=item_id)
            if not item:
                self.logger.warning("Remove failed: item missing", item_id=item_id)
                raise NotFoundError("Cart item not found", details={"itemId": item_id})
            if item.cart_id != cart.id:
                self.logger.warning(
                    "Remove failed: item belongs to another cart",
                    item_id=item_id,
                    cart_id=cart.id,
                    owner_cart_id=item.cart_id,
                )
                raise InvalidOwnershipError("Item does not belong to this cart")
            self.items.delete(item)
            self.carts.touch(cart)
        return self._reload(cart.id)

    def clear_cart(self, user_id: int) -> None:
        with transaction.atomic():
            cart = self._ensure_cart(user_id)
            deleted = self.items.delete_for_cart(cart.id)
        self.logger.info("Cart cleared", cart_id=cart.id, deleted=deleted)

    def _ensure_cart(self, user_id: int) -> Cart:
        cart = self.carts.get_for_user(user_id)
        if cart:
            return cart
        if not self.users.exists(user_id):
            self.logger.warning("Cart lookup failed: user missing", user_id=user_id)
            raise NotFoundError("User not found", details={"userId": user_id})
        try:
            with transaction.atomic():
                cart = self.carts.create(user_id=user_id)
        except IntegrityError:
            # Lost the race against a concurrent first access
            self.logger.info("Cart created concurrently, re-reading", user_id=user_id)
            cart = self.carts.get_for_user(user_id)
            if cart is None:
                raise
            return cart
        self.logger.info("Cart created", user_id=user_id, cart_id=cart.id)
        return cart

    def _reload(self, cart_id: int) -> CartDTO:
        return self.cart_mapper.to_dto(self.carts.get(id=cart_id))
