import unittest
from decimal import Decimal
from unittest.mock import patch

from django.db import IntegrityError

from apps.api.exceptions import (
    InsufficientStockError,
    InvalidOwnershipError,
    NotFoundError,
)
from apps.carts.mappers import CartMapper
from apps.carts.services import CartService


class DummyAtomic:
    def __call__(self, *args, **kwargs):
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class StubProduct:
    def __init__(self, product_id: int, name: str, price: str, stock: int):
        self.id = product_id
        self.name = name
        self.price = Decimal(price)
        self.stock_quantity = stock


class StubCartItem:
    def __init__(self, item_id: int, cart, product: StubProduct, quantity: int, price):
        self.id = item_id
        self.cart_id = cart.id
        self.product = product
        self.product_id = product.id
        self.quantity = quantity
        self.price = price


class StubItemsManager:
    def __init__(self, cart, items_repo):
        self._cart = cart
        self._items_repo = items_repo

    def all(self):
        return self._items_repo.for_cart(self._cart.id)


class StubCart:
    def __init__(self, cart_id: int, user_id: int, items_repo):
        self.id = cart_id
        self.user_id = user_id
        self.items = StubItemsManager(self, items_repo)
        self.touched = 0


class FakeProductRepository:
    def __init__(self, products):
        self._products = {p.id: p for p in products}

    def get(self, **filters):
        return self._products.get(filters.get("id"))


class FakeUserRepository:
    def __init__(self, user_ids):
        self._ids = set(user_ids)

    def exists(self, user_id: int) -> bool:
        return user_id in self._ids


class FakeCartItemRepository:
    def __init__(self):
        self._items = {}
        self._pk = 1

    def for_cart(self, cart_id: int):
        return sorted(
            (i for i in self._items.values() if i.cart_id == cart_id), key=lambda i: i.id
        )

    def get(self, **filters):
        return self._items.get(filters.get("id"))

    def get_for_cart_product(self, cart_id: int, product_id: int):
        for item in self._items.values():
            if item.cart_id == cart_id and item.product_id == product_id:
                return item
        return None

    def create(self, **data):
        item = StubCartItem(self._pk, data["cart"], data["product"], data["quantity"], data["price"])
        self._items[self._pk] = item
        self._pk += 1
        return item

    def update(self, item, **data):
        for key, value in data.items():
            setattr(item, key, value)
        return item

    def delete(self, item):
        self._items.pop(item.id, None)

    def delete_for_cart(self, cart_id: int) -> int:
        doomed = [i.id for i in self._items.values() if i.cart_id == cart_id]
        for item_id in doomed:
            self._items.pop(item_id)
        return len(doomed)


class FakeCartRepository:
    def __init__(self, items_repo: FakeCartItemRepository):
        self._items_repo = items_repo
        self._carts = {}
        self._pk = 1
        self.create_calls = 0

    def get(self, **filters):
        return self._carts.get(filters.get("id"))

    def get_for_user(self, user_id: int):
        for cart in self._carts.values():
            if cart.user_id == user_id:
                return cart
        return None

    def create(self, **data):
        self.create_calls += 1
        cart = StubCart(self._pk, data["user_id"], self._items_repo)
        self._carts[self._pk] = cart
        self._pk += 1
        return cart

    def touch(self, cart):
        cart.touched += 1


class CartServiceUnitTests(unittest.TestCase):
    def setUp(self):
        self.atomic_patcher = patch(
            "apps.carts.services.transaction.atomic", DummyAtomic()
        )
        self.atomic_patcher.start()
        self.widget = StubProduct(1, "Widget", "2.50", stock=10)
        self.gadget = StubProduct(2, "Gadget", "4.00", stock=5)
        self.products_repo = FakeProductRepository([self.widget, self.gadget])
        self.items_repo = FakeCartItemRepository()
        self.cart_repo = FakeCartRepository(self.items_repo)
        self.service = CartService(
            carts=self.cart_repo,
            items=self.items_repo,
            products=self.products_repo,
            users=FakeUserRepository([10, 11]),
            cart_mapper=CartMapper(),
        )

    def tearDown(self):
        self.atomic_patcher.stop()

    def test_get_or_create_cart_is_idempotent(self):
        first = self.service.get_or_create_cart(10)
        second = self.service.get_or_create_cart(10)
        self.assertEqual(first.id, second.id)
        self.assertEqual(self.cart_repo.create_calls, 1)
        self.assertEqual(first.items, [])
        self.assertEqual(first.total_amount, Decimal("0.00"))

    def test_get_or_create_cart_unknown_user(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.get_or_create_cart(99)
        self.assertEqual(ctx.exception.message, "User not found")
        self.assertEqual(self.cart_repo.create_calls, 0)

    def test_get_or_create_cart_rereads_after_lost_race(self):
        winner = StubCart(50, 10, self.items_repo)

        def racing_create(**data):
            self.cart_repo._carts[winner.id] = winner
            raise IntegrityError("duplicate key value violates unique constraint")

        with patch.object(self.cart_repo, "create", side_effect=racing_create):
            dto = self.service.get_or_create_cart(10)
        self.assertEqual(dto.id, 50)

    def test_add_item_merges_and_keeps_first_price(self):
        self.service.add_item(10, 1, 4)
        self.widget.price = Decimal("9.99")
        dto = self.service.add_item(10, 1, 4)
        self.assertEqual(len(dto.items), 1)
        line = dto.items[0]
        self.assertEqual(line.quantity, 8)
        self.assertEqual(line.price, Decimal("2.50"))
        self.assertEqual(line.subtotal, Decimal("20.00"))
        self.assertEqual(dto.total_items, 8)
        self.assertEqual(dto.total_amount, Decimal("20.00"))

    def test_add_item_missing_product(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.add_item(10, 404, 1)
        self.assertEqual(ctx.exception.message, "Product not found")

    def test_add_item_exceeding_stock(self):
        with self.assertRaises(InsufficientStockError) as ctx:
            self.service.add_item(10, 2, 6)
        self.assertEqual(ctx.exception.message, "Insufficient stock. Only 5 items available")
        self.assertEqual(self.items_repo.for_cart(1), [])

    def test_add_item_merge_exceeding_stock_leaves_quantity(self):
        self.service.add_item(10, 2, 3)
        with self.assertRaises(InsufficientStockError) as ctx:
            self.service.add_item(10, 2, 3)
        self.assertEqual(
            ctx.exception.message, "Cannot add 3 more. Only 2 more items available"
        )
        dto = self.service.get_cart(10)
        self.assertEqual(dto.items[0].quantity, 3)

    def test_add_item_exactly_at_stock(self):
        self.service.add_item(10, 2, 2)
        dto = self.service.add_item(10, 2, 3)
        self.assertEqual(dto.items[0].quantity, 5)

    def test_update_item_overwrites_quantity(self):
        self.service.add_item(10, 1, 2)
        dto = self.service.update_item(10, 1, 7)
        self.assertEqual(dto.items[0].quantity, 7)
        self.assertEqual(dto.items[0].price, Decimal("2.50"))

    def test_update_item_zero_deletes_line(self):
        self.service.add_item(10, 1, 2)
        self.service.add_item(10, 2, 1)
        dto = self.service.update_item(10, 1, 0)
        self.assertEqual([i.product_id for i in dto.items], [2])

    def test_update_item_missing_line(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.update_item(10, 1, 3)
        self.assertEqual(ctx.exception.message, "Item not found in cart")

    def test_update_item_insufficient_stock(self):
        self.service.add_item(10, 2, 1)
        with self.assertRaises(InsufficientStockError) as ctx:
            self.service.update_item(10, 2, 6)
        self.assertEqual(ctx.exception.message, "Insufficient stock. Only 5 items available")
        self.assertEqual(self.service.get_cart(10).items[0].quantity, 1)

    def test_remove_item(self):
        dto = self.service.add_item(10, 1, 1)
        item_id = dto.items[0].id
        dto = self.service.remove_item(10, item_id)
        self.assertEqual(dto.items, [])

    def test_remove_item_missing(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.remove_item(10, 999)
        self.assertEqual(ctx.exception.message, "Cart item not found")

    def test_remove_item_of_another_cart(self):
        foreign = self.service.add_item(11, 1, 2).items[0]
        self.service.add_item(10, 2, 1)
        with self.assertRaises(InvalidOwnershipError) as ctx:
            self.service.remove_item(10, foreign.id)
        self.assertEqual(ctx.exception.message, "Item does not belong to this cart")
        self.assertEqual(len(self.service.get_cart(11).items), 1)
        self.assertEqual(len(self.service.get_cart(10).items), 1)

    def test_clear_cart_is_idempotent(self):
        self.service.add_item(10, 1, 1)
        self.service.add_item(10, 2, 1)
        self.assertIsNone(self.service.clear_cart(10))
        self.service.clear_cart(10)
        self.assertEqual(self.service.get_cart(10).items, [])
