from decimal import Decimal

from django.db import connection
from django.test.utils import CaptureQueriesContext
from rest_framework import status
from rest_framework.test import APITestCase

from apps.carts.models import Cart, CartItem
from apps.carts.repositories import CartRepository
from apps.catalog.models import Product
from apps.users.models import User


class TestCarts(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username="cartuser", password="TestPass123", email="cart@example.com"
        )
        self.other = User.objects.create_user(username="other", password="TestPass123")
        self.admin = User.objects.create_user(
            username="boss", password="TestPass123", role=User.Role.ADMIN
        )
        self.product = Product.objects.create(
            name="Widget", price=Decimal("10.00"), stock_quantity=10, category="Gadgets"
        )
        self.scarce = Product.objects.create(
            name="Rare", price=Decimal("99.99"), stock_quantity=5, category="Collectibles"
        )
        self.url = lambda uid, suffix="": f"/api/cart/{uid}/{suffix}"
        self.client.force_authenticate(user=self.user)

    def test_get_creates_cart_once(self):
        first = self.client.get(self.url(self.user.id))
        second = self.client.get(self.url(self.user.id))
        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data["data"]["id"], second.data["data"]["id"])
        self.assertEqual(Cart.objects.filter(user=self.user).count(), 1)

    def test_add_merge_and_snapshot(self):
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.product.id, "quantity": 4}, format="json")
        Product.objects.filter(id=self.product.id).update(price=Decimal("12.00"))
        res = self.client.post(
            self.url(self.user.id, "add/"), {"productId": self.product.id, "quantity": 4}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        items = res.data["data"]["items"]
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]["quantity"], 8)
        self.assertEqual(items[0]["price"], "10.00")
        self.assertEqual(res.data["data"]["totalAmount"], "80.00")

    def test_merge_over_stock_is_rejected_without_partial_update(self):
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.scarce.id, "quantity": 3}, format="json")
        res = self.client.post(
            self.url(self.user.id, "add/"), {"productId": self.scarce.id, "quantity": 3}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "INSUFFICIENT_STOCK")
        self.assertEqual(res.data["message"], "Cannot add 3 more. Only 2 more items available")
        self.assertEqual(CartItem.objects.get(product=self.scarce).quantity, 3)

    def test_unknown_product_is_404(self):
        res = self.client.post(self.url(self.user.id, "add/"), {"productId": 9999, "quantity": 1}, format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["message"], "Product not found")

    def test_update_to_zero_removes_line(self):
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.product.id, "quantity": 2}, format="json")
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.scarce.id, "quantity": 1}, format="json")
        res = self.client.put(
            self.url(self.user.id, "update/"), {"productId": self.product.id, "quantity": 0}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([i["productId"] for i in res.data["data"]["items"]], [self.scarce.id])

    def test_remove_foreign_item_is_rejected(self):
        self.client.force_authenticate(user=self.other)
        added = self.client.post(
            self.url(self.other.id, "add/"), {"productId": self.product.id, "quantity": 1}, format="json"
        )
        foreign_item = added.data["data"]["items"][0]["id"]
        self.client.force_authenticate(user=self.user)
        res = self.client.delete(self.url(self.user.id, f"item/{foreign_item}/"))
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(res.data["error"]["code"], "INVALID_OWNERSHIP")
        self.assertTrue(CartItem.objects.filter(id=foreign_item).exists())

    def test_clear_twice(self):
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.product.id, "quantity": 1}, format="json")
        first = self.client.delete(self.url(self.user.id, "clear/"))
        second = self.client.delete(self.url(self.user.id, "clear/"))
        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(second.data["message"], "Cart cleared")
        self.assertEqual(CartItem.objects.filter(cart__user=self.user).count(), 0)

    def test_customer_cannot_touch_other_cart(self):
        res = self.client.get(self.url(self.other.id))
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_can_manage_any_cart(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.post(
            self.url(self.user.id, "add/"), {"productId": self.product.id, "quantity": 1}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["data"]["userId"], self.user.id)

    def test_unknown_user_cart_is_404_for_admin(self):
        self.client.force_authenticate(user=self.admin)
        res = self.client.get(self.url(424242))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["message"], "User not found")

    def test_items_keep_insertion_order_after_update(self):
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.product.id, "quantity": 1}, format="json")
        self.client.post(self.url(self.user.id, "add/"), {"productId": self.scarce.id, "quantity": 1}, format="json")
        res = self.client.put(
            self.url(self.user.id, "update/"), {"productId": self.product.id, "quantity": 3}, format="json"
        )
        self.assertEqual(
            [i["productId"] for i in res.data["data"]["items"]], [self.product.id, self.scarce.id]
        )

        with CaptureQueriesContext(connection) as ctx:
            cart = CartRepository().get_for_user(self.user.id)
            list(cart.items.all())
        item_queries = [q["sql"] for q in ctx.captured_queries if '"cart_items"' in q["sql"]]
        self.assertTrue(item_queries)
        self.assertTrue(all("ORDER BY" in sql for sql in item_queries))
