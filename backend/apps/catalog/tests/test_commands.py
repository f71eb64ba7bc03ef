import unittest
from decimal import Decimal

from apps.catalog.commands import ProductCreateCommand, ProductUpdateCommand


class ProductCommandTests(unittest.TestCase):
    def test_create_command_strips_id_and_normalises(self):
        cmd = ProductCreateCommand.from_raw(
            {
                "id": 999,
                "name": "  Phone  ",
                "price": "10.005",
                "category": " Electronics ",
                "stock_quantity": "7",
            }
        )
        self.assertEqual(cmd.name, "Phone")
        self.assertEqual(cmd.category, "Electronics")
        self.assertEqual(cmd.price, Decimal("10.01"))
        self.assertEqual(cmd.stock_quantity, 7)
        self.assertNotIn("id", cmd.as_fields())

    def test_create_command_defaults(self):
        cmd = ProductCreateCommand.from_raw({"name": "x", "category": "y"})
        self.assertEqual(cmd.price, Decimal("0.00"))
        self.assertEqual(cmd.stock_quantity, 0)
        self.assertEqual(cmd.description, "")

    def test_update_command_partial(self):
        cmd = ProductUpdateCommand.from_raw(5, {"name": "New", "price": "bad"})
        self.assertEqual(cmd.product_id, 5)
        self.assertEqual(cmd.name, "New")
        self.assertIsNone(cmd.price)
        self.assertIsNone(cmd.stock_quantity)
