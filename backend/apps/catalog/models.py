from django.db import models
from django.utils import timezone

from apps.users.models import User


class Product(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=10, decimal_places=2)
    stock_quantity = models.IntegerField(default=0)
    category = models.CharField(max_length=100)
    image_url = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["stock_quantity"], name="product_stock_idx"),
            models.Index(fields=["created_at"], name="product_created_idx"),
        ]


class ProductView(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="views")
    # Anonymous visitors are tracked by IP only
    user = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name="product_views"
    )
    ip_address = models.CharField(max_length=64, blank=True, null=True)
    viewed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "product_views"
        indexes = [
            models.Index(fields=["product", "viewed_at"], name="product_view_window_idx"),
        ]

    def __str__(self):
        return f"View of product {self.product_id} at {self.viewed_at:%Y-%m-%d %H:%M}"


class SalesStatistics(models.Model):
    product = models.OneToOneField(
        Product, on_delete=models.CASCADE, related_name="sales_statistics"
    )
    quantity_sold = models.IntegerField(default=0)
    total_revenue = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sales_statistics"
        verbose_name_plural = "Sales statistics"

    def __str__(self):
        return f"Sales for product {self.product_id}: {self.quantity_sold}"
