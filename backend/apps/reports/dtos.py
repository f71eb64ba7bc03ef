from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class SalesReportDTO:
    date: date
    total_orders: int
    total_revenue: Decimal
    total_customers: int
    average_order_value: Decimal


@dataclass
class InventoryReportDTO:
    product_id: int
    name: str
    category: str
    stock_quantity: int
    threshold: int
    is_low_stock: bool
    total_value: Decimal


@dataclass
class CategoryAnalyticsDTO:
    category: str
    total_products: int
    # always 0 until sales are joined per category
    total_sales_count: int
    total_revenue: Decimal
    average_price: Decimal
    total_stock: int


@dataclass
class DashboardSummaryDTO:
    total_revenue: Decimal
    total_orders: int
    total_customers: int
    low_stock_count: int
    total_products: int
    top_category: Optional[CategoryAnalyticsDTO]
