from dataclasses import dataclass
from decimal import Decimal


@dataclass
class DashboardStatsDTO:
    total_products: int
    total_users: int
    total_orders: int
    today_orders: int
    total_revenue: Decimal
    today_revenue: Decimal
    low_stock_products: int
    out_of_stock_products: int


@dataclass
class PopularProductDTO:
    id: int
    name: str
    price: Decimal
    category: str
    image_url: str
    view_count: int
    sales_count: int
    revenue: Decimal
