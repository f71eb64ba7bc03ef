from __future__ import annotations

from django.conf import settings

from apps.catalog.repositories import (
    ProductRepository,
    ProductViewRepository,
    SalesStatisticsRepository,
)
from apps.orders.repositories import OrderRepository
from apps.users.repositories import UserRepository
from .services import AdminDashboardService


def build_admin_dashboard_service() -> AdminDashboardService:
    return AdminDashboardService(
        products=ProductRepository(),
        users=UserRepository(),
        orders=OrderRepository(),
        product_views=ProductViewRepository(),
        sales_statistics=SalesStatisticsRepository(),
        low_stock_threshold=settings.DASHBOARD_LOW_STOCK_THRESHOLD,
        popular_window_days=settings.POPULAR_PRODUCTS_WINDOW_DAYS,
        popular_limit=settings.POPULAR_PRODUCTS_LIMIT,
        new_products_window_days=settings.NEW_PRODUCTS_WINDOW_DAYS,
    )
