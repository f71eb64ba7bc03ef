from __future__ import annotations

from django.conf import settings

from apps.catalog.repositories import ProductRepository
from apps.orders.repositories import OrderRepository
from .services import ReportingService


def build_reporting_service() -> ReportingService:
    return ReportingService(
        orders=OrderRepository(),
        products=ProductRepository(),
        low_stock_threshold=settings.REPORT_LOW_STOCK_THRESHOLD,
    )
