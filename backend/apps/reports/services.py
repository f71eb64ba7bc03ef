from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from django.utils import timezone

from apps.catalog.protocols import ProductRepositoryProtocol
from apps.common import get_logger
from apps.orders.protocols import OrderRepositoryProtocol
from .dtos import (
    CategoryAnalyticsDTO,
    DashboardSummaryDTO,
    InventoryReportDTO,
    SalesReportDTO,
)

logger = get_logger(__name__).bind(component="reports", layer="service")

ZERO = Decimal("0.00")
CENT = Decimal("0.01")


def _round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _local_midnight(day: date, tz) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min), tz)


class ReportingService:
    """
    Read-only aggregates over orders and products.

    Sales are bucketed per calendar day in the configured TIME_ZONE. Every
    report tolerates an empty store and returns empty lists or zero sums.
    """

    def __init__(
        self,
        orders: OrderRepositoryProtocol,
        products: ProductRepositoryProtocol,
        low_stock_threshold: int = 30,
    ):
        self.orders = orders
        self.products = products
        self.low_stock_threshold = low_stock_threshold
        self.logger = logger.bind(service="ReportingService")

    def sales_report(self, start_date: date, end_date: date) -> List[SalesReportDTO]:
        """One record per day in `[start_date, end_date]`, including days without orders."""
        if start_date > end_date:
            self.logger.debug("Empty sales range", start=start_date, end=end_date)
            return []

        tz = timezone.get_current_timezone()
        window_start = _local_midnight(start_date, tz)
        window_end = _local_midnight(end_date + timedelta(days=1), tz)
        buckets: Dict[date, list] = defaultdict(list)
        for order in self.orders.list_created_between(window_start, window_end):
            buckets[timezone.localtime(order.created_at, tz).date()].append(order)

        report = []
        day = start_date
        while day <= end_date:
            daily = buckets.get(day, [])
            count = len(daily)
            revenue = sum((o.total_amount for o in daily), ZERO)
            customers = len({o.user_id for o in daily})
            average = _round_money(revenue / count) if count else ZERO
            report.append(
                SalesReportDTO(
                    date=day,
                    total_orders=count,
                    total_revenue=revenue,
                    total_customers=customers,
                    average_order_value=average,
                )
            )
            day += timedelta(days=1)

        self.logger.debug(
            "Sales report built", start=start_date, end=end_date, days=len(report)
        )
        return report

    def inventory_report(self) -> List[InventoryReportDTO]:
        threshold = self.low_stock_threshold
        rows = [
            InventoryReportDTO(
                product_id=p.id,
                name=p.name,
                category=p.category,
                stock_quantity=p.stock_quantity,
                threshold=threshold,
                is_low_stock=p.stock_quantity < threshold,
                total_value=p.price * p.stock_quantity,
            )
            for p in self.products.list()
        ]
        rows.sort(key=lambda r: r.stock_quantity)
        return rows

    def low_stock_alerts(self) -> List[InventoryReportDTO]:
        return [row for row in self.inventory_report() if row.is_low_stock]

    def category_analytics(self) -> List[CategoryAnalyticsDTO]:
        grouped = defaultdict(list)
        for product in self.products.list():
            grouped[product.category].append(product)

        analytics = []
        for category, products in grouped.items():
            revenue = sum((p.price for p in products), ZERO)
            analytics.append(
                CategoryAnalyticsDTO(
                    category=category,
                    total_products=len(products),
                    total_sales_count=0,
                    total_revenue=revenue,
                    average_price=_round_money(revenue / len(products)),
                    total_stock=sum(p.stock_quantity for p in products),
                )
            )
        analytics.sort(key=lambda a: a.total_revenue, reverse=True)
        return analytics

    def dashboard_summary(self, start_date: date, end_date: date) -> DashboardSummaryDTO:
        sales = self.sales_report(start_date, end_date)
        inventory = self.inventory_report()
        categories = self.category_analytics()
        summary = DashboardSummaryDTO(
            total_revenue=sum((d.total_revenue for d in sales), ZERO),
            total_orders=sum(d.total_orders for d in sales),
            # Summed per day, so a customer ordering on two days counts twice
            total_customers=sum(d.total_customers for d in sales),
            low_stock_count=sum(1 for row in inventory if row.is_low_stock),
            total_products=len(inventory),
            top_category=categories[0] if categories else None,
        )
        self.logger.info(
            "Dashboard summary built",
            start=start_date,
            end=end_date,
            orders=summary.total_orders,
            revenue=summary.total_revenue,
        )
        return summary
