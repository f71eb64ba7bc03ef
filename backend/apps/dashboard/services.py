from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, List, Optional

from django.utils import timezone

from apps.api.exceptions import NotFoundError
from apps.catalog.dtos import ProductDTO
from apps.catalog.protocols import (
    ProductRepositoryProtocol,
    ProductViewRepositoryProtocol,
    SalesStatisticsRepositoryProtocol,
)
from apps.catalog.services import ProductService
from apps.common import get_logger
from apps.orders.protocols import OrderRepositoryProtocol
from apps.users.protocols import UserRepositoryProtocol
from .dtos import DashboardStatsDTO, PopularProductDTO

logger = get_logger(__name__).bind(component="dashboard", layer="service")


class AdminDashboardService:
    """Store-wide counters and weekly product analytics for the admin console."""

    def __init__(
        self,
        products: ProductRepositoryProtocol,
        users: UserRepositoryProtocol,
        orders: OrderRepositoryProtocol,
        product_views: ProductViewRepositoryProtocol,
        sales_statistics: SalesStatisticsRepositoryProtocol,
        *,
        low_stock_threshold: int = 20,
        popular_window_days: int = 7,
        popular_limit: int = 10,
        new_products_window_days: int = 7,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.products = products
        self.catalog = ProductService(products)
        self.users = users
        self.orders = orders
        self.product_views = product_views
        self.sales_statistics = sales_statistics
        self.low_stock_threshold = low_stock_threshold
        self.popular_window_days = popular_window_days
        self.popular_limit = popular_limit
        self.new_products_window_days = new_products_window_days
        self.clock = clock
        self.logger = logger.bind(service="AdminDashboardService")

    def dashboard_stats(self) -> DashboardStatsDTO:
        start_of_day = timezone.localtime(self.clock()).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        stats = DashboardStatsDTO(
            total_products=self.products.count(),
            total_users=self.users.count(),
            total_orders=self.orders.count(),
            today_orders=self.orders.count_created_since(start_of_day),
            total_revenue=self.orders.total_revenue() or Decimal("0.00"),
            today_revenue=self.orders.total_revenue_since(start_of_day) or Decimal("0.00"),
            low_stock_products=self.products.count(stock_quantity__lt=self.low_stock_threshold),
            out_of_stock_products=self.products.count(stock_quantity=0),
        )
        self.logger.debug(
            "Dashboard stats computed",
            orders=stats.total_orders,
            today_orders=stats.today_orders,
        )
        return stats

    def weekly_popular_products(self) -> List[PopularProductDTO]:
        since = self.clock() - timedelta(days=self.popular_window_days)
        ranked = []
        for product in self.products.list():
            stats = self.sales_statistics.get_for_product(product.id)
            ranked.append(
                PopularProductDTO(
                    id=product.id,
                    name=product.name,
                    price=product.price,
                    category=product.category,
                    image_url=product.image_url or "",
                    view_count=self.product_views.count_for_product_since(product.id, since),
                    sales_count=stats.quantity_sold if stats else 0,
                    revenue=stats.total_revenue if stats else Decimal("0.00"),
                )
            )
        ranked.sort(key=lambda p: p.view_count, reverse=True)
        return ranked[: self.popular_limit]

    def weekly_new_products(self) -> List[ProductDTO]:
        since = self.clock() - timedelta(days=self.new_products_window_days)
        return self.catalog.list_created_since(since)

    def track_product_view(
        self, product_id: int, user_id: Optional[int] = None, ip_address: Optional[str] = None
    ) -> None:
        product = self.products.get(id=product_id)
        if not product:
            raise NotFoundError("Product not found", details={"productId": product_id})
        # Unknown users are recorded as anonymous views
        viewer_id = user_id if user_id is not None and self.users.exists(user_id) else None
        self.product_views.create(
            product=product,
            user_id=viewer_id,
            ip_address=ip_address,
            viewed_at=self.clock(),
        )
        self.logger.debug("Product view tracked", product_id=product_id, user_id=viewer_id)
