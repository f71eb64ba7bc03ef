from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.catalog.models import Product, ProductView, SalesStatistics


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]: ...

    def list(self, **filters) -> Iterable["Product"]: ...

    def list_by_category(self, category: str) -> Iterable["Product"]: ...

    def list_created_since(self, since: datetime) -> Iterable["Product"]: ...

    def count(self, **filters) -> int: ...

    def create(self, **data) -> "Product": ...

    def update_scalar(self, product: "Product", **fields) -> "Product": ...

    def delete(self, product: "Product") -> None: ...


class ProductViewRepositoryProtocol(Protocol):
    def create(self, **data) -> "ProductView": ...

    def count_for_product_since(self, product_id: int, since: datetime) -> int: ...


class SalesStatisticsRepositoryProtocol(Protocol):
    def get_for_product(self, product_id: int) -> Optional["SalesStatistics"]: ...
