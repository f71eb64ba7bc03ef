from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.orders.models import Order


class OrderRepositoryProtocol(Protocol):
    def list_created_between(self, start: datetime, end: datetime) -> Iterable["Order"]: ...

    def count(self, **filters) -> int: ...

    def count_created_since(self, since: datetime) -> int: ...

    def total_revenue(self) -> Decimal: ...

    def total_revenue_since(self, since: datetime) -> Decimal: ...
