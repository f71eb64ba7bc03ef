from decimal import Decimal

from django.db.models import Sum

from apps.common.repository import GenericRepository
from .models import Order


class OrderRepository(GenericRepository[Order]):
    def __init__(self):
        super().__init__(Order)

    def list_created_between(self, start, end):
        """Orders with `start <= created_at < end`, oldest first."""
        return (
            self.model.objects.filter(created_at__gte=start, created_at__lt=end)
            .only("id", "user_id", "total_amount", "created_at")
            .order_by("created_at", "id")
        )

    def count_created_since(self, since) -> int:
        return self.model.objects.filter(created_at__gte=since).count()

    def total_revenue(self) -> Decimal:
        return self._sum(self.model.objects.all())

    def total_revenue_since(self, since) -> Decimal:
        return self._sum(self.model.objects.filter(created_at__gte=since))

    @staticmethod
    def _sum(qs) -> Decimal:
        # SUM over no rows yields NULL
        total = qs.aggregate(total=Sum("total_amount"))["total"]
        return total if total is not None else Decimal("0.00")
