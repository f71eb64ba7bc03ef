from apps.common.repository import GenericRepository
from .models import Product, ProductView, SalesStatistics


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list(self, **filters):  # type: ignore[override]
        return self.model.objects.filter(**filters).order_by("id")

    def list_by_category(self, category: str):
        return self.model.objects.filter(category__iexact=category).order_by("id")

    def list_created_since(self, since):
        return self.model.objects.filter(created_at__gte=since).order_by("-created_at", "-id")

    def update_scalar(self, product: Product, **fields):
        dirty = False
        for k, v in fields.items():
            if v is not None:
                setattr(product, k, v)
                dirty = True
        if dirty:
            product.save()
        return product


class ProductViewRepository(GenericRepository[ProductView]):
    def __init__(self):
        super().__init__(ProductView)

    def count_for_product_since(self, product_id: int, since) -> int:
        return self.model.objects.filter(product_id=product_id, viewed_at__gte=since).count()


class SalesStatisticsRepository(GenericRepository[SalesStatistics]):
    def __init__(self):
        super().__init__(SalesStatistics)

    def get_for_product(self, product_id: int):
        return self.model.objects.filter(product_id=product_id).first()
