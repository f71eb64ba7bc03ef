from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db import transaction

from apps.api.exceptions import NotFoundError
from apps.common import get_logger
from .commands import ProductCreateCommand, ProductUpdateCommand
from .dtos import ProductDTO
from .mappers import ProductMapper
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(self, category: Optional[str] = None) -> List[ProductDTO]:
        self.logger.debug("Listing products", category=category)
        qs = self.products.list_by_category(category) if category else self.products.list()
        return ProductMapper.many_to_dto(qs)

    def get_product(self, product_id: int) -> ProductDTO:
        return ProductMapper.to_dto(self._require(product_id))

    def list_created_since(self, since: datetime) -> List[ProductDTO]:
        self.logger.debug("Listing products created since", since=since)
        return ProductMapper.many_to_dto(self.products.list_created_since(since))

    def create_product(self, data: Dict[str, Any]) -> ProductDTO:
        command = ProductCreateCommand.from_raw(data)
        with transaction.atomic():
            product = self.products.create(**command.as_fields())
        self.logger.info(
            "Product created",
            product_id=product.id,
            category=product.category,
            stock=product.stock_quantity,
        )
        return ProductMapper.to_dto(product)

    def update_product(self, product_id: int, data: Dict[str, Any]) -> ProductDTO:
        product = self._require(product_id)
        command = ProductUpdateCommand.from_raw(product_id, data)
        with transaction.atomic():
            product = self.products.update_scalar(product, **command.as_fields())
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(product)

    def delete_product(self, product_id: int) -> None:
        product = self._require(product_id)
        self.products.delete(product)
        self.logger.info("Product deleted", product_id=product_id)

    def _require(self, product_id: int):
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product not found", product_id=product_id)
            raise NotFoundError("Product not found", details={"id": str(product_id)})
        return product
