"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's async QuerySet API.
Error handling follows the Null Object pattern: ``get_by_id`` returns
``None`` instead of raising, and the caller decides what a missing
entity means.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _queryset(self):
        return Product.objects.select_related("category")

    async def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product (with its category) by primary key."""
        return await self._queryset().filter(pk=id).afirst()

    async def get_products(self) -> List[Product]:
        return [product async for product in self._queryset().all()]

    async def create(self, entity: Product) -> Product:
        await entity.asave()
        logger.info("product.saved", product_id=entity.pk, name=entity.name)
        return entity

    async def update(self, entity: Product) -> Product:
        await entity.asave()
        logger.info("product.saved", product_id=entity.pk, name=entity.name)
        return entity

    async def remove(self, entity: Product) -> Product:
        product_id = entity.pk
        await entity.adelete()
        logger.info("product.deleted", product_id=product_id)
        return entity
