"""Django ORM implementation of the Category repository."""

from __future__ import annotations

from typing import List, Optional

import structlog

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by the Django async ORM."""

    async def get_categories(self) -> List[Category]:
        return [category async for category in Category.objects.all()]

    async def get_by_id(self, id: int) -> Optional[Category]:
        return await Category.objects.filter(pk=id).afirst()

    async def create(self, entity: Category) -> Category:
        await entity.asave()
        logger.info("category.created", category_id=entity.pk, name=entity.name)
        return entity

    async def update(self, entity: Category) -> Category:
        await entity.asave()
        logger.info("category.updated", category_id=entity.pk)
        return entity

    async def remove(self, entity: Category) -> Category:
        category_id = entity.pk
        await entity.adelete()
        logger.info("category.removed", category_id=category_id)
        return entity
