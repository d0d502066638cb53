"""Category service layer.

Read-side facade used by the product workflows to build selection lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category queries.

    Receives an ``ICategoryRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    async def get_categories(self) -> List[Category]:
        categories = await self._repo.get_categories()
        logger.debug("category.listed", count=len(categories))
        return categories

    async def get_by_id(self, id: int) -> Optional[Category]:
        return await self._repo.get_by_id(id)
