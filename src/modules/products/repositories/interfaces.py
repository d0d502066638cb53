"""Product repository interface.

Extends ``IRepository[Product]`` with the catalogue listing used by
``GetProductsQuery``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    async def get_products(self) -> List["Product"]:
        """Return every product in repository order."""
