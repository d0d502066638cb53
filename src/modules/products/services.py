"""Product service layer (Use Cases).

Facade used by the workflows and the API.  Every read and write is sent
through the mediator as a request; this class only maps between
``ProductDTO`` and the request/entity shapes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.dtos import ProductDTO
from modules.products.requests import (
    CreateProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    RemoveProductCommand,
    UpdateProductCommand,
)

if TYPE_CHECKING:
    from shared.domain.bus import IMediator

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IMediator`` via constructor injection (DIP).
    """

    def __init__(self, mediator: IMediator) -> None:
        self._mediator = mediator

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_products(self) -> List[ProductDTO]:
        products = await self._mediator.send(GetProductsQuery())
        return [ProductDTO.from_entity(product) for product in products]

    async def get_by_id(self, id: int) -> Optional[ProductDTO]:
        """Return the product, or ``None`` when no product has ``id``."""
        product = await self._mediator.send(GetProductByIdQuery(id=id))
        if product is None:
            logger.info("product.lookup_miss", product_id=id)
            return None
        return ProductDTO.from_entity(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def add(self, dto: ProductDTO) -> None:
        await self._mediator.send(
            CreateProductCommand(**dto.model_dump(exclude={"id", "category_name"}))
        )

    async def update(self, dto: ProductDTO) -> None:
        """Overwrite the product identified by ``dto.id``.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        await self._mediator.send(
            UpdateProductCommand(**dto.model_dump(exclude={"category_name"}))
        )

    async def remove(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        await self._mediator.send(RemoveProductCommand(id=id))
