"""Request handlers for the Product aggregate.

Each handler is bound to one request class and holds only the injected
repository.  Query handlers are pure pass-through: whatever the
repository returns (including ``None``) is the result, and repository
errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.requests import (
    CreateProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    ProductCommand,
    RemoveProductCommand,
    UpdateProductCommand,
)
from shared.domain.bus import IRequestHandler

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository
    from shared.domain.bus import IMediator

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class GetProductByIdHandler(IRequestHandler[GetProductByIdQuery, Optional[Product]]):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: GetProductByIdQuery) -> Optional[Product]:
        return await self._repo.get_by_id(request.id)


class GetProductsHandler(IRequestHandler[GetProductsQuery, List[Product]]):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: GetProductsQuery) -> List[Product]:
        return await self._repo.get_products()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _apply(product: Product, command: ProductCommand) -> Product:
    product.name = command.name
    product.description = command.description
    product.price = command.price
    product.stock = command.stock
    product.image = command.image or ""
    product.category_id = command.category_id
    return product


class CreateProductHandler(IRequestHandler[CreateProductCommand, Product]):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: CreateProductCommand) -> Product:
        product = await self._repo.create(_apply(Product(), request))
        logger.info("product.created", product_id=product.pk, name=product.name)
        return product


class UpdateProductHandler(IRequestHandler[UpdateProductCommand, Product]):
    """Overwrite every editable field of an existing product.

    Raises:
        ProductNotFound: if no product has ``request.id``.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: UpdateProductCommand) -> Product:
        product = await self._repo.get_by_id(request.id)
        if product is None:
            raise ProductNotFound(f"Product {request.id} not found.")
        product = await self._repo.update(_apply(product, request))
        logger.info("product.updated", product_id=product.pk)
        return product


class RemoveProductHandler(IRequestHandler[RemoveProductCommand, Product]):
    """Delete a product.

    Raises:
        ProductNotFound: if no product has ``request.id``.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: RemoveProductCommand) -> Product:
        product = await self._repo.get_by_id(request.id)
        if product is None:
            raise ProductNotFound(f"Product {request.id} not found.")
        product = await self._repo.remove(product)
        logger.info("product.removed", product_id=request.id)
        return product


def register_product_handlers(mediator: IMediator, repository: IProductRepository) -> None:
    """Bind every product request to its handler."""
    mediator.register(GetProductByIdQuery, GetProductByIdHandler(repository))
    mediator.register(GetProductsQuery, GetProductsHandler(repository))
    mediator.register(CreateProductCommand, CreateProductHandler(repository))
    mediator.register(UpdateProductCommand, UpdateProductHandler(repository))
    mediator.register(RemoveProductCommand, RemoveProductHandler(repository))
