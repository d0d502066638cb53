"""Unit tests for the product request handlers.

Covers:
- GetProductByIdHandler: found, absent (not an error), no id validation.
- GetProductsHandler: pass-through of the full repository result.
- Create/Update/Remove command handlers, including ProductNotFound.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

import pytest
from asgiref.sync import async_to_sync

from modules.products.exceptions import ProductNotFound
from modules.products.handlers import (
    CreateProductHandler,
    GetProductByIdHandler,
    GetProductsHandler,
    RemoveProductHandler,
    UpdateProductHandler,
    register_product_handlers,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.requests import (
    CreateProductCommand,
    GetProductByIdQuery,
    GetProductsQuery,
    RemoveProductCommand,
    UpdateProductCommand,
)
from shared.infrastructure.bus import InMemoryMediator

pytestmark = pytest.mark.unit


class InMemoryProductRepository(IProductRepository):
    """Dict-backed repository keeping insertion order."""

    def __init__(self, products: List[Product]) -> None:
        self.products: Dict[int, Product] = {p.pk: p for p in products}
        self.removed: List[int] = []

    async def get_by_id(self, id: int) -> Optional[Product]:
        return self.products.get(id)

    async def get_products(self) -> List[Product]:
        return list(self.products.values())

    async def create(self, entity: Product) -> Product:
        entity.pk = max(self.products, default=0) + 1
        self.products[entity.pk] = entity
        return entity

    async def update(self, entity: Product) -> Product:
        self.products[entity.pk] = entity
        return entity

    async def remove(self, entity: Product) -> Product:
        del self.products[entity.pk]
        self.removed.append(entity.pk)
        return entity


def _product(pk: int, name: str = "Widget") -> Product:
    return Product(
        pk=pk,
        name=name,
        description="A fine widget",
        price=Decimal("9.90"),
        stock=5,
    )


@pytest.fixture()
def repo():
    return InMemoryProductRepository([_product(1, "P1"), _product(2, "P2"), _product(3, "P3")])


# ===========================================================================
# GetProductByIdHandler
# ===========================================================================


class TestGetProductByIdHandler:
    def test_returns_product_when_found(self, repo):
        handler = GetProductByIdHandler(repo)

        product = async_to_sync(handler.handle)(GetProductByIdQuery(id=2))

        assert product is repo.products[2]

    def test_unknown_id_yields_none(self, repo):
        handler = GetProductByIdHandler(repo)

        assert async_to_sync(handler.handle)(GetProductByIdQuery(id=5)) is None

    def test_passes_id_through_without_validation(self):
        mock_repo = AsyncMock()
        mock_repo.get_by_id.return_value = None
        handler = GetProductByIdHandler(mock_repo)

        async_to_sync(handler.handle)(GetProductByIdQuery(id=-42))

        mock_repo.get_by_id.assert_awaited_once_with(-42)

    def test_repository_errors_propagate(self):
        mock_repo = AsyncMock()
        mock_repo.get_by_id.side_effect = ConnectionError("db down")
        handler = GetProductByIdHandler(mock_repo)

        with pytest.raises(ConnectionError, match="db down"):
            async_to_sync(handler.handle)(GetProductByIdQuery(id=1))


# ===========================================================================
# GetProductsHandler
# ===========================================================================


class TestGetProductsHandler:
    def test_returns_every_product(self):
        p1, p2 = _product(1, "P1"), _product(2, "P2")
        handler = GetProductsHandler(InMemoryProductRepository([p1, p2]))

        result = async_to_sync(handler.handle)(GetProductsQuery())

        assert result == [p1, p2]

    def test_returns_repository_result_unchanged(self):
        duplicated = [_product(1), _product(1)]
        mock_repo = AsyncMock()
        mock_repo.get_products.return_value = duplicated
        handler = GetProductsHandler(mock_repo)

        result = async_to_sync(handler.handle)(GetProductsQuery())

        assert result is duplicated
        mock_repo.get_products.assert_awaited_once_with()


# ===========================================================================
# Commands
# ===========================================================================


def _command_fields(**overrides):
    fields = {
        "name": "Caneta azul",
        "description": "Caneta esferográfica azul",
        "price": Decimal("2.50"),
        "stock": 100,
        "image": "caneta.jpg",
        "category_id": None,
    }
    fields.update(overrides)
    return fields


class TestCreateProductHandler:
    def test_creates_product_from_command(self, repo):
        handler = CreateProductHandler(repo)

        product = async_to_sync(handler.handle)(CreateProductCommand(**_command_fields()))

        assert product.pk == 4
        assert repo.products[4].name == "Caneta azul"
        assert repo.products[4].price == Decimal("2.50")
        assert repo.products[4].image == "caneta.jpg"


class TestUpdateProductHandler:
    def test_overwrites_fields(self, repo):
        handler = UpdateProductHandler(repo)

        product = async_to_sync(handler.handle)(
            UpdateProductCommand(id=2, **_command_fields(name="Renamed", stock=7))
        )

        assert product is repo.products[2]
        assert product.name == "Renamed"
        assert product.stock == 7

    def test_missing_product_raises(self, repo):
        handler = UpdateProductHandler(repo)

        with pytest.raises(ProductNotFound):
            async_to_sync(handler.handle)(UpdateProductCommand(id=99, **_command_fields()))


class TestRemoveProductHandler:
    def test_removes_product(self, repo):
        handler = RemoveProductHandler(repo)

        async_to_sync(handler.handle)(RemoveProductCommand(id=3))

        assert repo.removed == [3]
        assert 3 not in repo.products

    def test_missing_product_raises(self, repo):
        handler = RemoveProductHandler(repo)

        with pytest.raises(ProductNotFound):
            async_to_sync(handler.handle)(RemoveProductCommand(id=99))
        assert repo.removed == []


# ===========================================================================
# Registration
# ===========================================================================


def test_register_binds_each_request_to_its_handler(repo):
    mediator = InMemoryMediator()
    register_product_handlers(mediator, repo)

    assert isinstance(mediator.handlers[GetProductByIdQuery], GetProductByIdHandler)
    assert isinstance(mediator.handlers[GetProductsQuery], GetProductsHandler)
    assert isinstance(mediator.handlers[CreateProductCommand], CreateProductHandler)
    assert isinstance(mediator.handlers[UpdateProductCommand], UpdateProductHandler)
    assert isinstance(mediator.handlers[RemoveProductCommand], RemoveProductHandler)
    assert async_to_sync(mediator.send)(GetProductByIdQuery(id=5)) is None
