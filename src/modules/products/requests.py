"""Requests handled by the product handlers.

Queries read, commands write.  Each class is bound to exactly one
handler in ``ProductsConfig.ready``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from shared.domain.requests import Request

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GetProductByIdQuery(Request[Optional["Product"]]):
    id: int


@dataclass(frozen=True)
class GetProductsQuery(Request[List["Product"]]):
    pass


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class ProductCommand(Request["Product"]):
    """Fields shared by create and update."""

    name: str
    description: str
    price: Decimal
    stock: int
    image: str = ""
    category_id: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class CreateProductCommand(ProductCommand):
    pass


@dataclass(frozen=True, kw_only=True)
class UpdateProductCommand(ProductCommand):
    id: int


@dataclass(frozen=True)
class RemoveProductCommand(Request["Product"]):
    id: int
