"""Product orchestration workflows.

Each workflow sequences existence checks, auxiliary reads (categories,
image probe) and delegated writes, and ends in one outcome:

- ``NotFound``: id missing, or no product with that id.
- ``RedirectToList``: a write completed; go back to the index.
- ``ProductListPage`` / ``ProductPage``: data for a template.

Edit, delete and details share the same shape::

    start -> id given? -- no --> NotFound
                | yes
                v
          product found? -- no --> NotFound
                | yes
                v
              Ready

Form validity is decided by the caller and passed in as a flag.
Service and storage errors are not caught here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union

import structlog
from asgiref.sync import sync_to_async
from django.core.exceptions import SuspiciousFileOperation

from modules.products.dtos import ProductDTO, SelectList

if TYPE_CHECKING:
    from django.core.files.storage import Storage

    from modules.categories.services import CategoryService
    from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NotFound:
    id: Optional[int] = None


@dataclass(frozen=True)
class RedirectToList:
    pass


@dataclass(frozen=True)
class ProductListPage:
    products: List[ProductDTO]


@dataclass(frozen=True)
class ProductPage:
    product: Optional[ProductDTO] = None
    categories: Optional[SelectList] = None
    image_exists: bool = False


Outcome = Union[NotFound, RedirectToList, ProductPage]


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------


class ProductWorkflow:
    """Product lifecycle orchestration.

    Collaborators are injected once and never replaced.  ``image_storage``
    is rooted at ``<WEB_ROOT>/images``.
    """

    def __init__(
        self,
        product_service: ProductService,
        category_service: CategoryService,
        image_storage: Storage,
    ) -> None:
        self._products = product_service
        self._categories = category_service
        self._images = image_storage

    async def list_products(self) -> ProductListPage:
        return ProductListPage(products=await self._products.get_products())

    async def category_choices(self, selected: Optional[int] = None) -> SelectList:
        """Current categories as select choices, optionally pre-selected."""
        categories = await self._categories.get_categories()
        return SelectList.from_categories(categories, selected=selected)

    # -- create ---------------------------------------------------------

    async def prepare_create(self) -> ProductPage:
        return ProductPage(categories=await self.category_choices())

    async def submit_create(self, dto: ProductDTO, is_valid: bool) -> Outcome:
        if not is_valid:
            logger.info("product.create_rejected")
            return ProductPage(product=dto, categories=await self.category_choices())
        await self._products.add(dto)
        return RedirectToList()

    # -- edit -----------------------------------------------------------

    async def prepare_edit(self, id: Optional[int]) -> Outcome:
        product = await self._find(id)
        if product is None:
            return NotFound(id)
        return ProductPage(
            product=product,
            categories=await self.category_choices(product.category_id),
        )

    async def submit_edit(self, dto: ProductDTO, is_valid: bool) -> Outcome:
        if not is_valid:
            logger.info("product.update_rejected", product_id=dto.id)
            return ProductPage(product=dto, categories=await self.category_choices())
        await self._products.update(dto)
        return RedirectToList()

    # -- delete ---------------------------------------------------------

    async def prepare_delete(self, id: Optional[int]) -> Outcome:
        product = await self._find(id)
        if product is None:
            return NotFound(id)
        return ProductPage(product=product)

    async def confirm_delete(self, id: int) -> RedirectToList:
        await self._products.remove(id)
        return RedirectToList()

    # -- details --------------------------------------------------------

    async def details(self, id: Optional[int]) -> Outcome:
        product = await self._find(id)
        if product is None:
            return NotFound(id)
        return ProductPage(
            product=product, image_exists=await self._image_exists(product.image)
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _find(self, id: Optional[int]) -> Optional[ProductDTO]:
        if id is None:
            return None
        return await self._products.get_by_id(id)

    async def _image_exists(self, image: Optional[str]) -> bool:
        if not image:
            return False
        try:
            return await sync_to_async(self._images.exists)(image)
        except SuspiciousFileOperation:
            logger.warning("product.image_path_rejected", image=image)
            return False
