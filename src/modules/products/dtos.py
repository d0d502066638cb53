"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2, exchanged
between the views/workflows and ``ProductService``.  DTOs are immutable
(``frozen=True``).

- ``ProductDTO``: flattened transfer shape of a product, used by the
  create/edit forms and every read.
- ``SelectList``: ``(id, name)`` choices with an optional pre-selection.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from django import forms

    from modules.categories.models import Category
    from modules.products.models import Product


class ProductDTO(BaseModel):
    """Immutable product transfer object.

    Validates:
    - ``price`` is not negative.
    - ``stock`` is not negative.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str
    description: str
    price: Decimal
    stock: int
    image: str = ""
    category_id: Optional[int] = None
    category_name: Optional[str] = None

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("stock")
    @classmethod
    def stock_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock cannot be negative.")
        return v

    @field_validator("image", mode="before")
    @classmethod
    def image_defaults_to_empty(cls, v: Any) -> Any:
        return v or ""

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        """Build a DTO from a Product model instance."""
        # Only a prefetched category is read; lazy loading is sync-only.
        category = (
            product.category if type(product).category.is_cached(product) else None
        )
        return cls(
            id=product.pk,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            image=product.image,
            category_id=product.category_id,
            category_name=category.name if category else None,
        )

    @classmethod
    def from_form(cls, form: forms.Form, **extra: Any) -> ProductDTO:
        """Build a DTO from a bound ``ProductForm``.

        A valid form yields a validated DTO.  An invalid one yields an
        unvalidated DTO holding the submitted values as-is, so the page
        can be redisplayed exactly as the user sent it.
        """
        if form.is_valid():
            return cls(**{**form.cleaned_data, **extra})
        submitted = {
            name: form.data.get(name)
            for name in cls.model_fields
            if name in form.data
        }
        return cls.model_construct(**{**submitted, **extra})


class SelectList(BaseModel):
    """Choices for a ``<select>`` element."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[Tuple[int, str], ...] = ()
    selected: Optional[int] = None

    @classmethod
    def from_categories(
        cls, categories: Iterable[Category], selected: Optional[int] = None
    ) -> SelectList:
        return cls(
            items=tuple((category.pk, category.name) for category in categories),
            selected=selected,
        )

    @property
    def choices(self) -> list[Tuple[Any, str]]:
        """Django form choices with an empty first option."""
        return [("", "---------"), *self.items]
