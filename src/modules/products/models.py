"""Product model.

Domain rules:
- Name has 3 to 100 characters, description 5 to 200.
- Price and stock cannot be negative.
- Image is a bare filename (at most 250 characters) resolved under
  ``<WEB_ROOT>/images/``.
- Category is optional; a category that still has products cannot be deleted.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root."""

    name = models.CharField(max_length=100, validators=[MinLengthValidator(3)])
    description = models.CharField(max_length=200, validators=[MinLengthValidator(5)])
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    stock = models.PositiveIntegerField(default=0)
    image = models.CharField(max_length=250, blank=True, default="")
    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        related_name="products",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.name
