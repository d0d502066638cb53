"""Category model used to group products."""

from __future__ import annotations

from django.core.validators import MinLengthValidator
from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    name = models.CharField(max_length=100, validators=[MinLengthValidator(3)])

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
