"""Product form: the presentation-side validation rules.

The workflows only receive the outcome (``form.is_valid()``); the rules
themselves live here.  The category select only accepts the ids of the
``SelectList`` it was built with, so bound forms need ``categories`` too.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from django import forms

if TYPE_CHECKING:
    from modules.products.dtos import SelectList


class ProductForm(forms.Form):
    name = forms.CharField(
        min_length=3,
        max_length=100,
        error_messages={"required": "The Name is Required"},
    )
    description = forms.CharField(
        min_length=5,
        max_length=200,
        widget=forms.Textarea(attrs={"rows": 3}),
        error_messages={"required": "The Description is Required"},
    )
    price = forms.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.00"),
        error_messages={"required": "The Price is Required"},
    )
    stock = forms.IntegerField(
        min_value=0,
        max_value=9999,
        error_messages={"required": "The Stock is Required"},
    )
    image = forms.CharField(max_length=250, required=False)
    category_id = forms.TypedChoiceField(
        label="Categories",
        coerce=int,
        empty_value=None,
        required=False,
    )

    def __init__(self, *args, categories: Optional[SelectList] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        if categories is not None:
            self.fields["category_id"].choices = categories.choices
            if categories.selected is not None:
                self.initial.setdefault("category_id", categories.selected)

    def clean_image(self) -> str:
        image = self.cleaned_data["image"].strip()
        if "/" in image or "\\" in image:
            raise forms.ValidationError("Image must be a file name, not a path.")
        return image
