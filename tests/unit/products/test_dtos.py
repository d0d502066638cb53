"""Unit tests for Product DTOs and the product form.

Covers:
- ProductDTO: validation, frozen immutability, from_entity, from_form.
- SelectList: construction from categories, Django choices.
- ProductForm: presentation validation rules.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.categories.models import Category
from modules.products.dtos import ProductDTO, SelectList
from modules.products.forms import ProductForm
from modules.products.models import Product

pytestmark = pytest.mark.unit


def _form_data(**overrides):
    data = {
        "name": "Caderno espiral",
        "description": "Caderno espiral 100 folhas",
        "price": "7.45",
        "stock": "50",
        "image": "caderno1.jpg",
        "category_id": "3",
    }
    data.update(overrides)
    return data


_CATEGORIES = SelectList(items=((3, "Material Escolar"),))


def _form(**overrides) -> ProductForm:
    return ProductForm(_form_data(**overrides), categories=_CATEGORIES)


# ===========================================================================
# ProductDTO
# ===========================================================================


class TestProductDTOValidation:
    def test_valid_data(self):
        dto = ProductDTO(
            name="Widget", description="A widget", price=Decimal("1.00"), stock=1
        )
        assert dto.id is None
        assert dto.image == ""
        assert dto.category_id is None

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            ProductDTO(name="Widget", description="A widget", price=Decimal("-1"), stock=1)

    def test_negative_stock_raises(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            ProductDTO(name="Widget", description="A widget", price=Decimal("1"), stock=-1)

    def test_none_image_becomes_empty(self):
        dto = ProductDTO(
            name="Widget", description="A widget", price=Decimal("1"), stock=1, image=None
        )
        assert dto.image == ""

    def test_is_immutable(self):
        dto = ProductDTO(name="Widget", description="A widget", price=Decimal("1"), stock=1)
        with pytest.raises(ValidationError):
            dto.name = "Changed"


class TestProductDTOFromEntity:
    def test_with_prefetched_category(self):
        product = Product(
            pk=7,
            name="Widget",
            description="A widget",
            price=Decimal("19.99"),
            stock=10,
            image="widget.png",
            category=Category(pk=3, name="Tools"),
        )

        dto = ProductDTO.from_entity(product)

        assert dto.id == 7
        assert dto.price == Decimal("19.99")
        assert dto.category_id == 3
        assert dto.category_name == "Tools"

    def test_without_category(self):
        product = Product(
            pk=8, name="Widget", description="A widget", price=Decimal("1"), stock=0
        )

        dto = ProductDTO.from_entity(product)

        assert dto.category_id is None
        assert dto.category_name is None

    def test_unloaded_category_is_not_fetched(self, category):
        saved = Product.objects.create(
            name="Widget",
            description="A widget",
            price=Decimal("1"),
            stock=0,
            category=category,
        )
        product = Product.objects.get(pk=saved.pk)

        dto = ProductDTO.from_entity(product)

        assert dto.category_id == category.pk
        assert dto.category_name is None


class TestProductDTOFromForm:
    def test_valid_form_yields_validated_dto(self):
        form = _form()

        dto = ProductDTO.from_form(form, id=7)

        assert dto.id == 7
        assert dto.price == Decimal("7.45")
        assert dto.stock == 50
        assert dto.category_id == 3

    def test_invalid_form_keeps_submitted_values(self):
        form = _form(name="ab", price="not-a-number")

        dto = ProductDTO.from_form(form)

        assert dto.name == "ab"
        assert dto.price == "not-a-number"

    def test_empty_category_becomes_none(self):
        form = _form(category_id="")

        assert ProductDTO.from_form(form).category_id is None


# ===========================================================================
# SelectList
# ===========================================================================


class TestSelectList:
    def test_from_categories(self):
        categories = [Category(pk=1, name="A"), Category(pk=2, name="B")]

        select = SelectList.from_categories(categories, selected=2)

        assert select.items == ((1, "A"), (2, "B"))
        assert select.selected == 2

    def test_choices_start_with_empty_option(self):
        select = SelectList(items=((1, "A"),))

        assert select.choices == [("", "---------"), (1, "A")]


# ===========================================================================
# ProductForm
# ===========================================================================


class TestProductForm:
    def test_valid(self):
        assert _form().is_valid()

    def test_name_too_short(self):
        form = _form(name="ab")
        assert not form.is_valid()
        assert "name" in form.errors

    def test_description_required(self):
        form = _form(description="")
        assert not form.is_valid()
        assert form.errors["description"] == ["The Description is Required"]

    def test_stock_range(self):
        assert _form(stock="0").is_valid()
        assert not _form(stock="-1").is_valid()
        assert not _form(stock="10000").is_valid()

    def test_unknown_category_rejected(self):
        form = _form(category_id="999")
        assert not form.is_valid()
        assert "category_id" in form.errors

    def test_category_rejected_without_choices(self):
        form = ProductForm(_form_data())
        assert not form.is_valid()
        assert "category_id" in form.errors

    def test_empty_category_allowed(self):
        form = _form(category_id="")
        assert form.is_valid()
        assert form.cleaned_data["category_id"] is None

    def test_image_must_be_file_name(self):
        form = _form(image="../etc/passwd")
        assert not form.is_valid()
        assert "image" in form.errors

    def test_categories_populate_select(self):
        select = SelectList(items=((3, "Material Escolar"),), selected=3)

        form = ProductForm(categories=select)

        assert form.fields["category_id"].widget.choices == select.choices
        assert form.initial["category_id"] == 3
