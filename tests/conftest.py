from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def web_root(settings, tmp_path):
    """Point WEB_ROOT at an empty per-test directory with an images/ folder."""
    (tmp_path / "images").mkdir()
    settings.WEB_ROOT = tmp_path
    return tmp_path


@pytest.fixture()
def category():
    return Category.objects.create(name="Material Escolar")


@pytest.fixture()
def make_product(category):
    def _make_product(**overrides) -> Product:
        defaults = {
            "name": "Caderno espiral",
            "description": "Caderno espiral 100 folhas",
            "price": Decimal("7.45"),
            "stock": 50,
            "image": "caderno1.jpg",
            "category": category,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make_product


@pytest.fixture()
def admin_user(settings):
    user = User.objects.create_user(username="admin", password="admin123")
    group, _ = Group.objects.get_or_create(name=settings.ADMIN_ROLE)
    user.groups.add(group)
    return user


@pytest.fixture()
def plain_user():
    return User.objects.create_user(username="user", password="user123")
