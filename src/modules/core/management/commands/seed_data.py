from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand

from modules.categories.models import Category
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with development catalog data."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        categories = self._seed_categories()
        products = self._seed_products(categories)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"categories={len(categories)}, "
                f"products={len(products)}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        admin_group, _ = Group.objects.get_or_create(name=settings.ADMIN_ROLE)
        created = 0
        if not User.objects.filter(username="admin").exists():
            admin = User.objects.create_user("admin", password="admin123")
            admin.groups.add(admin_group)
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="user123")
            created += 1
        return created

    def _seed_categories(self) -> dict[str, Category]:
        self.stdout.write("Creating categories...")
        categories = {}
        for name in ("Material Escolar", "Eletrônicos", "Acessórios"):
            category, _ = Category.objects.get_or_create(name=name)
            categories[name] = category
        self.stdout.write(self.style.SUCCESS("Creating categories... Done!"))
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Caderno espiral", "Caderno espiral 100 folhas", Decimal("7.45"), 50, "caderno1.jpg", "Material Escolar"),
            ("Estojo escolar", "Estojo escolar cinza", Decimal("5.65"), 70, "estojo1.jpg", "Material Escolar"),
            ("Borracha escolar", "Borracha branca pequena", Decimal("3.25"), 80, "borracha1.jpg", "Material Escolar"),
            ("Calculadora escolar", "Calculadora simples", Decimal("15.39"), 20, "calculadora1.jpg", "Eletrônicos"),
            ("Mouse sem fio", "Mouse óptico sem fio", Decimal("49.90"), 35, "mouse1.jpg", "Acessórios"),
        ]
        for name, description, price, stock, image, category in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "price": price,
                    "stock": stock,
                    "image": image,
                    "category": categories[category],
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
