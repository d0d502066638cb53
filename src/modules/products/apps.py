from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.products.handlers import register_product_handlers
        from modules.products.repositories import ProductDjangoRepository
        from shared.infrastructure.bus import mediator

        register_product_handlers(mediator, ProductDjangoRepository())
        mediator.seal()
