"""Server-rendered product pages.

Each view runs one ``ProductWorkflow`` step and turns its outcome into
an HTTP response:

- ``NotFound`` -> 404
- ``RedirectToList`` -> 302 to the index
- pages -> template render

``ProductNotFound`` raised by the service on a write becomes a 404 here;
any other exception propagates to Django.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.conf import settings
from django.core.files.storage import FileSystemStorage
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.template.response import TemplateResponse
from django.views import View

from modules.categories.repositories import CategoryDjangoRepository
from modules.categories.services import CategoryService
from modules.core.permissions import RoleRequiredMixin
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.forms import ProductForm
from modules.products.services import ProductService
from modules.products.workflows import (
    NotFound,
    ProductPage,
    ProductWorkflow,
    RedirectToList,
)
from shared.infrastructure.bus import mediator


def build_workflow() -> ProductWorkflow:
    return ProductWorkflow(
        product_service=ProductService(mediator=mediator),
        category_service=CategoryService(repository=CategoryDjangoRepository()),
        image_storage=FileSystemStorage(location=settings.WEB_ROOT / "images"),
    )


class ProductView(View):
    """Base view: owns the workflow and renders its outcomes."""

    template_name: str = ""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._workflow = build_workflow()

    def respond(
        self,
        request: HttpRequest,
        outcome: Any,
        form: Optional[ProductForm] = None,
    ) -> HttpResponse:
        if isinstance(outcome, NotFound):
            raise Http404("Product not found.")
        if isinstance(outcome, RedirectToList):
            return redirect("products:index")
        return TemplateResponse(request, self.template_name, self.get_context(outcome, form))

    def get_context(self, page: ProductPage, form: Optional[ProductForm]) -> Dict[str, Any]:
        return {
            "product": page.product,
            "image_exists": page.image_exists,
            "form": form,
        }


class ProductFormView(ProductView):
    """Shared GET/POST handling for create and edit."""

    async def bind_form(self, request: HttpRequest) -> ProductForm:
        categories = await self._workflow.category_choices()
        return ProductForm(request.POST, categories=categories)

    def get_context(self, page: ProductPage, form: Optional[ProductForm]) -> Dict[str, Any]:
        if form is None:
            initial = page.product.model_dump() if page.product else None
            form = ProductForm(initial=initial, categories=page.categories)
        return super().get_context(page, form)


# ---------------------------------------------------------------------------
# List / Details
# ---------------------------------------------------------------------------


class ProductIndexView(ProductView):
    template_name = "products/index.html"

    async def get(self, request: HttpRequest) -> HttpResponse:
        page = await self._workflow.list_products()
        return TemplateResponse(request, self.template_name, {"products": page.products})


class ProductDetailsView(ProductView):
    template_name = "products/details.html"

    async def get(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        return self.respond(request, await self._workflow.details(pk))


# ---------------------------------------------------------------------------
# Create / Edit
# ---------------------------------------------------------------------------


class ProductCreateView(ProductFormView):
    template_name = "products/create.html"

    async def get(self, request: HttpRequest) -> HttpResponse:
        return self.respond(request, await self._workflow.prepare_create())

    async def post(self, request: HttpRequest) -> HttpResponse:
        form = await self.bind_form(request)
        is_valid = form.is_valid()
        outcome = await self._workflow.submit_create(ProductDTO.from_form(form), is_valid)
        return self.respond(request, outcome, form)


class ProductEditView(ProductFormView):
    template_name = "products/edit.html"

    async def get(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        return self.respond(request, await self._workflow.prepare_edit(pk))

    async def post(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        if pk is None:
            raise Http404("Product not found.")
        form = await self.bind_form(request)
        is_valid = form.is_valid()
        dto = ProductDTO.from_form(form, id=pk)
        try:
            outcome = await self._workflow.submit_edit(dto, is_valid)
        except ProductNotFound as exc:
            raise Http404(str(exc)) from exc
        return self.respond(request, outcome, form)


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


class ProductDeleteView(RoleRequiredMixin, ProductView):
    """Confirmation page and deletion; both need the admin role."""

    template_name = "products/delete.html"

    async def get(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        return self.respond(request, await self._workflow.prepare_delete(pk))

    async def post(self, request: HttpRequest, pk: Optional[int] = None) -> HttpResponse:
        if pk is None:
            raise Http404("Product not found.")
        try:
            outcome = await self._workflow.confirm_delete(pk)
        except ProductNotFound as exc:
            raise Http404(str(exc)) from exc
        return self.respond(request, outcome)
