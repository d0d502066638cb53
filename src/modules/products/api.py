"""Product JSON API.

Exposes the read side of ``ProductService`` via DRF.  The service is
async; the viewset drives it with ``async_to_sync``.
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.pagination import StandardResultsSetPagination
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from shared.infrastructure.bus import mediator


class ProductViewSet(ViewSet):
    """List and retrieve products through the mediator-backed service."""

    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(mediator=mediator)

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/

        Results are paginated.
        """
        products = async_to_sync(self._service.get_products)()

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(products, request, view=self)
        serializer = ProductSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product_id = int(pk)
        except (TypeError, ValueError):
            product_id = None
        product = (
            async_to_sync(self._service.get_by_id)(product_id)
            if product_id is not None
            else None
        )
        if product is None:
            return Response(
                {"detail": "Product not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(ProductSerializer(product).data)
