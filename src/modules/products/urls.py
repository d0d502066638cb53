"""Product URL configuration (server-rendered pages)."""

from __future__ import annotations

from django.urls import path

from modules.products.views import (
    ProductCreateView,
    ProductDeleteView,
    ProductDetailsView,
    ProductEditView,
    ProductIndexView,
)

app_name = "products"

urlpatterns = [
    path("", ProductIndexView.as_view(), name="index"),
    path("create/", ProductCreateView.as_view(), name="create"),
    path("<int:pk>/", ProductDetailsView.as_view(), name="details"),
    path("<int:pk>/edit/", ProductEditView.as_view(), name="edit"),
    path("<int:pk>/delete/", ProductDeleteView.as_view(), name="delete"),
    # Id-less forms of the id routes answer 404 through the workflows.
    path("details/", ProductDetailsView.as_view(), name="details-missing"),
    path("edit/", ProductEditView.as_view(), name="edit-missing"),
    path("delete/", ProductDeleteView.as_view(), name="delete-missing"),
]
