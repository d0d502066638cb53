"""Product DRF serializers for API output.

The serializer reads ``ProductDTO`` instances returned by the service;
it never touches the ORM.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read-only serializer for the Product resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    stock = serializers.IntegerField(read_only=True)
    image = serializers.CharField(read_only=True)
    category_id = serializers.IntegerField(read_only=True, allow_null=True)
    category_name = serializers.CharField(read_only=True, allow_null=True)
