"""Product DRF serializer for API output.

Request input is checked by the rule sets in ``validators.py`` and
carried into the Service layer by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
    )

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability"]
        read_only_fields = ["id"]
