"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: coercion of validated request values, frozen immutability.
- ReplaceProductDTO: availability required and coerced.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, ReplaceProductDTO

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="Mouse - testing", price=50)
        assert dto.name == "Mouse - testing"
        assert dto.price == Decimal("50")

    def test_price_string_is_coerced(self):
        dto = CreateProductDTO(name="Monitor", price="300.50")
        assert dto.price == Decimal("300.50")

    def test_non_string_name_is_coerced(self):
        dto = CreateProductDTO(name=123, price=1)
        assert dto.name == "123"

    def test_zero_price_raises(self):
        with pytest.raises(ValidationError, match="Price must be greater than zero"):
            CreateProductDTO(name="Monitor", price=0)

    def test_empty_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name="", price=10)

    def test_is_frozen(self):
        dto = CreateProductDTO(name="Monitor", price=10)
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestReplaceProductDTO:
    def test_with_all_fields(self):
        dto = ReplaceProductDTO(name="Monitor", price=30, availability=False)
        assert dto.availability is False

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("false", False), ("1", True), (0, False)],
    )
    def test_availability_is_coerced(self, raw, expected):
        dto = ReplaceProductDTO(name="Monitor", price=30, availability=raw)
        assert dto.availability is expected

    def test_availability_is_required(self):
        with pytest.raises(ValidationError):
            ReplaceProductDTO(name="Monitor", price=30)
