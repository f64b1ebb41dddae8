"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the Service
layer.  DTOs are immutable (``frozen=True``) and are only built once the
request rule set (``validators.py``) has passed.

- ``CreateProductDTO``: input for product creation.
- ``ReplaceProductDTO``: input for a full product replacement.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v


class ReplaceProductDTO(CreateProductDTO):
    """Immutable DTO for full replacement: every writable field is required."""

    availability: bool
