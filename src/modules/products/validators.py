"""Request rule sets for the product endpoints, keyed by viewset action.

Besides presence and type, the body rules enforce the storage limits of
``Product`` (``name`` up to 100 characters, ``price`` as DECIMAL(10, 2)),
so a request that passes validation always persists unchanged.
"""

from __future__ import annotations

from decimal import Decimal

from modules.core.validation import (
    body,
    greater_than,
    is_boolean,
    is_int,
    is_numeric,
    less_than,
    max_decimal_places,
    max_length,
    not_empty,
    param,
)

NAME_MAX_LENGTH = 100
PRICE_DECIMAL_PLACES = 2
PRICE_LIMIT = Decimal("100000000")

ID_RULES = (
    param("id", is_int, "ID no válido"),
)

PRODUCT_BODY_RULES = (
    body("name", not_empty, "el nombre del producto no puede ir vacio"),
    body(
        "name",
        max_length(NAME_MAX_LENGTH),
        "el nombre del producto no puede superar los 100 caracteres",
    ),
    body("price", is_numeric, "valor no válido"),
    body("price", not_empty, "el precio del producto no puede ir vacio"),
    body("price", greater_than(0), "precio no válido"),
    body(
        "price",
        max_decimal_places(PRICE_DECIMAL_PLACES),
        "el precio no puede tener más de 2 decimales",
    ),
    body("price", less_than(PRICE_LIMIT), "el precio excede el máximo permitido"),
)

CREATE_RULES = PRODUCT_BODY_RULES

REPLACE_RULES = (
    *PRODUCT_BODY_RULES,
    body("availability", is_boolean, "Valor incorrecto"),
    *ID_RULES,
)

PRODUCT_RULES = {
    "retrieve": ID_RULES,
    "create": CREATE_RULES,
    "update": REPLACE_RULES,
    "partial_update": ID_RULES,
    "destroy": ID_RULES,
}
