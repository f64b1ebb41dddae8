"""Product domain exceptions.

Raised by the Service Layer; the API layer (Views) catches them and
translates them into HTTP responses.
"""

from __future__ import annotations

NOT_FOUND_MESSAGE = "Producto no encontrado"


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, id: int | str) -> None:
        super().__init__(f"Product {id} not found.")
        self.id = id
