"""Product service layer (Use Cases).

Orchestrates the product operations, delegating persistence to the
injected ``IProductRepository``.  One store round-trip per lookup; a
missing product raises ``ProductNotFound``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product; ``availability`` starts as ``True``."""
        product = Product(name=dto.name, price=dto.price, availability=True)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def replace_product(self, id: int, dto: ReplaceProductDTO) -> Product:
        """Overwrite name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability
        product = self._repo.save(product)
        logger.info("product.replaced", product_id=id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: int) -> Product:
        """Flip ``availability`` to the inverse of its current value.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        product.availability = not product.availability
        product = self._repo.save(product)
        logger.info(
            "product.availability_changed",
            product_id=id,
            availability=product.availability,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Remove a product permanently.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        logger.info("product.deleted", product_id=id)
