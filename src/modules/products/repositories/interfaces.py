"""Product repository interface.

The Product Store collaborator: find-all, find-by-id, save (insert or
update) and delete.  Missing products are reported as ``None`` /
``False`` so the Service Layer decides how to surface them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(self) -> List[Product]:
        """List every product, ordered by ID."""
