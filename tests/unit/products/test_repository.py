"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id: found / not found.
- list: ordering and empty store.
- save: insert and update.
- delete: existing / non-existing.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    defaults = {"name": "Widget", "price": Decimal("19.99")}
    defaults.update(overrides)
    return Product.objects.create(**defaults)


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(2000) is None

    def test_returns_none_for_negative_id(self, repo):
        assert repo.get_by_id(-1) is None


class TestList:
    def test_returns_all_products_ordered_by_id(self, repo):
        b = _make_product(name="B")
        a = _make_product(name="A")
        results = repo.list()
        assert [p.id for p in results] == [b.id, a.id]

    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []


class TestSave:
    def test_creates_new_product(self, repo):
        product = Product(name="New Product", price=Decimal("9.99"))
        saved = repo.save(product)
        assert saved is product
        assert saved.id is not None
        assert Product.objects.filter(id=saved.id).exists()

    def test_updates_existing_product(self, repo):
        product = _make_product()
        product.name = "Updated Name"
        product.availability = False
        repo.save(product)
        product.refresh_from_db()
        assert product.name == "Updated Name"
        assert product.availability is False


class TestDelete:
    def test_deletes_existing_product(self, repo):
        product = _make_product()
        assert repo.delete(product.id) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(2000) is False
