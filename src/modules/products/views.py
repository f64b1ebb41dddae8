"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Each action
declares its request rule set in ``validators.PRODUCT_RULES``; the rules
run before the handler and a failing request is answered with
``400 {"errors": [...]}`` without reaching the store.

Successful responses wrap the payload as ``{"data": ...}``; a missing
product is answered with ``404 {"error": "Producto no encontrado"}``.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
)
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import RuleValidationMixin
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import NOT_FOUND_MESSAGE, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import PRODUCT_RULES

DELETED_MESSAGE = "Producto eliminado"

# BigAutoField range
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

_ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="The ID of the product",
)
_INVALID = OpenApiResponse(description="Bad Request - Invalid ID or input data")
_NOT_FOUND = OpenApiResponse(description="Producto no encontrado")


class ProductWriteSerializer(serializers.Serializer):
    """Documentation-only request body schema."""

    name = serializers.CharField(help_text="The product name")
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, help_text="The product price"
    )
    availability = serializers.BooleanField(
        required=False, help_text="Required on PUT; ignored on POST"
    )


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        responses={200: ProductSerializer(many=True)},
    ),
    retrieve=extend_schema(
        summary="Get a product by id",
        parameters=[_ID_PARAMETER],
        responses={200: ProductSerializer, 400: _INVALID, 404: _NOT_FOUND},
    ),
    create=extend_schema(
        summary="Create a new Product",
        request=ProductWriteSerializer,
        responses={201: ProductSerializer, 400: _INVALID},
    ),
    update=extend_schema(
        summary="Updates a product with user input",
        parameters=[_ID_PARAMETER],
        request=ProductWriteSerializer,
        responses={200: ProductSerializer, 400: _INVALID, 404: _NOT_FOUND},
    ),
    partial_update=extend_schema(
        summary="Toggle Product availability",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={200: ProductSerializer, 400: _INVALID, 404: _NOT_FOUND},
    ),
    destroy=extend_schema(
        summary="Deletes a Product by a given ID",
        parameters=[_ID_PARAMETER],
        responses={200: OpenApiTypes.STR, 400: _INVALID, 404: _NOT_FOUND},
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(RuleValidationMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).  All
    ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    lookup_url_kwarg = "id"
    lookup_value_regex = "[^/]+"
    validation_rules = PRODUCT_RULES

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    @staticmethod
    def _product_id(raw: str) -> int:
        """Parse a validated id segment.

        Integers outside the primary key range cannot name a stored
        product, so they are reported as not found.
        """
        try:
            value = int(raw)
        except ValueError:
            raise ProductNotFound(raw) from None
        if not MIN_ID <= value <= MAX_ID:
            raise ProductNotFound(raw)
        return value

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"error": NOT_FOUND_MESSAGE},
            status=status.HTTP_404_NOT_FOUND,
        )

    @staticmethod
    def _data(payload, status_code: int = status.HTTP_200_OK) -> Response:
        return Response({"data": payload}, status=status_code)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return self._data(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(self._product_id(id))
        except ProductNotFound:
            return self._not_found()
        return self._data(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Replace / Toggle / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        product = self._service.create_product(dto)
        return self._data(
            ProductSerializer(product).data,
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        data = request.data
        dto = ReplaceProductDTO(
            name=data.get("name"),
            price=data.get("price"),
            availability=data.get("availability"),
        )
        try:
            product = self._service.replace_product(self._product_id(id), dto)
        except ProductNotFound:
            return self._not_found()
        return self._data(ProductSerializer(product).data)

    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}"""
        try:
            product = self._service.toggle_availability(self._product_id(id))
        except ProductNotFound:
            return self._not_found()
        return self._data(ProductSerializer(product).data)

    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(self._product_id(id))
        except ProductNotFound:
            return self._not_found()
        return self._data(DELETED_MESSAGE)
