"""Product URL configuration.

Mounted under ``api/``; every route also answers with a trailing slash::

    GET     /api/products         list
    POST    /api/products         create
    GET     /api/products/{id}    retrieve
    PUT     /api/products/{id}    update (replace)
    PATCH   /api/products/{id}    partial_update (toggle availability)
    DELETE  /api/products/{id}    destroy
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter()
router.trailing_slash = "/?"
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
