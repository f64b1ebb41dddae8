"""Integration tests for OpenAPI docs and CORS policy."""

import pytest

pytestmark = pytest.mark.integration


class TestApiDocs:
    def test_schema_lists_product_routes(self, api_client):
        response = api_client.get("/api/schema")
        assert response.status_code == 200
        content = response.content.decode()
        assert "/api/products/{id}" in content
        assert "Products" in content

    def test_swagger_ui_is_served(self, client):
        response = client.get("/docs")
        assert response.status_code == 200


class TestCorsPolicy:
    def test_allowed_origin_receives_cors_header(self, client):
        response = client.get("/api/products", HTTP_ORIGIN="http://frontend.test")
        assert response["Access-Control-Allow-Origin"] == "http://frontend.test"

    def test_other_origin_is_not_allowed(self, client):
        response = client.get("/api/products", HTTP_ORIGIN="http://evil.test")
        assert "Access-Control-Allow-Origin" not in response
