from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.contextvars import get_contextvars

from glamour_storefront.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)


def build_app():
    app = FastAPI()
    app.add_middleware(CorrelationMiddleware)

    @app.get("/ping")
    async def ping():
        return {"context": get_contextvars()}

    return app


def test_generates_correlation_id_header():
    client = TestClient(build_app())

    response = client.get("/ping")

    assert response.status_code == 200
    assert response.headers["x-correlation-id"]


def test_propagates_incoming_correlation_id():
    client = TestClient(build_app())

    response = client.get("/ping", headers={"X-Correlation-ID": "corr-123"})

    assert response.headers["x-correlation-id"] == "corr-123"
    context = response.json()["context"]
    assert context["correlation_id"] == "corr-123"
    assert context["context_endpoint"] == "/ping"
    assert context["context_method"] == "GET"
