from fastapi.testclient import TestClient
from app.main import app
import pytest

client = TestClient(app)

def test_404_not_found():
    response = client.get("/non-existent-route")
    assert response.status_code == 404
    data = response.json()
    assert "error" in data
    assert "code" in data
    assert data["code"] == "HTTP_ERROR"

def test_405_method_not_allowed():
    response = client.delete("/live")
    assert response.status_code == 405
    assert response.json()["code"] == "HTTP_ERROR"

def test_validation_error_structure():
    from pydantic import BaseModel

    class Item(BaseModel):
        name: str
        price: int

    @app.post("/test-validation")
    def create_item(item: Item):
        return item

    response = client.post("/test-validation", json={"name": "foo", "price": "invalid"})
    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert "details" in data
    assert len(data["details"]) > 0

@pytest.mark.parametrize(
    "exc_name, status, code",
    [
        ("ResourceNotFoundError", 404, "NOT_FOUND"),
        ("ForbiddenError", 403, "FORBIDDEN"),
        ("AuthenticationError", 401, "AUTHENTICATION_FAILED"),
        ("DuplicateApplicationError", 400, "DUPLICATE_APPLICATION"),
        ("InvalidStateTransitionError", 409, "INVALID_STATE_TRANSITION"),
        ("ValidationError", 422, "VALIDATION_ERROR"),
        ("StoreError", 500, "STORE_ERROR"),
        ("ExternalServiceError", 502, "EXTERNAL_SERVICE_ERROR"),
    ],
)
def test_domain_exceptions_map_to_status(exc_name, status, code):
    from app.core import exceptions

    exc_class = getattr(exceptions, exc_name)
    path = f"/test-domain-error/{exc_name}"

    @app.get(path)
    def trigger():
        raise exc_class()

    response = client.get(path)
    assert response.status_code == status
    data = response.json()
    assert data["code"] == code
    assert data["error"]

def test_custom_exception_message():
    from app.core.exceptions import ResourceNotFoundError

    @app.get("/test-custom-error")
    def trigger_custom_error():
        raise ResourceNotFoundError(message="Item not found")

    response = client.get("/test-custom-error")
    assert response.status_code == 404
    data = response.json()
    assert data["code"] == "NOT_FOUND"
    assert data["error"] == "Item not found"

def test_liveness_probe():
    response = client.get("/live")
    assert response.status_code == 200
    assert response.json() == {"status": "alive"}
    assert "X-Process-Time" in response.headers
