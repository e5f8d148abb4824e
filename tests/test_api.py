"""Tests for the address HTTP API."""

import pytest
from fastapi.testclient import TestClient

RAW_ADDRESS = "0:189226288820c4a3fff71c20d02e040e7c167f349846b1cf3bf05176a2aea142"
USER_FRIENDLY_ADDRESS = "UQAYkiYoiCDEo__3HCDQLgQOfBZ_NJhGsc878FF2oq6hQvUB"


@pytest.fixture
def client() -> TestClient:
    """Create test client for the FastAPI app."""
    from tonaddr.api.main import app

    return TestClient(app)


def error_code(response) -> str:
    return response.json()["detail"]["error"]["code"]


class TestServiceEndpoints:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestConvertEndpoint:
    """POST /v1/address/convert"""

    def test_raw_to_user_friendly(self, client: TestClient) -> None:
        response = client.post(
            "/v1/address/convert",
            json={"address": RAW_ADDRESS, "from_type": "raw", "to_type": "user_friendly"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["result"] == USER_FRIENDLY_ADDRESS
        assert data["original"] == RAW_ADDRESS

    def test_direction_is_detected(self, client: TestClient) -> None:
        response = client.post("/v1/address/convert", json={"address": f"  {USER_FRIENDLY_ADDRESS}\n"})
        assert response.status_code == 200
        data = response.json()
        assert data["from_type"] == "user_friendly"
        assert data["to_type"] == "raw"
        assert data["result"] == RAW_ADDRESS

    def test_same_type_echoes_address(self, client: TestClient) -> None:
        response = client.post(
            "/v1/address/convert",
            json={"address": RAW_ADDRESS, "from_type": "raw", "to_type": "raw"},
        )
        assert response.status_code == 200
        assert response.json()["result"] == RAW_ADDRESS

    def test_empty_address(self, client: TestClient) -> None:
        response = client.post("/v1/address/convert", json={"address": "   "})
        assert response.status_code == 400
        assert error_code(response) == "EMPTY_ADDRESS"

    def test_unknown_format(self, client: TestClient) -> None:
        response = client.post("/v1/address/convert", json={"address": "0:xyz"})
        assert response.status_code == 400
        assert error_code(response) == "UNKNOWN_ADDRESS_FORMAT"

    def test_declared_format_mismatch(self, client: TestClient) -> None:
        response = client.post(
            "/v1/address/convert",
            json={"address": USER_FRIENDLY_ADDRESS, "from_type": "raw"},
        )
        assert response.status_code == 400
        assert error_code(response) == "INVALID_RAW_FORMAT"

    def test_checksum_mismatch(self, client: TestClient) -> None:
        response = client.post("/v1/address/convert", json={"address": USER_FRIENDLY_ADDRESS[:-1] + "C"})
        assert response.status_code == 400
        assert error_code(response) == "CHECKSUM_MISMATCH"

    def test_unsupported_workchain(self, client: TestClient) -> None:
        response = client.post("/v1/address/convert", json={"address": "2:" + "a" * 64})
        assert response.status_code == 400
        assert error_code(response) == "INVALID_RAW_FORMAT"

    def test_invalid_type_name(self, client: TestClient) -> None:
        response = client.post(
            "/v1/address/convert",
            json={"address": RAW_ADDRESS, "from_type": "bounceable"},
        )
        assert response.status_code == 422


class TestValidateEndpoint:
    """POST /v1/address/validate"""

    def test_raw(self, client: TestClient) -> None:
        response = client.post("/v1/address/validate", json={"address": RAW_ADDRESS})
        assert response.status_code == 200
        data = response.json()
        assert data["is_raw"] is True
        assert data["is_user_friendly"] is False
        assert data["detected_type"] == "raw"

    def test_invalid(self, client: TestClient) -> None:
        response = client.post("/v1/address/validate", json={"address": "0:xyz"})
        assert response.status_code == 200
        data = response.json()
        assert data["is_raw"] is False
        assert data["is_user_friendly"] is False
        assert data["detected_type"] is None


class TestParseEndpoint:
    """POST /v1/address/parse"""

    @pytest.mark.parametrize("address", [RAW_ADDRESS, USER_FRIENDLY_ADDRESS])
    def test_parse_either_format(self, client: TestClient, address: str) -> None:
        response = client.post("/v1/address/parse", json={"address": address})
        assert response.status_code == 200
        assert response.json() == {
            "raw": RAW_ADDRESS,
            "user_friendly": USER_FRIENDLY_ADDRESS,
            "workchain": 0,
            "hash": RAW_ADDRESS.split(":")[1],
            "checksum": "f501",
        }

    def test_parse_rejects_corrupted(self, client: TestClient) -> None:
        response = client.post("/v1/address/parse", json={"address": USER_FRIENDLY_ADDRESS[:-1] + "C"})
        assert response.status_code == 400
        assert error_code(response) == "CHECKSUM_MISMATCH"
