"""HTTP-тести роутерів комісій та валют."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _payload(**overrides) -> dict:
    body = {
        "price": 100,
        "quantity": 2,
        "isOrganization": False,
        "currencyCode": "ZAR",
        "storedTotal": 218.8,
    }
    body.update(overrides)
    return body


class TestVerifyFeesEndpoint:
    def test_valid_total(self, client: TestClient) -> None:
        response = client.post("/api/verify-fees", json=_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is True
        assert data["subtotal"] == pytest.approx(200)
        assert data["processorFee"] == pytest.approx(8.8)
        assert data["commission"] == pytest.approx(10)
        assert data["totalToCharge"] == pytest.approx(218.8)
        assert data["sellerGrossAmount"] == pytest.approx(190)
        assert data["remittanceFee"] == pytest.approx(2.85)
        assert data["sellerNetAmount"] == pytest.approx(187.15)

    def test_tampered_total(self, client: TestClient) -> None:
        response = client.post("/api/verify-fees", json=_payload(storedTotal=150))

        assert response.status_code == 200
        assert response.json()["isValid"] is False

    def test_organization(self, client: TestClient) -> None:
        response = client.post(
            "/api/verify-fees", json=_payload(isOrganization=True, storedTotal=216.8)
        )

        assert response.status_code == 200
        assert response.json()["commission"] == pytest.approx(8)
        assert response.json()["isValid"] is True

    def test_unknown_currency(self, client: TestClient) -> None:
        response = client.post("/api/verify-fees", json=_payload(currencyCode="XXX"))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid currency code: XXX"}

    @pytest.mark.parametrize(
        "overrides",
        [{"price": -5}, {"quantity": 0}, {"quantity": -1}, {"quantity": 2.5}],
    )
    def test_invalid_numbers(self, client: TestClient, overrides: dict) -> None:
        response = client.post("/api/verify-fees", json=_payload(**overrides))

        assert response.status_code == 400
        assert "error" in response.json()

    def test_integral_float_quantity(self, client: TestClient) -> None:
        response = client.post("/api/verify-fees", json=_payload(quantity=2.0))

        assert response.status_code == 200
        assert response.json()["isValid"] is True

    def test_overflowing_total(self, client: TestClient) -> None:
        response = client.post("/api/verify-fees", json=_payload(price=1e308))

        assert response.status_code == 400
        assert response.json() == {"error": "Amount too large"}

    def test_missing_stored_total(self, client: TestClient) -> None:
        body = _payload()
        del body["storedTotal"]

        response = client.post("/api/verify-fees", json=body)

        assert response.status_code == 422


class TestCalculateFeesEndpoint:
    def test_quote(self, client: TestClient) -> None:
        body = _payload()
        del body["storedTotal"]

        response = client.post("/api/calculate-fees", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["currencyCode"] == "ZAR"
        assert data["totalToCharge"] == pytest.approx(218.8)
        assert data["formatted"]["totalToCharge"] == "ZAR 218.80"
        assert data["formatted"]["processorFee"] == "ZAR 8.80"

    def test_same_numbers_as_verify(self, client: TestClient) -> None:
        quote = client.post("/api/calculate-fees", json=_payload(currencyCode="KES")).json()
        verified = client.post("/api/verify-fees", json=_payload(currencyCode="KES")).json()

        for key in ("subtotal", "processorFee", "commission", "totalToCharge", "sellerNetAmount"):
            assert quote[key] == verified[key]

    def test_unknown_currency(self, client: TestClient) -> None:
        response = client.post("/api/calculate-fees", json=_payload(currencyCode="USD"))

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid currency code: USD"


class TestCurrencyEndpoints:
    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/currency/")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 10
        assert data[0] == {
            "countryCode": "EG",
            "countryName": "Egypt",
            "dialCode": "+20",
            "currencyCode": "EGP",
            "currencyName": "Egyptian Pound",
            "currencySymbol": "E£",
        }

    def test_by_country(self, client: TestClient) -> None:
        response = client.get("/api/currency/ZM")

        assert response.status_code == 200
        assert response.json()["currencyCode"] == "ZMW"

    def test_unknown_country(self, client: TestClient) -> None:
        response = client.get("/api/currency/US")

        assert response.status_code == 404
        assert "US" in response.json()["detail"]


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
