from urllib.parse import urlparse

from transfer_inquiry.api.v1.dependencies import close_inquiry_service, get_inquiry_service
from transfer_inquiry.core.config import settings
from transfer_inquiry.core.exceptions import GatewayInfrastructureError
from transfer_inquiry.main import app
from transfer_inquiry.services.inquiry_service import InquiryService
from stubs import StubGateway, make_response

PAYLOAD = {
    "transaction_id": "TXN_0001",
    "transaction_time": "2024-01-01T10:00:00",
    "channel": "MOBILE",
    "location_code": "BKK01",
    "bank_code": "014",
    "bank_account_number": "1234567890",
    "amount": "100.50",
    "reference1": "R1",
    "reference2": "R2",
}


def use_gateway(gateway):
    app.dependency_overrides[get_inquiry_service] = lambda: InquiryService(gateway_client=gateway)


def teardown_function():
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "healthy"


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "online"
    assert "X-Process-Time" in response.headers


def test_approved_inquiry(client):
    use_gateway(StubGateway(response=make_response("approved", "Account OK")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["reason_code"] == "200"
    assert body["data"]["account_name"] == "Account OK"
    assert body["data"]["transaction_id"] == "BANK_TXN_1"


def test_invalid_request_maps_to_422(client):
    gateway = StubGateway(response=make_response("approved", "Account OK"))
    use_gateway(gateway)

    response = client.post("/api/v1/inquiry", json={**PAYLOAD, "amount": "0"})

    assert response.status_code == 422
    error = response.json()["detail"]["error"]
    assert error["code"] == "500"
    assert error["message"] == "General Invalid Data"
    assert gateway.calls == []


def test_timeout_maps_to_504(client):
    use_gateway(StubGateway(error=GatewayInfrastructureError("Connection timed out")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 504
    assert response.json()["detail"]["error"]["message"] == "Error timeout"


def test_bank_sub_code_keeps_result_details(client):
    use_gateway(StubGateway(response=make_response("invalid_data", "100:101:Bad field")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 422
    error = response.json()["detail"]["error"]
    assert error["code"] == "101"
    assert error["message"] == "Bad field"
    assert error["details"]["reference_no_1"] == "REF1"


def test_bank_sub_code_200_is_not_an_approval(client, caplog):
    use_gateway(StubGateway(response=make_response("transaction_error", "98:200:Limit exceeded")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 422
    error = response.json()["detail"]["error"]
    assert error["code"] == "200"
    assert error["message"] == "Limit exceeded"
    assert error["details"]["approved"] is False
    assert "Inquiry approved" not in caplog.text


def test_unknown_with_leading_200_is_not_an_approval(client):
    use_gateway(StubGateway(response=make_response("unknown", "200:Pending")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 422
    assert response.json()["detail"]["error"]["code"] == "200"


def test_bank_sub_code_matching_canonical_code_uses_sub_code_mapping(client):
    use_gateway(StubGateway(response=make_response("invalid_data", "504:Field missing")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 422
    assert response.json()["detail"]["error"]["code"] == "504"


def test_unsupported_code_keeps_canonical_mapping(client):
    use_gateway(StubGateway(response=make_response("weird_code", "1:2:3")))

    response = client.post("/api/v1/inquiry", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json()["detail"]["error"]["details"]["bank_sub_code"] is False


def test_health_reports_bank_gateway(client):
    data = client.get("/api/v1/health").json()["data"]

    assert data["bank_gateway"]["host"] == urlparse(settings.BANK_GATEWAY_URL).netloc
    assert data["bank_gateway"]["timeout_seconds"] == settings.BANK_GATEWAY_TIMEOUT_SECONDS


def test_correlation_id_is_echoed(client):
    response = client.get("/", headers={"X-Correlation-ID": "corr-123"})

    assert response.headers["X-Correlation-ID"] == "corr-123"


def test_correlation_id_is_generated(client):
    first = client.get("/").headers["X-Correlation-ID"]
    second = client.get("/").headers["X-Correlation-ID"]

    assert first and second and first != second


def test_inquiry_service_is_shared():
    get_inquiry_service.cache_clear()
    try:
        assert get_inquiry_service() is get_inquiry_service()
    finally:
        close_inquiry_service()

    assert get_inquiry_service.cache_info().currsize == 0
