from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def inquiry_kwargs():
    return {
        "transaction_id": "TXN_0001",
        "transaction_time": datetime(2024, 1, 1, 10, 0, 0),
        "channel": "MOBILE",
        "location_code": "BKK01",
        "bank_code": "014",
        "bank_account_number": "1234567890",
        "amount": Decimal("100.50"),
        "reference1": "R1",
        "reference2": "R2",
        "first_name": "Jane",
        "last_name": "Doe",
    }


@pytest.fixture
def client():
    from transfer_inquiry.main import app

    with TestClient(app) as test_client:
        yield test_client
