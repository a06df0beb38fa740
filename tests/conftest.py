from datetime import date

import pytest
from fastapi.testclient import TestClient

from budget_api.ledger import LedgerStore
from budget_api.main import create_app


TODAY = date(2025, 12, 28)


@pytest.fixture
def store():
    return LedgerStore.with_mock_data(today=lambda: TODAY)


@pytest.fixture
def api(store):
    with TestClient(create_app(store)) as client:
        yield client
