import json
from typing import Any, Dict, List, Optional

import pytest

from receeco.transport.base import Transport, TransportError, TransportResponse


class RecordingTransport(Transport):
    """Transport double that records every call and replays a canned response"""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        error: Optional[Exception] = None,
    ):
        super().__init__(
            "https://receeco.test/api/trpc",
            headers={"Content-Type": "application/json"},
            timeout=30,
        )
        self.status_code = status_code
        self.body = body if isinstance(body, str) else json.dumps(body or {"result": {"data": {}}})
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def send(self, method, endpoint, params=None, json=None) -> TransportResponse:
        self.calls.append(
            {"method": method, "endpoint": endpoint, "params": params, "json": json}
        )
        if self.error is not None:
            raise self.error
        return {"status_code": self.status_code, "body": self.body}


@pytest.fixture
def transport():
    return RecordingTransport(
        body={"result": {"data": {"id": "1", "token": "abc123"}}}
    )


@pytest.fixture
def failing_transport():
    return RecordingTransport(error=TransportError("Connection refused"))


@pytest.fixture
def receipt_input():
    return {
        "merchant_string_id": "test-shop",
        "items": [
            {"name": "Tea", "quantity": 1, "unit_price": 500, "total_price": 500}
        ],
        "total_amount": 500,
        "category": "Grocery",
    }


@pytest.fixture
def make_transport():
    return RecordingTransport
