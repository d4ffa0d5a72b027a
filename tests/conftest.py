from __future__ import annotations

from typing import Any

import pytest

SAMPLE_PAYLOAD: dict[str, Any] = {
    "data": [
        {
            "sessionId": "sess-1",
            "playerName": "Stockbot <One>",
            "serverId": "srv-1",
            "normalStock": [
                {"name": "Dragon-East", "price": 3500000, "onSale": True},
                {"name": "Spin", "price": 7500, "onSale": False},
            ],
            "mirageStock": [],
            "createdAt": 1700000000000,
        },
        {
            "sessionId": "sess-2",
            "playerName": "Stockbot Two",
            "serverId": "srv-2",
            "normalStock": [],
            "mirageStock": [{"name": "kitsune", "price": 8000000, "onSale": False}],
            "createdAt": 1700000100000,
        },
    ]
}


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return SAMPLE_PAYLOAD
