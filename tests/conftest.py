from __future__ import annotations

from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from route_tracer.core.models import RouteRequest
from route_tracer.providers.base import DirectionsProvider
from route_tracer.providers.http import HTTPClient


class StubProvider(DirectionsProvider):
    """Returns a canned body and remembers every request it saw."""

    def __init__(self, body: Dict[str, Any]):
        self.body = body
        self.requests: List[RouteRequest] = []

    def get_directions(self, request: RouteRequest) -> Dict[str, Any]:
        self.requests.append(request)
        return self.body


@pytest.fixture
def example_body():
    return {
        "features": [
            {
                "geometry": {"coordinates": [[-101.189, 20.126], [-101.2, 20.13]]},
                "properties": {"summary": {"distance": 1500.0, "duration": 180.0}},
            }
        ]
    }


@pytest.fixture
def stub_provider(example_body):
    return StubProvider(example_body)


def _make_response(status_code: int = 200, json_body=None, text: str = ""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_body is None:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def mock_http():
    http = HTTPClient(user_agent="route-tracer-tests", timeout_s=3)
    http.s = MagicMock()
    return http
