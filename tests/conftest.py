import pytest
import requests

from src.core import live_data


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self.text is not None:
            raise ValueError("not JSON")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_api(monkeypatch):
    """
    Route requests.get by URL to canned responses.

    Set `fake_api["current"]` / `fake_api["history"]` to FakeResponse kwargs
    (e.g. {"payload": {...}, "status_code": 404}) or to an exception
    instance. Calls are recorded in `fake_api["calls"]`.
    """
    routes = {"current": None, "history": None, "calls": []}

    def fake_get(url, params=None, headers=None, timeout=None):
        routes["calls"].append({"url": url, "params": params, "headers": headers})
        key = "history" if "/history" in url else "current"
        response = routes[key]
        if isinstance(response, Exception):
            raise response
        if response is None:
            raise AssertionError(f"Unexpected request to {url}")
        return FakeResponse(**response)

    monkeypatch.setattr(live_data.requests, "get", fake_get)
    return routes
