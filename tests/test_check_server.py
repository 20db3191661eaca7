import requests

import check_server


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_health_only_check_passes(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse(200, {"status": "healthy"})

    monkeypatch.setattr(check_server.requests, "get", fake_get)

    assert check_server.main(["--port", "9000"]) == 0
    assert calls == ["http://127.0.0.1:9000/health"]


def test_publish_failure_sets_exit_code(monkeypatch):
    def fake_get(url, timeout):
        if url.endswith("/api/daily"):
            return FakeResponse(502, text="Craft API responded with status 403: nope")
        return FakeResponse(200, {"status": "healthy"})

    monkeypatch.setattr(check_server.requests, "get", fake_get)

    assert check_server.main(["--publish"]) == 1


def test_unreachable_server(monkeypatch):
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(check_server.requests, "get", fake_get)

    assert check_server.check_endpoint("http://127.0.0.1:1/health", "Health Check") == (False, None)
