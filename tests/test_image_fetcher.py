import pytest
import requests

from api import image_fetcher
from api.image_fetcher import download_image
from conftest import FakeResponse
from services.errors import FetchError


def test_returns_body_bytes(monkeypatch):
    seen = {}
    response = FakeResponse(content=b"\x89PNG raw body")

    def fake_get(url, timeout=None):
        seen.update(url=url, timeout=timeout)
        return response

    monkeypatch.setattr(image_fetcher.requests, "get", fake_get)

    assert download_image("https://example.com/a.png", timeout=5) == b"\x89PNG raw body"
    assert seen == {"url": "https://example.com/a.png", "timeout": 5}
    assert response.closed


def test_default_timeout_is_applied(monkeypatch):
    seen = {}

    def fake_get(url, timeout=None):
        seen["timeout"] = timeout
        return FakeResponse(content=b"x")

    monkeypatch.setattr(image_fetcher.requests, "get", fake_get)
    download_image("https://example.com/a.jpg")

    assert seen["timeout"] == image_fetcher.FETCH_TIMEOUT


def test_non_success_status_raises(monkeypatch):
    response = FakeResponse(content=b"not found", status_code=404)
    monkeypatch.setattr(image_fetcher.requests, "get", lambda url, timeout=None: response)

    with pytest.raises(FetchError) as exc_info:
        download_image("https://example.com/missing.jpg")

    assert isinstance(exc_info.value.__cause__, requests.exceptions.HTTPError)
    assert response.closed


@pytest.mark.parametrize("error", [
    requests.exceptions.ConnectionError("Name or service not known"),
    requests.exceptions.Timeout("read timed out"),
])
def test_network_errors_raise(monkeypatch, error):
    def fake_get(url, timeout=None):
        raise error

    monkeypatch.setattr(image_fetcher.requests, "get", fake_get)

    with pytest.raises(FetchError):
        download_image("https://unreachable.invalid/a.jpg")


def test_malformed_url_raises():
    with pytest.raises(FetchError):
        download_image("not-a-url")
