"""
Tests for the image download helper.
"""

import httpx
from PIL import Image

from adapters.http_client import build_client, download_image
from conftest import ICON_URL, MALFORMED_URL, FakeServer, make_png


def test_download_writes_body_verbatim(tmp_path, reporter):
    body = make_png()
    server = FakeServer({ICON_URL: (200, body)})
    target = tmp_path / "main_icon_temp.png"

    with server.client() as client:
        assert download_image(client, ICON_URL, target, "main icon", reporter) is True

    assert target.read_bytes() == body
    assert "Successfully downloaded and validated main icon" in reporter.of("info")


def test_non_2xx_fails_and_leaves_no_file(tmp_path, reporter):
    server = FakeServer({ICON_URL: (404, b"missing")})
    target = tmp_path / "main_icon_temp.png"

    with server.client() as client:
        assert download_image(client, ICON_URL, target, "main icon", reporter) is False

    assert not target.exists()
    assert "HTTP 404" in reporter.of("error")[0]


def test_undecodable_body_is_removed(tmp_path, reporter):
    server = FakeServer({ICON_URL: (200, b"<html>definitely not an image</html>")})
    target = tmp_path / "main_icon_temp.png"

    with server.client() as client:
        assert download_image(client, ICON_URL, target, "main icon", reporter) is False

    assert not target.exists()
    assert server.requests == [ICON_URL]


def test_network_error_is_reported_not_raised(tmp_path, reporter):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    target = tmp_path / "logo_temp.png"
    with httpx.Client(transport=httpx.MockTransport(refuse)) as client:
        assert download_image(client, ICON_URL, target, "logo image", reporter) is False

    assert not target.exists()
    assert "connection refused" in reporter.of("error")[0]


def test_missing_url_is_skipped(tmp_path, reporter):
    server = FakeServer()

    with server.client() as client:
        assert download_image(client, None, tmp_path / "x.png", "black icon", reporter) is False

    assert server.requests == []
    assert reporter.of("warning") == ["No URL provided for black icon, skipping..."]


def test_build_client_applies_settings(make_settings):
    settings = make_settings(http_timeout_seconds=5, http_user_agent="tests/1.0")

    with build_client(settings) as client:
        assert client.headers["User-Agent"] == "tests/1.0"
        assert client.timeout.read == 5
        assert client.follow_redirects is True


def test_malformed_url_is_reported_not_raised(tmp_path, reporter):
    server = FakeServer()
    target = tmp_path / "logo_temp.png"

    with server.client() as client:
        assert download_image(client, MALFORMED_URL, target, "logo image", reporter) is False

    assert server.requests == []
    assert not target.exists()
    assert MALFORMED_URL in reporter.of("error")[0]


def test_decompression_bomb_is_rejected(tmp_path, reporter, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    server = FakeServer({ICON_URL: (200, make_png(size=(64, 32)))})
    target = tmp_path / "black_icon_temp.png"

    with server.client() as client:
        assert download_image(client, ICON_URL, target, "black icon", reporter) is False

    assert not target.exists()
    assert "not a valid image" in reporter.of("error")[0]
