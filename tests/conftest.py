"""Shared fixtures: isolated environment, in-memory images and a fake HTTP server."""

import struct
import zlib
from io import BytesIO

import httpx
import pytest
from PIL import Image

from core.config import COLOR_FIELDS, BOOLEAN_FIELDS, CustomizerSettings

ICON_URL = "https://cdn.example.com/icon.png"
BLACK_URL = "https://cdn.example.com/icon-black.png"
LOGO_URL = "https://cdn.example.com/logo.png"
MALFORMED_URL = "https://cdn.example.com:abc/logo.png"

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)

_ENV_VARS = [
    "ICON_URL",
    "LOGO_URL",
    "ICON_BLACK_URL",
    "CUSTOM_ROOT",
    "HTTP_TIMEOUT_SECONDS",
    "HTTP_USER_AGENT",
    *(env for _, env, _ in COLOR_FIELDS),
    *(name.upper() for name in BOOLEAN_FIELDS),
]


def make_png(size=(64, 32), color=RED) -> bytes:
    buffer = BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_undecodable_png() -> bytes:
    """PNG whose chunk CRCs are valid but whose IDAT stream is not zlib data.

    `Image.verify()` accepts it; decoding the pixels fails.
    """

    data = make_png()
    out = bytearray(data[:8])
    pos = 8
    while pos < len(data):
        (length,) = struct.unpack(">I", data[pos : pos + 4])
        chunk_type = data[pos + 4 : pos + 8]
        body = data[pos + 8 : pos + 8 + length]
        if chunk_type == b"IDAT":
            body = b"\xde\xad\xbe\xef" * 4
        out += struct.pack(">I", len(body)) + chunk_type + body
        out += struct.pack(">I", zlib.crc32(chunk_type + body) & 0xFFFFFFFF)
        pos += 12 + length
    return bytes(out)


class RecordingReporter:
    def __init__(self):
        self.messages = []

    def _record(self, level, message):
        self.messages.append((level, message))

    def header(self, message):
        self._record("header", message)

    def info(self, message):
        self._record("info", message)

    def warning(self, message):
        self._record("warning", message)

    def error(self, message):
        self._record("error", message)

    def of(self, level):
        return [m for lvl, m in self.messages if lvl == level]


class FakeServer:
    """Routes exact URLs to (status, body); anything else is a 404."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        status, body = self.routes.get(url, (404, b"not found"))
        return httpx.Response(status, content=body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def server():
    return FakeServer({ICON_URL: (200, make_png(color=RED))})


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides):
        values = {"custom_root": tmp_path / "custom", "icon_url": ICON_URL}
        values.update(overrides)
        return CustomizerSettings(_env_file=None, **values)

    return _make
