import io

import pytest
import requests
from PIL import Image, ImageDraw

from main import app


def make_image_bytes(width, height, fmt="JPEG", mode="RGB", color=(40, 120, 200)):
    img = Image.new(mode, (width, height), color)
    draw = ImageDraw.Draw(img)
    # Some structure so normalize has a range to stretch
    accent = (230, 200, 60, 255) if mode == "RGBA" else (230, 200, 60)
    draw.rectangle((width // 4, height // 4, width // 2, height // 2), fill=accent)
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def open_image(data):
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def client():
    app.config.update(TESTING=True)
    return app.test_client()


@pytest.fixture
def large_jpeg():
    return make_image_bytes(3000, 2000)


@pytest.fixture
def small_jpeg():
    return make_image_bytes(800, 600)
