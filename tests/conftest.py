import io
from datetime import datetime, timezone

import pytest
from PIL import Image

from subverify.verification.models import Requester


def _encode(img: Image.Image, fmt: str) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """A 2000x500 white PNG."""
    return _encode(Image.new("RGB", (2000, 500), "white"), "PNG")


@pytest.fixture()
def small_jpeg_bytes() -> bytes:
    """A 400x300 JPEG, smaller than the target width."""
    return _encode(Image.new("RGB", (400, 300), "gray"), "JPEG")


@pytest.fixture()
def gif_bytes() -> bytes:
    """A palette GIF, 500x250."""
    return _encode(Image.new("P", (500, 250), 0), "GIF")


@pytest.fixture()
def requester() -> Requester:
    return Requester(
        id="1001",
        username="alice",
        account_created_at=datetime(2020, 5, 17, 12, 0, tzinfo=timezone.utc),
    )
