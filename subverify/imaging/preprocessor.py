import io
from urllib.parse import urlparse

import httpx
from PIL import Image

from subverify.imaging.exceptions import (
    ImageDecodeError,
    ImageFetchError,
    UnsupportedImageFormatError,
)
from subverify.logging.logger import Log

ALLOWED_EXTENSIONS = frozenset({"jpg", "png", "webp", "gif"})


def resolve_extension(url: str, filename: str | None = None) -> str:
    """Return the lower-cased extension from the filename, else the URL path."""
    source = filename or urlparse(url).path
    name = source.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


class ImagePreprocessor:
    """Downloads a screenshot and standardizes it for OCR."""

    def __init__(
        self,
        *,
        target_width: int = 1000,
        timeout_seconds: float = 15,
        client: httpx.Client | None = None,
    ) -> None:
        self._target_width = target_width
        self._client = client or httpx.Client(
            timeout=timeout_seconds, follow_redirects=True
        )

    def check_format(self, url: str, filename: str | None = None) -> str:
        """Validate the extension against the allow-list.

        Raises:
            UnsupportedImageFormatError: if the extension is not allowed.
        """
        extension = resolve_extension(url, filename)
        if extension not in ALLOWED_EXTENSIONS:
            raise UnsupportedImageFormatError(
                f"extension '{extension}' is not one of {sorted(ALLOWED_EXTENSIONS)}"
            )
        return extension

    def fetch(self, url: str) -> bytes:
        """Download the image bytes. No retry.

        Raises:
            ImageFetchError: on transport errors, timeouts or non-2xx responses.
        """
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ImageFetchError(f"image download failed: {exc}") from exc
        return response.content

    def resize(self, raw_bytes: bytes) -> bytes:
        """Scale to the target width keeping aspect ratio, re-encode as PNG.

        Raises:
            ImageDecodeError: if the bytes are not a readable image.
        """
        try:
            with Image.open(io.BytesIO(raw_bytes)) as img:
                img.seek(0)
                frame = img.convert("RGB")
            width, height = frame.size
            new_height = max(1, round(height * self._target_width / width))
            resized = frame.resize((self._target_width, new_height), Image.Resampling.LANCZOS)
            buf = io.BytesIO()
            resized.save(buf, format="PNG")
        except Exception as exc:
            raise ImageDecodeError(f"image preprocessing failed: {exc}") from exc
        Log.debug(f"Resized image {width}x{height} -> {self._target_width}x{new_height}")
        return buf.getvalue()

    def prepare(self, url: str, filename: str | None = None) -> bytes:
        """Check format, fetch and resize in one call."""
        self.check_format(url, filename)
        return self.resize(self.fetch(url))

    def close(self) -> None:
        self._client.close()
