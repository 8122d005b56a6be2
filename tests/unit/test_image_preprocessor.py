import io

import httpx
import pytest
from PIL import Image

from subverify.imaging.exceptions import (
    ImageDecodeError,
    ImageFetchError,
    ImageProcessingError,
    UnsupportedImageFormatError,
)
from subverify.imaging.preprocessor import ImagePreprocessor, resolve_extension


def _client(handler) -> httpx.Client:  # type: ignore[no-untyped-def]
    return httpx.Client(transport=httpx.MockTransport(handler))


def _size(data: bytes) -> tuple[int, int]:
    with Image.open(io.BytesIO(data)) as img:
        return img.size


class TestResolveExtension:
    def test_prefers_filename(self) -> None:
        assert resolve_extension("https://cdn/x/blob", "Shot.PNG") == "png"

    def test_falls_back_to_url_path(self) -> None:
        assert resolve_extension("https://cdn/a/b/shot.webp?ex=1&is=2") == "webp"

    def test_no_extension(self) -> None:
        assert resolve_extension("https://cdn/a/b/shot") == ""


class TestCheckFormat:
    @pytest.mark.parametrize("name", ["a.jpg", "a.png", "a.webp", "a.gif", "A.JPG"])
    def test_allows_listed_extensions(self, name: str) -> None:
        preprocessor = ImagePreprocessor(client=_client(lambda r: httpx.Response(200)))
        preprocessor.check_format(f"https://cdn/{name}")

    @pytest.mark.parametrize("name", ["a.bmp", "a.jpeg", "a.pdf", "noext"])
    def test_rejects_other_extensions(self, name: str) -> None:
        preprocessor = ImagePreprocessor(client=_client(lambda r: httpx.Response(200)))
        with pytest.raises(UnsupportedImageFormatError):
            preprocessor.check_format(f"https://cdn/{name}")


class TestFetch:
    def test_returns_body(self) -> None:
        preprocessor = ImagePreprocessor(
            client=_client(lambda r: httpx.Response(200, content=b"img"))
        )
        assert preprocessor.fetch("https://cdn/a.png") == b"img"

    def test_raises_on_http_error_status(self) -> None:
        preprocessor = ImagePreprocessor(client=_client(lambda r: httpx.Response(404)))
        with pytest.raises(ImageFetchError, match="download failed"):
            preprocessor.fetch("https://cdn/a.png")

    def test_raises_on_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        preprocessor = ImagePreprocessor(client=_client(handler))
        with pytest.raises(ImageFetchError):
            preprocessor.fetch("https://cdn/a.png")


class TestResize:
    def test_scales_to_target_width_keeping_aspect(self, png_bytes: bytes) -> None:
        preprocessor = ImagePreprocessor(
            target_width=1000, client=_client(lambda r: httpx.Response(200))
        )
        assert _size(preprocessor.resize(png_bytes)) == (1000, 250)

    def test_upscales_small_images(self, small_jpeg_bytes: bytes) -> None:
        preprocessor = ImagePreprocessor(
            target_width=1000, client=_client(lambda r: httpx.Response(200))
        )
        assert _size(preprocessor.resize(small_jpeg_bytes)) == (1000, 750)

    def test_handles_gif(self, gif_bytes: bytes) -> None:
        preprocessor = ImagePreprocessor(
            target_width=1000, client=_client(lambda r: httpx.Response(200))
        )
        assert _size(preprocessor.resize(gif_bytes)) == (1000, 500)

    def test_raises_on_garbage(self) -> None:
        preprocessor = ImagePreprocessor(client=_client(lambda r: httpx.Response(200)))
        with pytest.raises(ImageDecodeError):
            preprocessor.resize(b"not an image")

    def test_decode_error_is_processing_error(self) -> None:
        assert issubclass(ImageDecodeError, ImageProcessingError)
        assert issubclass(ImageFetchError, ImageProcessingError)


class TestPrepare:
    def test_rejects_before_fetching(self) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        preprocessor = ImagePreprocessor(client=_client(handler))
        with pytest.raises(UnsupportedImageFormatError):
            preprocessor.prepare("https://cdn/a.bmp")
        assert calls == []

    def test_fetches_and_resizes(self, png_bytes: bytes) -> None:
        preprocessor = ImagePreprocessor(
            target_width=500,
            client=_client(lambda r: httpx.Response(200, content=png_bytes)),
        )
        assert _size(preprocessor.prepare("https://cdn/a.png")) == (500, 125)
