import io

import pytesseract
from PIL import Image

from subverify.ocr.base import BaseOcrEngine
from subverify.ocr.exceptions import OcrError


class TesseractOcrAdapter(BaseOcrEngine):
    """Recognizes text using Tesseract through pytesseract."""

    def __init__(self, *, language: str = "eng", timeout_seconds: int = 60) -> None:
        self._language = language
        self._timeout_seconds = timeout_seconds

    def extract_text(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                text = pytesseract.image_to_string(
                    img,
                    lang=self._language,
                    timeout=self._timeout_seconds,
                )
            return text.strip()
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
