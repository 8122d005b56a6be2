from subverify.config.settings import Settings
from subverify.ocr.base import BaseOcrEngine
from subverify.ocr.tesseract_adapter import TesseractOcrAdapter


class OcrEngineFactory:
    """Creates the correct OCR engine based on settings."""

    ADAPTERS: dict[str, type[TesseractOcrAdapter]] = {
        "tesseract": TesseractOcrAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(
            language=settings.ocr_language,
            timeout_seconds=settings.ocr_timeout_seconds,
        )
