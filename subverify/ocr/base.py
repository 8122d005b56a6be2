from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all text recognition adapters."""

    @abstractmethod
    def extract_text(self, image_bytes: bytes) -> str:
        """Recognize text in an image.

        Args:
            image_bytes: Encoded image, as produced by the preprocessor.

        Returns:
            Concatenated recognized text. Layout and confidences are dropped.

        Raises:
            OcrError: if recognition fails for any reason.
        """
