class ImageProcessingError(Exception):
    """Base exception for failures while fetching or preparing an image."""


class UnsupportedImageFormatError(Exception):
    """Raised when the attachment extension is not on the allow-list."""


class ImageFetchError(ImageProcessingError):
    """Raised when the image cannot be downloaded."""


class ImageDecodeError(ImageProcessingError):
    """Raised when the downloaded bytes cannot be decoded or resized."""
