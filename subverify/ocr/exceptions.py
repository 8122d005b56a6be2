class OcrError(Exception):
    """Raised when the text recognition engine fails for any reason."""
