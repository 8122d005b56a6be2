from subverify.text.normalizer import normalize

__all__ = ["normalize"]
