from __future__ import annotations


class DnaHashCalculationError(RuntimeError):
    """Raised when the content digest of a DNA grid cannot be computed."""


class StoreError(RuntimeError):
    """Raised when the record store cannot be read from or written to."""


__all__ = ["DnaHashCalculationError", "StoreError"]
