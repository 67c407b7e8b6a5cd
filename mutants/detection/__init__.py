from __future__ import annotations

from .types import Detector, SEQUENCE_LENGTH, VALID_BASES

__all__ = [
    "Detector",
    "SEQUENCE_LENGTH",
    "VALID_BASES",
    "MutantDetector",
    "ValidationResult",
    "validate_dna",
]


def __getattr__(name: str):
    if name == "MutantDetector":
        from .detector import MutantDetector

        return MutantDetector
    if name in {"ValidationResult", "validate_dna"}:
        from . import validation

        return getattr(validation, name)
    raise AttributeError(f"module 'mutants.detection' has no attribute {name!r}")
