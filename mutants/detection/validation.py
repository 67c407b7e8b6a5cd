"""Precondition checks for DNA grids submitted to the detector.

The HTTP layer runs these rules before analysis so that malformed input is
rejected with a readable message instead of being classified as human.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from .types import SEQUENCE_LENGTH, VALID_BASES


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "; ".join(self.errors)


def validate_dna(dna: Any) -> ValidationResult:
    """Check that ``dna`` is a square grid of at least 4x4 A/T/C/G bases.

    Every violated rule is reported. Row-level rules stop at the first problem
    found in a given row so one bad row yields one message.
    """

    result = ValidationResult()
    if dna is None:
        result.errors.append("DNA sequence cannot be null")
        return result
    if isinstance(dna, (str, bytes)) or not isinstance(dna, (list, tuple)):
        result.errors.append("DNA sequence must be a list of strings")
        return result
    if not dna:
        result.errors.append("DNA sequence cannot be empty")
        return result

    n = len(dna)
    if n < SEQUENCE_LENGTH:
        result.errors.append(
            f"DNA sequence must have at least {SEQUENCE_LENGTH} rows, got {n}"
        )

    for index, row in enumerate(dna):
        if row is None:
            result.errors.append(f"Row {index} cannot be null")
            continue
        if not isinstance(row, str):
            result.errors.append(f"Row {index} must be a string")
            continue
        if len(row) != n:
            result.errors.append(
                f"Row {index} has length {len(row)}, expected {n} (matrix must be NxN)"
            )
            continue
        invalid = sorted(set(row) - VALID_BASES)
        if invalid:
            result.errors.append(
                f"Row {index} contains invalid bases {''.join(invalid)!r}; only A, T, C, G are allowed"
            )

    return result


__all__ = ["ValidationResult", "validate_dna"]
