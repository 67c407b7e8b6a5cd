from __future__ import annotations

from typing import Protocol, Sequence

# Number of identical consecutive bases that make up one run.
SEQUENCE_LENGTH: int = 4

VALID_BASES: frozenset[str] = frozenset("ATCG")

Dna = Sequence[str]


class Detector(Protocol):
    def is_mutant(self, dna: Dna) -> bool: ...


__all__ = ["Detector", "Dna", "SEQUENCE_LENGTH", "VALID_BASES"]
