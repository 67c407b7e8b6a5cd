from __future__ import annotations

from dataclasses import dataclass

from ..datastore.records import RecordStore


@dataclass(frozen=True)
class DnaStats:
    count_mutant_dna: int
    count_human_dna: int
    ratio: float


def calculate_ratio(count_mutant: int, count_human: int) -> float:
    """Mutants per human; with no humans recorded the mutant count is returned."""
    if count_human == 0:
        return float(count_mutant) if count_mutant > 0 else 0.0
    return count_mutant / count_human


@dataclass
class StatsService:
    store: RecordStore

    def get_stats(self) -> DnaStats:
        count_mutant = self.store.count_by_is_mutant(True)
        count_human = self.store.count_by_is_mutant(False)
        return DnaStats(
            count_mutant_dna=count_mutant,
            count_human_dna=count_human,
            ratio=calculate_ratio(count_mutant, count_human),
        )


__all__ = ["DnaStats", "StatsService", "calculate_ratio"]
