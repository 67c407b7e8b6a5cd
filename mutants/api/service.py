from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

from ..datastore.records import DnaRecord, RecordStore
from ..detection.types import Detector, Dna
from ..errors import DnaHashCalculationError


logger = logging.getLogger(__name__)


def compute_dna_hash(dna: Dna) -> str:
    """Return the SHA-256 hex digest of the row-major concatenation of ``dna``."""

    try:
        joined = "".join(dna)
        return hashlib.sha256(joined.encode("utf-8")).hexdigest()
    except (TypeError, ValueError, UnicodeError) as exc:
        raise DnaHashCalculationError(f"Error calculating DNA hash: {exc}") from exc


@dataclass
class MutantService:
    """Answer mutant checks, running the detector at most once per distinct DNA."""

    detector: Detector
    store: RecordStore

    def analyze(self, dna: Dna) -> bool:
        dna_hash = compute_dna_hash(dna)

        existing = self.store.find_by_hash(dna_hash)
        if existing is not None:
            logger.debug(
                "Reusing stored result hash=%s is_mutant=%s",
                dna_hash[:12],
                existing.is_mutant,
            )
            return existing.is_mutant

        is_mutant = self.detector.is_mutant(dna)
        stored = self.store.insert_if_absent(DnaRecord.create(dna_hash, is_mutant))
        if stored.is_mutant != is_mutant:
            logger.warning(
                "Stored result differs from fresh analysis hash=%s stored=%s computed=%s",
                dna_hash[:12],
                stored.is_mutant,
                is_mutant,
            )
        logger.info(
            "Analysed DNA rows=%d hash=%s is_mutant=%s",
            len(dna),
            dna_hash[:12],
            stored.is_mutant,
        )
        return stored.is_mutant


__all__ = ["MutantService", "compute_dna_hash"]
