from __future__ import annotations

from .server import create_app
from .service import MutantService, compute_dna_hash
from .stats import DnaStats, StatsService

__all__ = [
    "create_app",
    "compute_dna_hash",
    "DnaStats",
    "MutantService",
    "StatsService",
]
