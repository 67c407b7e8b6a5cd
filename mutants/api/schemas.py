from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class DnaRequest(BaseModel):
    dna: List[str] = Field(
        ...,
        description="NxN DNA matrix, one string per row using the bases A, T, C, G",
        examples=[["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]],
    )


class AnalysisResult(BaseModel):
    result: str = Field(..., description="'mutant' or 'human'")


class StatsResponse(BaseModel):
    count_mutant_dna: int
    count_human_dna: int
    ratio: float


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str | None = None


__all__ = ["DnaRequest", "AnalysisResult", "StatsResponse", "ErrorResponse"]
