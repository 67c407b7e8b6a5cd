from __future__ import annotations

from dataclasses import dataclass

from .types import Dna, SEQUENCE_LENGTH, VALID_BASES


@dataclass(frozen=True)
class MutantDetector:
    """Flag DNA grids holding more than one run of four identical bases.

    Runs are searched horizontally, vertically and along both diagonals in a
    single pass over the grid. Overlapping windows count separately, so a run
    of six identical bases yields three hits. The scan stops as soon as a
    second hit is found.
    """

    def is_mutant(self, dna: Dna) -> bool:
        if not _is_valid_dna(dna):
            return False

        n = len(dna)
        # Last start index from which a run still fits inside the grid.
        last = n - SEQUENCE_LENGTH
        matrix = list(dna)
        sequence_count = 0

        for row in range(n):
            for col in range(n):
                if col <= last and _check_horizontal(matrix, row, col):
                    sequence_count += 1
                    if sequence_count > 1:
                        return True

                if row <= last and _check_vertical(matrix, row, col):
                    sequence_count += 1
                    if sequence_count > 1:
                        return True

                if (
                    row <= last
                    and col <= last
                    and _check_diagonal_descending(matrix, row, col)
                ):
                    sequence_count += 1
                    if sequence_count > 1:
                        return True

                if (
                    row >= SEQUENCE_LENGTH - 1
                    and col <= last
                    and _check_diagonal_ascending(matrix, row, col)
                ):
                    sequence_count += 1
                    if sequence_count > 1:
                        return True

        return False


def _is_valid_dna(dna: Dna | None) -> bool:
    if not dna:
        return False
    try:
        n = len(dna)
    except TypeError:
        return False
    if n < SEQUENCE_LENGTH:
        return False
    for row in dna:
        if not isinstance(row, str) or len(row) != n:
            return False
        if not VALID_BASES.issuperset(row):
            return False
    return True


def _check_horizontal(matrix: list[str], row: int, col: int) -> bool:
    base = matrix[row][col]
    line = matrix[row]
    return line[col + 1] == base and line[col + 2] == base and line[col + 3] == base


def _check_vertical(matrix: list[str], row: int, col: int) -> bool:
    base = matrix[row][col]
    return (
        matrix[row + 1][col] == base
        and matrix[row + 2][col] == base
        and matrix[row + 3][col] == base
    )


def _check_diagonal_descending(matrix: list[str], row: int, col: int) -> bool:
    base = matrix[row][col]
    return (
        matrix[row + 1][col + 1] == base
        and matrix[row + 2][col + 2] == base
        and matrix[row + 3][col + 3] == base
    )


def _check_diagonal_ascending(matrix: list[str], row: int, col: int) -> bool:
    base = matrix[row][col]
    return (
        matrix[row - 1][col + 1] == base
        and matrix[row - 2][col + 2] == base
        and matrix[row - 3][col + 3] == base
    )


__all__ = ["MutantDetector"]
