import unittest

from mutants.detection import MutantDetector


MUTANT_DNA = ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]

# Row 0 is the only run of the grid; the remaining rows alternate letters so
# that no column or diagonal repeats across two consecutive rows.
SINGLE_ROW_OF_SIX = ["AAAAAA", "CGCGCG", "TATATA", "GCGCGC", "ATATAT", "CGCGCG"]


class MutantDetectorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.detector = MutantDetector()

    def test_reference_mutant(self) -> None:
        self.assertTrue(self.detector.is_mutant(MUTANT_DNA))

    def test_single_horizontal_run_is_human(self) -> None:
        self.assertFalse(self.detector.is_mutant(["AAAA", "CAGT", "TTAT", "AGAC"]))

    def test_two_horizontal_runs_are_mutant(self) -> None:
        self.assertTrue(self.detector.is_mutant(["AAAA", "AAAA", "CAGT", "TTAT"]))

    def test_overlapping_windows_count_separately(self) -> None:
        self.assertTrue(self.detector.is_mutant(SINGLE_ROW_OF_SIX))

    def test_run_of_four_followed_by_other_bases_is_human(self) -> None:
        dna = ["AAAAGC", "CGCGCG", "TATATA", "GCGCGC", "ATATAT", "CGCGCG"]
        self.assertFalse(self.detector.is_mutant(dna))

    def test_single_vertical_run_is_human(self) -> None:
        self.assertFalse(self.detector.is_mutant(["ACGT", "AGTC", "ACGT", "ATCG"]))

    def test_horizontal_and_vertical_runs(self) -> None:
        self.assertTrue(self.detector.is_mutant(["AAAA", "ACGT", "ATGC", "ACTG"]))

    def test_both_diagonals(self) -> None:
        self.assertTrue(self.detector.is_mutant(["ACGA", "CAAT", "GAAC", "ATCA"]))

    def test_no_runs(self) -> None:
        dna = ["ATGC", "CAGT", "TTAT", "AGAC"]
        self.assertFalse(self.detector.is_mutant(dna))

    def test_grids_below_minimum_size_are_never_mutant(self) -> None:
        self.assertFalse(self.detector.is_mutant(["AAA", "AAA", "AAA"]))
        self.assertFalse(self.detector.is_mutant(["AA", "AA"]))
        self.assertFalse(self.detector.is_mutant(["A"]))

    def test_malformed_input_returns_false(self) -> None:
        self.assertFalse(self.detector.is_mutant(None))
        self.assertFalse(self.detector.is_mutant([]))
        self.assertFalse(self.detector.is_mutant(["AAAA", "AAA", "AAAA", "AAAA"]))
        self.assertFalse(self.detector.is_mutant(["AAAX", "AAAA", "AAAA", "AAAA"]))
        self.assertFalse(self.detector.is_mutant(["AAAA", None, "AAAA", "AAAA"]))
        self.assertFalse(self.detector.is_mutant(["aaaa", "aaaa", "aaaa", "aaaa"]))
        self.assertFalse(self.detector.is_mutant("AAAA"))

    def test_large_uniform_grid(self) -> None:
        dna = ["A" * 200] * 200
        self.assertTrue(self.detector.is_mutant(dna))

    def test_accepts_tuples(self) -> None:
        self.assertTrue(self.detector.is_mutant(tuple(MUTANT_DNA)))

    def test_repeated_calls_are_deterministic(self) -> None:
        results = {self.detector.is_mutant(MUTANT_DNA) for _ in range(5)}
        self.assertEqual(results, {True})
        human = ["AAAA", "CAGT", "TTAT", "AGAC"]
        results = {self.detector.is_mutant(human) for _ in range(5)}
        self.assertEqual(results, {False})


if __name__ == "__main__":
    unittest.main()
