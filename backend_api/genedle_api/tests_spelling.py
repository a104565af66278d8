from itertools import permutations

from django.test import SimpleTestCase

from genedle_api.puzzles import GeneGameService, GenerationFailed, generate_puzzle
from genedle_api.puzzles.spelling import VALID_LETTERS, build_pool
from genedle_api.testing import FakeRegistry

PATTERNS = ("ABBB", "AABB", "ABAB", "ABBA", "AAAB", "ABAA")


def _dense_corpus():
    """Two-letter symbols for every ordered letter pair, plus short and digit noise."""
    corpus = []
    for a, b in permutations(VALID_LETTERS, 2):
        corpus.extend(p.replace("A", "\0").replace("B", b).replace("\0", a) for p in PATTERNS)
    corpus.extend(f"{a}{b}" for a, b in permutations("ABCDE", 2))
    corpus.extend(f"{a}{a}{a}1" for a in "ABCDE")
    return corpus


CORPUS = _dense_corpus()


class GeneratorTests(SimpleTestCase):
    def assertValidPuzzle(self, puzzle, min_length, min_words, num_letters):
        self.assertEqual(len(puzzle.outer_letters), num_letters - 1)
        self.assertNotIn(puzzle.center_letter, puzzle.outer_letters)
        self.assertEqual(len(puzzle.letters), num_letters)
        self.assertGreaterEqual(len(puzzle.valid_symbols), min_words)
        for symbol in puzzle.valid_symbols:
            self.assertGreaterEqual(len(symbol), min_length)
            self.assertIn(puzzle.center_letter, symbol)
            self.assertTrue(set(symbol) <= puzzle.letters, symbol)

    def test_generates_seven_letter_puzzle(self):
        puzzle = generate_puzzle(FakeRegistry(CORPUS), 4, 10, 7, 20277)
        self.assertValidPuzzle(puzzle, 4, 10, 7)

    def test_generates_six_letter_puzzle(self):
        puzzle = generate_puzzle(FakeRegistry(CORPUS), 4, 10, 6, 739000)
        self.assertValidPuzzle(puzzle, 4, 10, 6)

    def test_generation_is_deterministic(self):
        first = generate_puzzle(FakeRegistry(CORPUS), 4, 10, 7, 20277)
        second = generate_puzzle(FakeRegistry(CORPUS), 4, 10, 7, 20277)
        self.assertEqual(first, second)

    def test_pool_is_fetched_once_per_generation(self):
        registry = FakeRegistry(CORPUS)
        generate_puzzle(registry, 4, 10, 7, 20277)
        # one prefix and one suffix query per pool letter
        self.assertEqual(registry.count(), 2 * (7 + 5))

    def test_retry_cap_is_terminal(self):
        with self.assertRaises(GenerationFailed):
            generate_puzzle(FakeRegistry(["ABBA"]), 4, 1000, 7, 1, max_iters=50)

    def test_num_letters_out_of_range(self):
        with self.assertRaises(GenerationFailed):
            generate_puzzle(FakeRegistry(CORPUS), 4, 1, 28, 1)
        with self.assertRaises(GenerationFailed):
            generate_puzzle(FakeRegistry(CORPUS), 4, 1, 0, 1)

    def test_pool_skips_failed_letters_and_short_symbols(self):
        pool = build_pool(FakeRegistry(["ABBA", "AB", "ABC1"]), ["A"], 4)
        self.assertEqual(pool, {"ABBA", "ABC1"})
        self.assertEqual(build_pool(FakeRegistry(["ABBA"], fail=True), ["A"], 4), set())
        self.assertEqual(build_pool(FakeRegistry(["ABBA"], status=1), ["A"], 4), set())


class MembershipTests(SimpleTestCase):
    def setUp(self):
        self.registry = FakeRegistry(CORPUS)
        self.service = GeneGameService(self.registry)

    def test_member_and_non_member(self):
        puzzle = self.service.spelling_puzzle(4, 10, 7, 20277)
        inside = sorted(puzzle.valid_symbols)[0]
        self.assertTrue(self.service.check_spelling_guess(4, 10, 7, 20277, inside))
        self.assertFalse(self.service.check_spelling_guess(4, 10, 7, 20277, "NOT-A-GENE"))
        outside = next(s for s in CORPUS if s not in puzzle.valid_symbols)
        self.assertFalse(self.service.check_spelling_guess(4, 10, 7, 20277, outside))

    def test_puzzle_is_generated_once_per_tuple(self):
        self.service.spelling_letters(4, 10, 7, 20277)
        queries = self.registry.count()
        self.service.check_spelling_guess(4, 10, 7, 20277, "ABBA")
        self.service.spelling_letters(4, 10, 7, 20277)
        self.assertEqual(self.registry.count(), queries)

    def test_exhausted_generation_degrades(self):
        service = GeneGameService(FakeRegistry(["ABBA"]), max_iters=20)
        self.assertFalse(service.check_spelling_guess(4, 1000, 7, 1, "ABBA"))
        self.assertEqual(
            service.spelling_letters(4, 1000, 7, 1),
            {"outer_letters": [], "center_letter": ""},
        )

    def test_letters_metadata(self):
        letters = self.service.spelling_letters(4, 10, 6, 20277)
        self.assertEqual(len(letters["outer_letters"]), 5)
        self.assertEqual(len(letters["center_letter"]), 1)
