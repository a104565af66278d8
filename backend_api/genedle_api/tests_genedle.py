import string

from django.test import SimpleTestCase

from genedle_api.puzzles import (
    GeneGameService,
    Guess,
    InvalidGuess,
    LookupFailure,
    NoSymbolFound,
    ValidGuess,
    score_guess,
    select_daily_word,
)
from genedle_api.puzzles.registry import RegistryResponse
from genedle_api.puzzles.rng import ChaChaRng
from genedle_api.puzzles.selector import draw_first_letter
from genedle_api.testing import FakeRegistry, single_symbol_registry

CORPUS = [f"{letter}{suffix}" for letter in string.ascii_uppercase for suffix in ("AB1", "CDE2", "F3")]


def _guess(word, mode="normal", session=1234567890):
    return Guess(letters=tuple(word), session=session, mode=mode)


class SelectorTests(SimpleTestCase):
    def test_selection_follows_seeded_generator(self):
        registry = FakeRegistry(CORPUS)
        for seed in (1234567890, 1234567891, 739000):
            rng = ChaChaRng.from_seed(seed)
            letter = draw_first_letter(rng)
            matches = [s for s in CORPUS if s.startswith(letter)]
            expected = matches[rng.randint(1, len(matches)) - 1]
            self.assertEqual(select_daily_word(registry, seed), expected)

    def test_reference_seeds_draw_known_letters(self):
        for seed, letter in ((1234567890, "M"), (1234567891, "T")):
            registry = FakeRegistry(CORPUS)
            self.assertTrue(select_daily_word(registry, seed).startswith(letter))
            self.assertEqual(registry.queries, [f"{letter}*"])

    def test_selection_is_stable(self):
        registry = FakeRegistry(CORPUS)
        first = select_daily_word(registry, 1234567890)
        for _ in range(3):
            self.assertEqual(select_daily_word(registry, 1234567890), first)

    def test_no_symbols_for_letter(self):
        with self.assertRaises(NoSymbolFound):
            select_daily_word(FakeRegistry([]), 42)

    def test_index_beyond_returned_docs(self):
        with self.assertRaises(NoSymbolFound):
            select_daily_word(FakeRegistry([], num_found_extra=5), 42)

    def test_registry_errors_are_lookup_failures(self):
        with self.assertRaises(LookupFailure):
            select_daily_word(FakeRegistry(CORPUS, status=1), 42)
        with self.assertRaises(LookupFailure):
            select_daily_word(FakeRegistry(CORPUS, fail=True), 42)

    def test_service_caches_word_per_seed(self):
        registry = FakeRegistry(CORPUS)
        service = GeneGameService(registry)
        word = service.daily_word(7)
        self.assertEqual(service.daily_word(7), word)
        self.assertEqual(registry.count(), 1)
        self.assertEqual(service.num_letters(7), len(word))

    def test_num_letters_is_negative_on_failure(self):
        service = GeneGameService(FakeRegistry(fail=True))
        self.assertEqual(service.num_letters(7), -1)


class ScorerTests(SimpleTestCase):
    def test_feedback_vectors(self):
        cases = {
            "MIB2": ("correct", "correct", "correct", "correct"),
            "AAAA": ("absent", "absent", "absent", "absent"),
            "MIB3": ("correct", "correct", "correct", "absent"),
            "2IBM": ("present", "correct", "correct", "present"),
            "M2B2": ("correct", "absent", "correct", "correct"),
            "2222": ("absent", "absent", "absent", "correct"),
        }
        for guess, expected in cases.items():
            result = score_guess(guess, "MIB2")
            self.assertEqual(result.feedback, expected, guess)
            self.assertEqual(result.is_correct, guess == "MIB2", guess)

    def test_repeated_letters_in_secret(self):
        result = score_guess("AABB", "ABBA")
        self.assertEqual(result.feedback, ("correct", "present", "correct", "present"))

    def test_length_mismatch_raises(self):
        with self.assertRaises(ValueError):
            score_guess("MIB", "MIB2")


class _ExactFailsRegistry(FakeRegistry):
    def exact(self, text):
        raise LookupFailure("timeout")


class _ExactStatusRegistry(FakeRegistry):
    def exact(self, text):
        return RegistryResponse(status=1, num_found=1, symbols=[text])


class GuessTests(SimpleTestCase):
    def setUp(self):
        self.registry = single_symbol_registry("MIB2")
        self.service = GeneGameService(self.registry)

    def test_length_checks(self):
        self.assertEqual(self.service.guess(_guess("MIB")), InvalidGuess("not_enough_letters"))
        self.assertEqual(self.service.guess(_guess("MIB22")), InvalidGuess("too_many_letters"))

    def test_scoring_through_service(self):
        self.assertEqual(
            self.service.guess(_guess("MIB2")),
            ValidGuess(is_correct=True, feedback=("correct",) * 4),
        )
        self.assertEqual(
            self.service.guess(_guess("2IBM")),
            ValidGuess(is_correct=False, feedback=("present", "correct", "correct", "present")),
        )
        self.assertEqual(
            self.service.guess(_guess("2222")),
            ValidGuess(is_correct=False, feedback=("absent", "absent", "absent", "correct")),
        )

    def test_normal_mode_skips_dictionary(self):
        self.service.guess(_guess("ZZZZ"))
        self.assertEqual(self.registry.count("ZZZZ"), 0)

    def test_hard_mode_requires_known_symbol(self):
        self.assertEqual(self.service.guess(_guess("ZZZZ", mode="hard")), InvalidGuess("not_in_corpus"))
        outcome = self.service.guess(_guess("MIB2", mode="hard"))
        self.assertIsInstance(outcome, ValidGuess)
        self.assertTrue(outcome.is_correct)

    def test_hard_mode_non_success_status_is_not_in_corpus(self):
        service = GeneGameService(_ExactStatusRegistry(["MIB2"]))
        # pin the secret for seed 1
        service.cache.get_or_compute(("word", 1), lambda: "MIB2")
        self.assertEqual(service.guess(_guess("MIB2", "hard", 1)), InvalidGuess("not_in_corpus"))

    def test_hard_mode_lookup_failure_is_internal_error(self):
        service = GeneGameService(_ExactFailsRegistry(["MIB2"]))
        service.cache.get_or_compute(("word", 1), lambda: "MIB2")
        outcome = service.guess(_guess("MIB2", "hard", 1))
        self.assertEqual(outcome.reason, "internal_error")
        self.assertEqual(outcome.message, "timeout")

    def test_unresolvable_secret_is_internal_error(self):
        service = GeneGameService(FakeRegistry(fail=True))
        outcome = service.guess(_guess("MIB2"))
        self.assertEqual(outcome.reason, "internal_error")
        self.assertTrue(outcome.message)

    def test_repeated_guesses_are_idempotent(self):
        first = self.service.guess(_guess("MIB3", mode="hard"))
        second = self.service.guess(_guess("MIB3", mode="hard"))
        self.assertEqual(first, second)
        self.assertEqual(self.registry.count("MIB3"), 1)

    def test_outcome_wire_format(self):
        self.assertEqual(
            self.service.guess(_guess("MIB3")).to_dict(),
            {"type": "valid", "data": {"is_correct": False, "result": ["correct", "correct", "correct", "absent"]}},
        )
        self.assertEqual(
            InvalidGuess("too_many_letters").to_dict(),
            {"type": "invalid", "data": "too_many_letters"},
        )
        self.assertEqual(
            InvalidGuess("internal_error", "boom").to_dict(),
            {"type": "invalid", "data": {"internal_error": "boom"}},
        )
