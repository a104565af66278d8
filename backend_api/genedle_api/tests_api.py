from datetime import date

from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework.test import APISimpleTestCase

from genedle_api.daily import WORD_KEY, init_word, word_of_the_day
from genedle_api.puzzles import GeneGameService
from genedle_api.services import set_service
from genedle_api.testing import FakeRegistry, single_symbol_registry
from genedle_api.tests_spelling import CORPUS


class GenedleApiTests(APISimpleTestCase):
    def setUp(self):
        self.registry = single_symbol_registry("MIB2")
        set_service(GeneGameService(self.registry))

    def tearDown(self):
        set_service(None)

    def _guess(self, word, mode="normal", session=1234567890):
        return self.client.post(
            reverse('genedle-guess'),
            {"word": list(word), "session": session, "mode": mode},
            format="json",
        )

    def test_health(self):
        resp = self.client.get(reverse('Health'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Server is up!"})

    def test_letters(self):
        resp = self.client.get(reverse('genedle-letters', kwargs={"key": 1234567890}))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), 4)

    def test_letters_unavailable(self):
        set_service(GeneGameService(FakeRegistry(fail=True)))
        resp = self.client.get(reverse('genedle-letters', kwargs={"key": 1}))
        self.assertEqual(resp.json(), -1)

    def test_guess_and_win(self):
        resp = self._guess("MIB2")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"type": "valid", "data": {"is_correct": True, "result": ["correct"] * 4}},
        )

    def test_guess_letters_keep_their_case(self):
        data = self._guess("mib2").json()
        self.assertEqual(data, {"type": "valid", "data": {"is_correct": False, "result": ["absent"] * 3 + ["correct"]}})

    def test_mixed_case_secret_can_be_won(self):
        set_service(GeneGameService(single_symbol_registry("C1orf43")))
        expected = {"type": "valid", "data": {"is_correct": True, "result": ["correct"] * 7}}
        self.assertEqual(self._guess("C1orf43").json(), expected)
        self.assertEqual(self._guess("C1orf43", mode="hard").json(), expected)

    def test_character_with_long_upper_case_is_scored(self):
        resp = self._guess(["M", "I", "B", "ß"])
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"type": "valid", "data": {"is_correct": False, "result": ["correct"] * 3 + ["absent"]}},
        )

    def test_invalid_guesses(self):
        self.assertEqual(self._guess("MIB").json(), {"type": "invalid", "data": "not_enough_letters"})
        self.assertEqual(self._guess("MIB22").json(), {"type": "invalid", "data": "too_many_letters"})
        self.assertEqual(
            self._guess("ZZZZ", mode="hard").json(),
            {"type": "invalid", "data": "not_in_corpus"},
        )

    def test_internal_error_is_structured(self):
        set_service(GeneGameService(FakeRegistry(fail=True)))
        resp = self._guess("MIB2")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("internal_error", resp.json()["data"])

    def test_malformed_body(self):
        resp = self.client.post(reverse('genedle-guess'), {"word": ["MI"], "session": 1}, format="json")
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post(reverse('genedle-guess'), {"word": ["M"], "session": 1, "mode": "x"}, format="json")
        self.assertEqual(resp.status_code, 400)

    def test_session_word_is_persisted(self):
        first = self.client.get(reverse('genedle-session-word'))
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json(), word_of_the_day())
        second = self.client.get(reverse('genedle-session-word'))
        self.assertEqual(second.json(), first.json())


class SpellingGeneApiTests(APISimpleTestCase):
    def setUp(self):
        self.service = GeneGameService(FakeRegistry(CORPUS))
        set_service(self.service)

    def tearDown(self):
        set_service(None)

    def test_letters_and_guess(self):
        kwargs = {"seed": 20277, "min_length": 4, "min_words": 10, "num_letters": 7}
        resp = self.client.get(reverse('spelling-gene-letters', kwargs=kwargs))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data["outer_letters"]), 6)
        self.assertEqual(len(data["center_letter"]), 1)

        word = sorted(self.service.spelling_puzzle(4, 10, 7, 20277).valid_symbols)[0]
        resp = self.client.get(reverse('spelling-gene-guess', kwargs=dict(kwargs, guess=word)))
        self.assertIs(resp.json(), True)
        resp = self.client.get(reverse('spelling-gene-guess', kwargs=dict(kwargs, guess="NOPE")))
        self.assertIs(resp.json(), False)
        resp = self.client.get(reverse('spelling-gene-guess', kwargs=dict(kwargs, guess=word.lower())))
        self.assertIs(resp.json(), False)

    def test_failed_generation_degrades(self):
        set_service(GeneGameService(FakeRegistry(["ABBA"]), max_iters=10))
        kwargs = {"seed": 1, "min_length": 4, "min_words": 1000, "num_letters": 7}
        resp = self.client.get(reverse('spelling-gene-letters', kwargs=kwargs))
        self.assertEqual(resp.json(), {"outer_letters": [], "center_letter": ""})
        resp = self.client.get(reverse('spelling-gene-guess', kwargs=dict(kwargs, guess="ABBA")))
        self.assertIs(resp.json(), False)


class DailyWordTests(SimpleTestCase):
    def test_first_visit_stores_day_number(self):
        session = {}
        self.assertEqual(init_word(session, today=date(2025, 1, 1)), date(2025, 1, 1).toordinal())
        self.assertEqual(session[WORD_KEY], date(2025, 1, 1).toordinal())

    def test_repeat_visit_keeps_stored_word(self):
        session = {WORD_KEY: 42}
        self.assertEqual(init_word(session, today=date(2025, 1, 1)), 42)

    def test_day_numbering_starts_at_one(self):
        self.assertEqual(word_of_the_day(date(1, 1, 1)), 1)
