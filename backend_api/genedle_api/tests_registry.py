from unittest import mock

import requests
from django.test import SimpleTestCase

from genedle_api.puzzles import GeneNamesClient, LookupFailure
from genedle_api.puzzles.registry import parse_response


def _payload(symbols, status=0, num_found=None):
    return {
        "responseHeader": {"status": status, "QTime": 1},
        "response": {
            "numFound": len(symbols) if num_found is None else num_found,
            "start": 0,
            "docs": [{"symbol": s, "hgnc_id": f"HGNC:{i}", "score": 1.0} for i, s in enumerate(symbols)],
        },
    }


class GeneNamesClientTests(SimpleTestCase):
    def setUp(self):
        self.session = mock.Mock(spec=requests.Session)
        self.client = GeneNamesClient(
            base_url="https://rest.example.org/search/symbol", timeout=2.5, session=self.session
        )

    def _respond(self, payload=None, exc=None):
        response = mock.Mock()
        response.raise_for_status.side_effect = exc
        response.json.return_value = payload
        self.session.get.return_value = response
        return response

    def test_query_forms(self):
        self._respond(_payload(["MIB1", "MIB2"]))
        result = self.client.prefix("MIB")
        self.assertEqual(result.symbols, ["MIB1", "MIB2"])
        self.assertEqual(result.num_found, 2)
        self.assertTrue(result.ok)
        self.session.get.assert_called_with(
            "https://rest.example.org/search/symbol/MIB*",
            headers={"Accept": "application/json"},
            timeout=2.5,
        )

        self.client.suffix("A")
        self.assertEqual(self.session.get.call_args[0][0], "https://rest.example.org/search/symbol/*A")
        self.client.exact("TLX3")
        self.assertEqual(self.session.get.call_args[0][0], "https://rest.example.org/search/symbol/TLX3")

    def test_non_zero_status_is_returned(self):
        self._respond(_payload([], status=1))
        result = self.client.exact("MIB2")
        self.assertFalse(result.ok)
        self.assertEqual(result.status, 1)

    def test_timeout_is_lookup_failure(self):
        self.session.get.side_effect = requests.Timeout("timed out")
        with self.assertRaises(LookupFailure):
            self.client.prefix("A")

    def test_http_error_is_lookup_failure(self):
        self._respond(_payload([]), exc=requests.HTTPError("503"))
        with self.assertRaises(LookupFailure):
            self.client.prefix("A")

    def test_invalid_json_is_lookup_failure(self):
        response = self._respond()
        response.json.side_effect = ValueError("not json")
        with self.assertRaises(LookupFailure):
            self.client.prefix("A")

    def test_malformed_payload_is_lookup_failure(self):
        self._respond({"response": {"docs": []}})
        with self.assertRaises(LookupFailure):
            self.client.prefix("A")


class ParseResponseTests(SimpleTestCase):
    def test_keeps_response_order(self):
        parsed = parse_response(_payload(["TLX3", "TLX1", "TLX2"], num_found=10))
        self.assertEqual(parsed.symbols, ["TLX3", "TLX1", "TLX2"])
        self.assertEqual(parsed.num_found, 10)

    def test_missing_symbol(self):
        with self.assertRaises(LookupFailure):
            parse_response({"responseHeader": {"status": 0}, "response": {"numFound": 1, "docs": [{}]}})
