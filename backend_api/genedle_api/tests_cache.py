import threading
import time

from django.test import SimpleTestCase

from genedle_api.puzzles import MemoCache


class MemoCacheTests(SimpleTestCase):
    def test_returns_stored_value_without_recomputing(self):
        cache = MemoCache()
        calls = []

        def compute():
            calls.append(1)
            return "MIB2"

        self.assertEqual(cache.get_or_compute(("word", 1), compute), "MIB2")
        self.assertEqual(cache.get_or_compute(("word", 1), compute), "MIB2")
        self.assertEqual(len(calls), 1)
        self.assertIn(("word", 1), cache)
        self.assertEqual(len(cache), 1)

    def test_distinct_keys_compute_separately(self):
        cache = MemoCache()
        self.assertEqual(cache.get_or_compute("a", lambda: 1), 1)
        self.assertEqual(cache.get_or_compute("b", lambda: 2), 2)
        self.assertEqual(len(cache), 2)

    def test_concurrent_callers_share_one_computation(self):
        cache = MemoCache()
        started = threading.Event()
        release = threading.Event()
        calls = []
        results = []

        def compute():
            calls.append(1)
            started.set()
            release.wait(5)
            return "TLX3"

        def worker():
            results.append(cache.get_or_compute("key", compute))

        owner = threading.Thread(target=worker)
        owner.start()
        self.assertTrue(started.wait(5))
        waiters = [threading.Thread(target=worker) for _ in range(4)]
        for t in waiters:
            t.start()
        time.sleep(0.05)
        release.set()
        for t in [owner] + waiters:
            t.join(5)

        self.assertEqual(len(calls), 1)
        self.assertEqual(results, ["TLX3"] * 5)

    def test_failures_are_retried_by_default(self):
        cache = MemoCache()
        calls = []

        def compute():
            calls.append(1)
            raise ValueError("registry down")

        with self.assertRaises(ValueError):
            cache.get_or_compute("key", compute)
        with self.assertRaises(ValueError):
            cache.get_or_compute("key", compute)
        self.assertEqual(len(calls), 2)
        self.assertNotIn("key", cache)
        self.assertEqual(cache.get_or_compute("key", lambda: "ok"), "ok")

    def test_failures_can_be_cached(self):
        cache = MemoCache(cache_failures=True)
        calls = []

        def compute():
            calls.append(1)
            raise ValueError("registry down")

        with self.assertRaises(ValueError):
            cache.get_or_compute("key", compute)
        with self.assertRaises(ValueError):
            cache.get_or_compute("key", lambda: "never")
        self.assertEqual(len(calls), 1)

        cache.invalidate("key")
        self.assertEqual(cache.get_or_compute("key", lambda: "ok"), "ok")

    def test_interrupted_computation_releases_key(self):
        class Abort(BaseException):
            pass

        cache = MemoCache(cache_failures=True)

        def compute():
            raise Abort()

        with self.assertRaises(Abort):
            cache.get_or_compute("key", compute)
        self.assertNotIn("key", cache)

        results = []
        t = threading.Thread(target=lambda: results.append(cache.get_or_compute("key", lambda: "ok")))
        t.start()
        t.join(5)
        self.assertFalse(t.is_alive())
        self.assertEqual(results, ["ok"])

    def test_waiters_see_interrupted_computation(self):
        class Abort(BaseException):
            pass

        cache = MemoCache()
        started = threading.Event()
        release = threading.Event()
        outcomes = []

        def compute():
            started.set()
            release.wait(5)
            raise Abort()

        def owner():
            try:
                cache.get_or_compute("key", compute)
            except Abort:
                outcomes.append("owner aborted")

        def waiter():
            try:
                cache.get_or_compute("key", lambda: "never")
            except Abort:
                outcomes.append("waiter aborted")

        first = threading.Thread(target=owner)
        first.start()
        started.wait(5)
        second = threading.Thread(target=waiter)
        second.start()
        time.sleep(0.05)
        release.set()
        first.join(5)
        second.join(5)

        self.assertFalse(first.is_alive())
        self.assertFalse(second.is_alive())
        self.assertIn("owner aborted", outcomes)
        self.assertEqual(len(outcomes), 2)
        self.assertEqual(cache.get_or_compute("key", lambda: "ok"), "ok")

    def test_clear_drops_everything(self):
        cache = MemoCache()
        cache.get_or_compute("a", lambda: 1)
        cache.clear()
        self.assertEqual(len(cache), 0)
        self.assertEqual(cache.get_or_compute("a", lambda: 2), 2)
