from django.test import SimpleTestCase

from genedle_api.puzzles.rng import ChaChaRng, chacha_block, expand_seed


class ChaChaBlockTests(SimpleTestCase):
    def test_zero_key_keystream(self):
        block = chacha_block((0,) * 8, 0, rounds=20)
        self.assertEqual(block[:4], [0xADE0B876, 0x903DF1A0, 0xE56A5D40, 0x28BD8653])

    def test_counter_changes_block(self):
        key = expand_seed(42)
        self.assertNotEqual(chacha_block(key, 0), chacha_block(key, 1))


class ChaChaRngTests(SimpleTestCase):
    def test_same_seed_same_stream(self):
        a = ChaChaRng.from_seed(1234567890)
        b = ChaChaRng.from_seed(1234567890)
        self.assertEqual([a.next_u32() for _ in range(40)], [b.next_u32() for _ in range(40)])
        self.assertNotEqual(
            [ChaChaRng.from_seed(1234567891).next_u32() for _ in range(4)],
            [ChaChaRng.from_seed(1234567890).next_u32() for _ in range(4)],
        )

    def test_stream_follows_blocks(self):
        rng = ChaChaRng.from_seed(7)
        key = expand_seed(7)
        words = [rng.next_u32() for _ in range(32)]
        self.assertEqual(words, chacha_block(key, 0) + chacha_block(key, 1))

    def test_u64_is_low_word_first(self):
        words = ChaChaRng.from_seed(7)
        wide = ChaChaRng.from_seed(7)
        low, high = words.next_u32(), words.next_u32()
        self.assertEqual(wide.next_u64(), (high << 32) | low)

    def test_randint_is_inclusive(self):
        rng = ChaChaRng.from_seed(99)
        draws = [rng.randint(ord("A"), ord("Z")) for _ in range(2000)]
        self.assertEqual(min(draws), ord("A"))
        self.assertEqual(max(draws), ord("Z"))
        self.assertEqual(ChaChaRng.from_seed(1).randint(5, 5), 5)

    def test_randint_empty_range(self):
        with self.assertRaises(ValueError):
            ChaChaRng.from_seed(1).randint(2, 1)

    def test_shuffle_is_seeded_permutation(self):
        letters = [chr(c) for c in range(ord("A"), ord("Z") + 1)] + ["-"]
        first, second = letters[:], letters[:]
        ChaChaRng.from_seed(20277).shuffle(first)
        ChaChaRng.from_seed(20277).shuffle(second)
        self.assertEqual(first, second)
        self.assertEqual(sorted(first), sorted(letters))
        self.assertNotEqual(first, letters)

    def test_shuffle_short_sequences(self):
        rng = ChaChaRng.from_seed(3)
        items = ["A"]
        rng.shuffle(items)
        self.assertEqual(items, ["A"])
        self.assertEqual(rng.next_u32(), ChaChaRng.from_seed(3).next_u32())
