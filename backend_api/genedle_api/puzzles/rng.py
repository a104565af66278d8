"""Seeded pseudo-random draws shared by both games.

Puzzles are keyed by integer seeds, and a seed must select the same symbol and
letters everywhere, so every draw goes through one fixed generator:

- the seed is expanded to a 32-byte key with the PCG32 output function
  (state advanced by ``state * 6364136223846793005 + 11634580027462260723``
  before each 4-byte word)
- the key drives a ChaCha stream cipher with 12 rounds, a 64-bit block
  counter starting at 0 and a zero stream id; 32-bit outputs are the block
  words in order, 64-bit outputs are two consecutive words, low word first
- integer ranges are sampled with Canon's widening-multiply method (one extra
  draw when the low half of the product falls in the biased zone)
- shuffles are Fisher-Yates from the front, with the per-step indices
  batched into a single draw while their product fits in 32 bits

This is the StdRng stream of Rust's ``rand`` 0.9 (``seed_from_u64``,
``random_range``, ``shuffle``), so the same seed yields the same puzzle as
the service's earlier implementation.
"""
from __future__ import annotations

from typing import List, MutableSequence, Tuple

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

_PCG_MUL = 6364136223846793005
_PCG_INC = 11634580027462260723
_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)


def _rotl32(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK32


def _rotr32(x: int, n: int) -> int:
    n &= 31
    return ((x >> n) | (x << (32 - n))) & MASK32 if n else x


def _quarter_round(s: List[int], a: int, b: int, c: int, d: int) -> None:
    s[a] = (s[a] + s[b]) & MASK32
    s[d] = _rotl32(s[d] ^ s[a], 16)
    s[c] = (s[c] + s[d]) & MASK32
    s[b] = _rotl32(s[b] ^ s[c], 12)
    s[a] = (s[a] + s[b]) & MASK32
    s[d] = _rotl32(s[d] ^ s[a], 8)
    s[c] = (s[c] + s[d]) & MASK32
    s[b] = _rotl32(s[b] ^ s[c], 7)


def chacha_block(key: Tuple[int, ...], counter: int, stream: int = 0, rounds: int = 12) -> List[int]:
    """One 16-word ChaCha block for an 8-word key, 64-bit counter and stream id."""
    initial = list(_CONSTANTS) + list(key) + [
        counter & MASK32,
        (counter >> 32) & MASK32,
        stream & MASK32,
        (stream >> 32) & MASK32,
    ]
    s = initial[:]
    for _ in range(rounds // 2):
        _quarter_round(s, 0, 4, 8, 12)
        _quarter_round(s, 1, 5, 9, 13)
        _quarter_round(s, 2, 6, 10, 14)
        _quarter_round(s, 3, 7, 11, 15)
        _quarter_round(s, 0, 5, 10, 15)
        _quarter_round(s, 1, 6, 11, 12)
        _quarter_round(s, 2, 7, 8, 13)
        _quarter_round(s, 3, 4, 9, 14)
    return [(x + y) & MASK32 for x, y in zip(s, initial)]


def expand_seed(seed: int) -> Tuple[int, ...]:
    """Expand an integer seed into the 8 key words (PCG32 output per word)."""
    state = seed & MASK64
    words = []
    for _ in range(8):
        state = (state * _PCG_MUL + _PCG_INC) & MASK64
        xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
        words.append(_rotr32(xorshifted, state >> 59))
    return tuple(words)


def _bound_for(m: int) -> Tuple[int, int]:
    """Largest product m * (m + 1) * ... fitting in 32 bits, and its factor count."""
    product = m
    current = m + 1
    while product * current <= MASK32:
        product *= current
        current += 1
    return product, current - m


# PUBLIC_INTERFACE
class ChaChaRng:
    """Deterministic generator for puzzle draws.

    Example:
        rng = ChaChaRng.from_seed(1234567890)
        letter = chr(rng.randint(ord("A"), ord("Z")))
    """

    def __init__(self, key: Tuple[int, ...], rounds: int = 12) -> None:
        self._key = key
        self._rounds = rounds
        self._counter = 0
        self._buffer: List[int] = []
        self._index = 0

    @classmethod
    def from_seed(cls, seed: int) -> "ChaChaRng":
        return cls(expand_seed(seed))

    def next_u32(self) -> int:
        if self._index >= len(self._buffer):
            self._buffer = chacha_block(self._key, self._counter, rounds=self._rounds)
            self._counter = (self._counter + 1) & MASK64
            self._index = 0
        word = self._buffer[self._index]
        self._index += 1
        return word

    def next_u64(self) -> int:
        low = self.next_u32()
        return (self.next_u32() << 32) | low

    def _sample_below(self, span: int, bits: int) -> int:
        """Uniform integer in [0, span) using Canon's method on ``bits``-wide draws."""
        mask = (1 << bits) - 1
        draw = self.next_u32 if bits == 32 else self.next_u64
        if span > mask:
            return draw()
        product = draw() * span
        result, low = product >> bits, product & mask
        if low > (-span) & mask:
            extra = (draw() * span) >> bits
            if low + extra > mask:
                result += 1
        return result

    # PUBLIC_INTERFACE
    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both inclusive.

        Draws are 32 bits wide while ``high`` fits in 32 bits, 64 bits otherwise.
        """
        if low > high:
            raise ValueError("empty range for randint")
        bits = 32 if high <= MASK32 else 64
        return low + self._sample_below(high - low + 1, bits)

    # PUBLIC_INTERFACE
    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle ``items`` in place."""
        if len(items) <= 1:
            return
        n = 0
        chunk = 0
        remaining = 1
        for i in range(len(items)):
            next_n = n + 1
            if remaining == 0:
                bound, remaining = _bound_for(next_n)
                chunk = self._sample_below(bound, 32)
            remaining -= 1
            if remaining == 0:
                index = chunk
            else:
                index = chunk % next_n
                chunk //= next_n
            n = next_n
            items[i], items[index] = items[index], items[i]
