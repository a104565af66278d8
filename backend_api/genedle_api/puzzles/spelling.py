"""Spelling Gene puzzle generation.

A puzzle is a set of distinct letters, one of them the center, from which at
least ``min_words`` gene symbols of length ``min_length`` or more can be
spelled. Every valid symbol contains the center letter and only chosen letters
(letters may repeat within a symbol).

Generation is corpus-first: a pool of symbols is fetched once from the
registry for a handful of seeded letters, then random letter sets are drawn and
checked against the pool in memory until one qualifies or the retry cap is hit.
"""
from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from .errors import GenerationFailed, LookupFailure
from .registry import RegistryResponse, SymbolRegistry
from .rng import ChaChaRng

logger = logging.getLogger(__name__)

VALID_LETTERS: List[str] = list(string.ascii_uppercase) + ["-"]
MAX_ITERS = 10_000
# Letters sampled for the pool beyond the puzzle size.
EXTRA_POOL_LETTERS = 5


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class SpellingPuzzle:
    """A generated Spelling Gene puzzle.

    Fields:
    - center_letter: letter every valid symbol must contain
    - outer_letters: the other letters, in draw order (num_letters - 1 of them)
    - valid_symbols: every pool symbol spelled from the letters
    """
    center_letter: str
    outer_letters: Tuple[str, ...]
    valid_symbols: FrozenSet[str]

    @property
    def letters(self) -> Set[str]:
        """All letters of the puzzle, center included."""
        return set(self.outer_letters) | {self.center_letter}

    # PUBLIC_INTERFACE
    def contains(self, word: str) -> bool:
        """Return True if ``word`` is one of the puzzle's valid symbols (exact match)."""
        return word in self.valid_symbols

    # PUBLIC_INTERFACE
    def metadata(self) -> Dict[str, object]:
        """Letters shown to the player, without the answers.

        Returns:
            {"outer_letters": List[str], "center_letter": str}
        """
        return {"outer_letters": list(self.outer_letters), "center_letter": self.center_letter}


def _symbols(response: RegistryResponse) -> List[str]:
    return response.symbols if response.ok else []


def build_pool(registry: SymbolRegistry, letters: Iterable[str], min_length: int) -> Set[str]:
    """Fetch symbols starting or ending with each letter, keeping the long enough ones.

    A letter whose lookups fail is skipped; the pool is built from the rest.
    """
    pool: Set[str] = set()
    for letter in letters:
        try:
            found = _symbols(registry.prefix(letter)) + _symbols(registry.suffix(letter))
        except LookupFailure as e:
            logger.warning("Skipping letter %r while building symbol pool: %s", letter, e)
            continue
        pool.update(s for s in found if len(s) >= min_length)
    return pool


def _group_by_letters(pool: Iterable[str], max_letters: int) -> Dict[FrozenSet[str], List[str]]:
    """Group symbols by their distinct letters, dropping ones that can never fit."""
    groups: Dict[FrozenSet[str], List[str]] = {}
    for symbol in pool:
        key = frozenset(symbol)
        if len(key) <= max_letters:
            groups.setdefault(key, []).append(symbol)
    return groups


# PUBLIC_INTERFACE
def generate_puzzle(
    registry: SymbolRegistry,
    min_length: int,
    min_words: int,
    num_letters: int,
    seed: int,
    max_iters: int = MAX_ITERS,
) -> SpellingPuzzle:
    """Search for a letter set with at least ``min_words`` spellable symbols.

    Parameters:
        registry: symbol source used to build the pool
        min_length: minimum length of a valid symbol
        min_words: minimum number of valid symbols for the puzzle to qualify
        num_letters: total number of letters, center included
        seed: drives both the pool letters and the letter draws
        max_iters: number of letter draws before giving up

    Raises:
        GenerationFailed: num_letters is out of range or no draw qualified.
    """
    if not 1 <= num_letters <= len(VALID_LETTERS):
        raise GenerationFailed(f"num_letters must be between 1 and {len(VALID_LETTERS)}")

    rng = ChaChaRng.from_seed(seed)

    pool_letters = VALID_LETTERS[:]
    rng.shuffle(pool_letters)
    pool = build_pool(registry, pool_letters[: num_letters + EXTRA_POOL_LETTERS], min_length)
    groups = _group_by_letters(pool, num_letters)
    logger.debug("Symbol pool for seed %s: %d symbols, %d letter groups", seed, len(pool), len(groups))

    for attempt in range(1, max_iters + 1):
        letters = VALID_LETTERS[:]
        rng.shuffle(letters)
        letters = letters[:num_letters]
        center = letters.pop()
        chosen = frozenset(letters) | {center}

        valid: Set[str] = set()
        for used, symbols in groups.items():
            if center in used and used <= chosen:
                valid.update(symbols)

        if len(valid) >= min_words:
            logger.info(
                "Generated spelling puzzle for seed %s after %d draws (%d symbols)",
                seed, attempt, len(valid),
            )
            return SpellingPuzzle(
                center_letter=center,
                outer_letters=tuple(letters),
                valid_symbols=frozenset(valid),
            )

    logger.warning(
        "No spelling puzzle for seed %s (min_length=%s, min_words=%s, num_letters=%s) after %d draws",
        seed, min_length, min_words, num_letters, max_iters,
    )
    raise GenerationFailed("Failed to generate a valid game")
