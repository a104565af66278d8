from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from .cache import MemoCache
from .engines import INTERNAL_ERROR, Guess, InvalidGuess, ValidGuess, score_guess
from .errors import PuzzleError
from .registry import SymbolRegistry
from .selector import select_daily_word
from .spelling import MAX_ITERS, SpellingPuzzle, generate_puzzle
from .validation import validate_guess

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class GeneGameService:
    """Entry point for both games, owning the registry and the shared cache.

    Every registry-backed computation goes through ``cache`` keyed by its
    inputs, so all players of one seed see the same puzzle and the registry is
    asked once per key. Domain failures are turned into the degraded results
    the HTTP layer returns; ``requests`` errors never reach callers.
    """

    def __init__(
        self,
        registry: SymbolRegistry,
        cache: Optional[MemoCache] = None,
        max_iters: int = MAX_ITERS,
    ) -> None:
        self.registry = registry
        self.cache = cache if cache is not None else MemoCache()
        self.max_iters = max_iters

    # Genedle

    # PUBLIC_INTERFACE
    def daily_word(self, seed: int) -> str:
        """Secret symbol for ``seed``; raises LookupFailure or NoSymbolFound."""
        return self.cache.get_or_compute(
            ("word", seed), lambda: select_daily_word(self.registry, seed)
        )

    # PUBLIC_INTERFACE
    def num_letters(self, seed: int) -> int:
        """Length of the secret symbol for ``seed``, or -1 if it cannot be resolved."""
        try:
            return len(self.daily_word(seed))
        except PuzzleError as e:
            logger.warning("Unable to resolve word for seed %s: %s", seed, e)
            return -1

    def _validate(self, guess: Guess) -> Optional[InvalidGuess]:
        secret_length = len(self.daily_word(guess.session))
        return validate_guess(self.registry, guess, secret_length)

    # PUBLIC_INTERFACE
    def validate(self, guess: Guess) -> Optional[InvalidGuess]:
        """Validate a guess; None means it may be scored."""
        try:
            return self.cache.get_or_compute(
                ("valid", guess.letters, guess.session, guess.mode),
                lambda: self._validate(guess),
            )
        except PuzzleError as e:
            return InvalidGuess(INTERNAL_ERROR, str(e))

    # PUBLIC_INTERFACE
    def guess(self, guess: Guess) -> Union[ValidGuess, InvalidGuess]:
        """Validate then score a guess. Never raises for registry problems."""
        invalid = self.validate(guess)
        if invalid is not None:
            return invalid
        try:
            secret = self.daily_word(guess.session)
        except PuzzleError as e:
            return InvalidGuess(INTERNAL_ERROR, str(e))
        return score_guess(guess.letters, secret)

    # Spelling Gene

    # PUBLIC_INTERFACE
    def spelling_puzzle(self, min_length: int, min_words: int, num_letters: int, seed: int) -> SpellingPuzzle:
        """Generated puzzle for the parameter tuple; raises PuzzleError on failure."""
        return self.cache.get_or_compute(
            ("spelling", min_length, min_words, num_letters, seed),
            lambda: generate_puzzle(
                self.registry, min_length, min_words, num_letters, seed, max_iters=self.max_iters
            ),
        )

    # PUBLIC_INTERFACE
    def spelling_letters(self, min_length: int, min_words: int, num_letters: int, seed: int) -> Dict[str, object]:
        """Letters of the puzzle, or an empty puzzle if none could be generated."""
        try:
            puzzle = self.spelling_puzzle(min_length, min_words, num_letters, seed)
        except PuzzleError as e:
            logger.warning("Spelling puzzle unavailable for seed %s: %s", seed, e)
            return {"outer_letters": [], "center_letter": ""}
        return puzzle.metadata()

    # PUBLIC_INTERFACE
    def check_spelling_guess(self, min_length: int, min_words: int, num_letters: int, seed: int, word: str) -> bool:
        """Whether ``word`` is a valid symbol of the puzzle; False if generation fails."""
        try:
            puzzle = self.spelling_puzzle(min_length, min_words, num_letters, seed)
        except PuzzleError:
            return False
        return puzzle.contains(word)
