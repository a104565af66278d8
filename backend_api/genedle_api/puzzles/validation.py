from __future__ import annotations

import logging
from typing import Optional

from .engines import (
    NOT_ENOUGH_LETTERS,
    NOT_IN_CORPUS,
    TOO_MANY_LETTERS,
    Guess,
    InvalidGuess,
)
from .registry import SymbolRegistry

logger = logging.getLogger(__name__)


def _in_corpus(registry: SymbolRegistry, word: str) -> bool:
    """True if the registry knows ``word`` as an exact symbol."""
    response = registry.exact(word)
    return response.ok and response.num_found >= 1 and word in response.symbols


# PUBLIC_INTERFACE
def validate_guess(registry: SymbolRegistry, guess: Guess, secret_length: int) -> Optional[InvalidGuess]:
    """Check a guess before it is scored.

    Checks short-circuit in order: length, then (hard mode only) an exact
    registry lookup. Normal mode never touches the registry.

    Returns:
        None if the guess may be scored, otherwise the InvalidGuess to report.

    Raises:
        LookupFailure: the hard-mode lookup could not be performed.
    """
    n = len(guess.letters)
    if n < secret_length:
        return InvalidGuess(NOT_ENOUGH_LETTERS)
    if n > secret_length:
        return InvalidGuess(TOO_MANY_LETTERS)

    if guess.mode != "hard":
        return None

    if not _in_corpus(registry, guess.word):
        logger.debug("Hard mode guess %r not in registry", guess.word)
        return InvalidGuess(NOT_IN_CORPUS)
    return None
