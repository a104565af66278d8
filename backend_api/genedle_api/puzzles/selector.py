"""Deterministic daily symbol selection.

The seed drives a ChaChaRng. The same generator stream first picks a letter,
then an index into the registry's answer for that letter, so a seed maps to one
symbol for as long as the registry answer does not change.
"""
from __future__ import annotations

import logging

from .errors import LookupFailure, NoSymbolFound
from .registry import SymbolRegistry
from .rng import ChaChaRng

logger = logging.getLogger(__name__)


def draw_first_letter(rng: ChaChaRng) -> str:
    """Uniform letter A-Z; the first draw of a daily selection."""
    return chr(rng.randint(ord("A"), ord("Z")))


# PUBLIC_INTERFACE
def select_daily_word(registry: SymbolRegistry, seed: int) -> str:
    """Pick the secret symbol for ``seed``.

    Raises:
        LookupFailure: registry unreachable or non-success status.
        NoSymbolFound: no symbol starts with the drawn letter.
    """
    rng = ChaChaRng.from_seed(seed)
    first_letter = draw_first_letter(rng)

    response = registry.prefix(first_letter)
    if not response.ok:
        raise LookupFailure(f"Registry status {response.status} for {first_letter}*")
    if response.num_found < 1:
        raise NoSymbolFound(f"No gene symbol found for {first_letter}*")

    index = rng.randint(1, response.num_found) - 1
    if index >= len(response.symbols):
        # The registry reported more matches than it returned.
        raise NoSymbolFound(f"No gene symbol at index {index} for {first_letter}*")

    symbol = response.symbols[index]
    logger.info("Selected symbol for seed %s (letter %s, index %s)", seed, first_letter, index)
    return symbol
