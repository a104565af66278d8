"""
Gene word games Django app.

Re-exports the puzzle service and its building blocks so callers can import
from genedle_api directly, e.g.:

    from genedle_api import GeneGameService, score_guess
"""

# PUBLIC_INTERFACE
from .puzzles import (
    GeneGameService,
    GeneNamesClient,
    MemoCache,
    generate_puzzle,
    score_guess,
    select_daily_word,
    validate_guess,
)

__all__ = [
    "GeneGameService",
    "GeneNamesClient",
    "MemoCache",
    "generate_puzzle",
    "score_guess",
    "select_daily_word",
    "validate_guess",
]
