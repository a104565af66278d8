"""
Puzzle core for the gene word games.

Exports:
- MemoCache, the keyed result cache with per-key call coalescing
- SymbolRegistry protocol and the GeneNamesClient implementation
- select_daily_word, score_guess and validate_guess for Genedle
- generate_puzzle and SpellingPuzzle for Spelling Gene
- GeneGameService tying them together
- the PuzzleError hierarchy

These modules are framework-agnostic and can be reused by views or services
without importing request objects.
"""

from .cache import MemoCache
from .engines import Guess, InvalidGuess, ValidGuess, score_guess
from .errors import GenerationFailed, LookupFailure, NoSymbolFound, PuzzleError
from .registry import GeneNamesClient, RegistryResponse, SymbolRegistry
from .selector import select_daily_word
from .service import GeneGameService
from .spelling import SpellingPuzzle, generate_puzzle
from .validation import validate_guess

__all__ = [
    "MemoCache",
    "Guess",
    "InvalidGuess",
    "ValidGuess",
    "score_guess",
    "GenerationFailed",
    "LookupFailure",
    "NoSymbolFound",
    "PuzzleError",
    "GeneNamesClient",
    "RegistryResponse",
    "SymbolRegistry",
    "select_daily_word",
    "GeneGameService",
    "SpellingPuzzle",
    "generate_puzzle",
    "validate_guess",
]
