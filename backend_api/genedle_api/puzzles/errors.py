"""Domain errors raised by the puzzle core.

Registry and transport problems are converted into these at the boundary of
each core operation so that ``requests`` exceptions never reach the views.
"""


class PuzzleError(Exception):
    """Base class for every failure raised by the puzzle core."""


class LookupFailure(PuzzleError):
    """The symbol registry could not be queried or answered with an error."""


class NoSymbolFound(PuzzleError):
    """The registry answered but no symbol could be selected."""


class GenerationFailed(PuzzleError):
    """No letter set satisfying the constraints was found within the retry cap."""
