from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

LetterFeedback = Literal["correct", "present", "absent"]
GameMode = Literal["normal", "hard"]

NOT_ENOUGH_LETTERS = "not_enough_letters"
TOO_MANY_LETTERS = "too_many_letters"
NOT_IN_CORPUS = "not_in_corpus"
INTERNAL_ERROR = "internal_error"


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Guess:
    """A Genedle guess.

    Fields:
    - letters: guessed characters, one per position
    - session: seed of the puzzle the guess is played against
    - mode: "normal" or "hard" (hard requires a real registry symbol)
    """
    letters: Tuple[str, ...]
    session: int
    mode: GameMode = "normal"

    @property
    def word(self) -> str:
        return "".join(self.letters)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class ValidGuess:
    """Scored guess: per-position feedback and whether it solved the puzzle."""
    is_correct: bool
    feedback: Tuple[LetterFeedback, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "valid",
            "data": {"is_correct": self.is_correct, "result": list(self.feedback)},
        }


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class InvalidGuess:
    """Rejected guess. ``message`` is only set for internal errors."""
    reason: str
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.reason == INTERNAL_ERROR:
            return {"type": "invalid", "data": {INTERNAL_ERROR: self.message or ""}}
        return {"type": "invalid", "data": self.reason}


def _compute_letter_feedback(secret: str, guess: Sequence[str]) -> List[LetterFeedback]:
    """Compute per-letter feedback with Wordle rules.

    - correct: correct letter in correct position
    - present: letter exists in secret at another position (respect counts)
    - absent: letter not in secret or all its occurrences already used
    """
    n = len(secret)
    result: List[LetterFeedback] = ["absent"] * n

    available: Dict[str, int] = {}
    for ch in secret:
        available[ch] = available.get(ch, 0) + 1

    for i in range(n):
        if guess[i] == secret[i]:
            result[i] = "correct"
            available[guess[i]] -= 1

    for i in range(n):
        if result[i] == "correct":
            continue
        ch = guess[i]
        if available.get(ch, 0) > 0:
            result[i] = "present"
            available[ch] -= 1

    return result


# PUBLIC_INTERFACE
def score_guess(guess: Sequence[str], secret: str) -> ValidGuess:
    """Score ``guess`` against ``secret`` of the same length.

    Example:
        score_guess("2IBM", "MIB2").feedback
        -> ("present", "correct", "correct", "present")

    Raises:
        ValueError: if the lengths differ; callers validate length first.
    """
    if len(guess) != len(secret):
        raise ValueError("Secret and guess length must match.")
    feedback = _compute_letter_feedback(secret, guess)
    is_correct = all(f == "correct" for f in feedback)
    return ValidGuess(is_correct=is_correct, feedback=tuple(feedback))
