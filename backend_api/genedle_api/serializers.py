from __future__ import annotations

from typing import Any, Dict

from rest_framework import serializers

from .puzzles import Guess


# PUBLIC_INTERFACE
class GuessRequestSerializer(serializers.Serializer):
    """Request payload to submit a Genedle guess.

    Fields:
    - word: list of single guessed characters, e.g. ["M", "I", "B", "2"]
    - session: puzzle seed returned by /games/genedle
    - mode: "normal" (default) or "hard"
    """

    word = serializers.ListField(
        child=serializers.CharField(min_length=1, max_length=1),
        allow_empty=True,
    )
    session = serializers.IntegerField(min_value=0)
    mode = serializers.ChoiceField(
        required=False,
        choices=[("normal", "normal"), ("hard", "hard")],
        default="normal",
    )

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        letters = tuple(attrs["word"])
        attrs["guess"] = Guess(letters=letters, session=attrs["session"], mode=attrs.get("mode", "normal"))
        return attrs


# PUBLIC_INTERFACE
class GuessResponseSerializer(serializers.Serializer):
    """Tagged outcome: {"type": "valid"|"invalid", "data": ...}.

    ``data`` is {"is_correct", "result"} for valid guesses, the reason string
    for invalid ones, or {"internal_error": message}.
    """

    type = serializers.ChoiceField(choices=["valid", "invalid"])
    data = serializers.JSONField()


# PUBLIC_INTERFACE
class SpellingLettersResponseSerializer(serializers.Serializer):
    """Letters of a Spelling Gene puzzle; empty when generation failed."""

    outer_letters = serializers.ListField(child=serializers.CharField())
    center_letter = serializers.CharField(allow_blank=True)
