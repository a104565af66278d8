from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status, permissions
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .daily import init_word
from .serializers import (
    GuessRequestSerializer,
    GuessResponseSerializer,
    SpellingLettersResponseSerializer,
)
from .services import get_service

_INT_SCHEMA = openapi.Schema(type=openapi.TYPE_INTEGER)
_BOOL_SCHEMA = openapi.Schema(type=openapi.TYPE_BOOLEAN)


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="genedle_session_word",
    operation_summary="Get the player's Genedle puzzle id",
    operation_description="""
Returns the puzzle seed stored in the player's session. On the first visit the
seed of the current UTC day is stored, so repeat visits keep the same puzzle.
""",
    responses={200: openapi.Response("OK", schema=_INT_SCHEMA)},
    tags=["genedle"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def genedle_session_word(request):
    """Return (and persist on first visit) the session's word-of-the-day seed."""
    return Response(init_word(request.session), status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="genedle_letters",
    operation_summary="Get the secret length for a puzzle",
    operation_description="Returns the number of letters of the secret symbol, or -1 if it cannot be resolved.",
    responses={200: openapi.Response("OK", schema=_INT_SCHEMA)},
    tags=["genedle"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def genedle_letters(request, key: int):
    """Number of letters in the secret symbol for ``key``."""
    return Response(get_service().num_letters(key), status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="genedle_guess",
    operation_summary="Submit a Genedle guess",
    operation_description="""
Validate a guess and score it against the puzzle's secret symbol.

Request body:
- word (list of single characters, required)
- session (int, required): puzzle seed
- mode (optional: normal | hard; default normal). Hard mode only accepts
  symbols known to genenames.org.

Response:
- {"type": "valid", "data": {"is_correct": bool, "result": [correct|present|absent, ...]}}
- {"type": "invalid", "data": not_enough_letters | too_many_letters | not_in_corpus}
- {"type": "invalid", "data": {"internal_error": message}}
""",
    request_body=GuessRequestSerializer,
    responses={200: GuessResponseSerializer},
    tags=["genedle"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def genedle_guess(request):
    """Evaluate a guess; answers with a structured outcome rather than an HTTP error."""
    serializer = GuessRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)

    outcome = get_service().guess(serializer.validated_data["guess"])
    return Response(GuessResponseSerializer(outcome.to_dict()).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="spelling_gene_letters",
    operation_summary="Get the letters of a Spelling Gene puzzle",
    operation_description="""
Generate (or fetch from cache) the puzzle for the parameter tuple.

Path parameters:
- seed, min_length, min_words, num_letters (ints)

Response:
- outer_letters (list), center_letter (string). Both are empty when no
  puzzle could be generated.
""",
    responses={200: SpellingLettersResponseSerializer},
    tags=["spelling-gene"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def spelling_gene_letters(request, seed: int, min_length: int, min_words: int, num_letters: int):
    """Letters of the puzzle for the given parameters."""
    letters = get_service().spelling_letters(min_length, min_words, num_letters, seed)
    return Response(SpellingLettersResponseSerializer(letters).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="spelling_gene_guess",
    operation_summary="Check a Spelling Gene guess",
    operation_description="Returns true if the symbol is one of the puzzle's valid symbols, false otherwise (including when the puzzle cannot be generated).",
    responses={200: openapi.Response("OK", schema=_BOOL_SCHEMA)},
    tags=["spelling-gene"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def spelling_gene_guess(request, seed: int, min_length: int, min_words: int, num_letters: int, guess: str):
    """Membership check of ``guess`` against the puzzle for the given parameters."""
    found = get_service().check_spelling_guess(min_length, min_words, num_letters, seed, guess)
    return Response(found, status=status.HTTP_200_OK)
