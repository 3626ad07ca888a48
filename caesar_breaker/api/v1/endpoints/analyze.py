from fastapi import APIRouter, HTTPException, status

from caesar_breaker.core.exceptions import CryptanalysisError
from caesar_breaker.dependencies import RegistryDep, SettingsDep, check_length, resolve_cipher
from caesar_breaker.models.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    FrequencyData,
    ShiftCandidateSchema,
)
from caesar_breaker.services.alphabet import ALPHABET
from caesar_breaker.services.analysis.statistics import most_probable_offset

router = APIRouter()


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Language table not found"},
    },
    summary="Analyze ciphertext",
    description=(
        "Count letters, score every Caesar shift with chi-squared against a "
        "language table and return the ranked candidates."
    ),
)
async def analyze_ciphertext(
    request: AnalyzeRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> AnalyzeResponse:
    """
    Analyze ciphertext and break it.

    The analysis pipeline:
    1. Normalize the ciphertext
    2. Count letter frequencies
    3. Score all 26 shifts against the language table
    4. Pick the lowest score and decipher
    """
    # Validate ciphertext length
    check_length(request.ciphertext, settings)

    caesar = resolve_cipher(request.language, settings, registry)
    limit = request.limit or settings.candidate_limit

    try:
        # 1. Normalize text
        normalized = caesar.normalize(request.ciphertext)

        # 2. Letter counts
        counts = caesar.histogram(normalized)
        total = sum(counts)
        frequencies = [
            FrequencyData(
                character=letter,
                count=count,
                frequency=count / total if total > 0 else 0.0,
            )
            for letter, count in zip(ALPHABET, counts)
        ]

        # 3. Score every shift
        scores = caesar.score_all(normalized)

        # 4. Best shift and ranking
        best = most_probable_offset(scores)
        plaintext = caesar.decipher(normalized, best)
        candidates = caesar.rank_candidates(normalized, scores, limit=limit)

    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return AnalyzeResponse(
        normalized=normalized,
        language=caesar.table.name,
        letter_count=total,
        frequencies=frequencies,
        chi_squares=scores,
        best_offset=best,
        plaintext=plaintext,
        candidates=[ShiftCandidateSchema.model_validate(c) for c in candidates],
        explanation=caesar.explain(best, normalized, plaintext),
    )
