import random

from fastapi import APIRouter, HTTPException, status

from caesar_breaker.core.exceptions import CryptanalysisError
from caesar_breaker.dependencies import SettingsDep, check_length
from caesar_breaker.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from caesar_breaker.services.alphabet import canonical_offset
from caesar_breaker.services.engines.codec import cipher
from caesar_breaker.services.preprocessing.normalizer import TextNormalizer

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with a Caesar shift. Educational tool for generating test ciphertexts.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Normalize and encrypt plaintext.

    A random shift between 1 and 25 is used when none is given.
    """
    # Validate plaintext length
    check_length(request.plaintext, settings)

    offset = request.offset
    if offset is None:
        offset = random.randint(1, 25)

    try:
        normalized = TextNormalizer().normalize(request.plaintext)
        ciphertext = cipher(normalized, offset)
    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return EncryptResponse(
        plaintext=normalized,
        ciphertext=ciphertext,
        offset=canonical_offset(offset),
    )
