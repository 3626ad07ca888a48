from fastapi import APIRouter, HTTPException, status

from caesar_breaker.core.exceptions import CryptanalysisError
from caesar_breaker.dependencies import RegistryDep, SettingsDep, check_length, resolve_cipher
from caesar_breaker.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from caesar_breaker.services.alphabet import canonical_offset

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Language table not found"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with a known shift, or recover the shift by chi-squared analysis.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext.

    If no shift is provided, every shift is scored against the language
    table and the best one is used.
    """
    # Validate ciphertext length
    check_length(request.ciphertext, settings)

    caesar = resolve_cipher(request.language, settings, registry)

    try:
        normalized = caesar.normalize(request.ciphertext)

        if request.offset is not None:
            offset = canonical_offset(request.offset)
            plaintext = caesar.decipher(normalized, offset)
        else:
            offset, plaintext = caesar.recover(normalized)

    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return DecryptResponse(
        plaintext=plaintext,
        offset=offset,
        language=caesar.table.name,
        recovered=request.offset is None,
        explanation=caesar.explain(offset, normalized, plaintext),
    )
