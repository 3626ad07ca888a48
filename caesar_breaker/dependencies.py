from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status

from caesar_breaker.core.config import Settings, get_settings
from caesar_breaker.core.exceptions import CiphertextTooLongError, TableNotFoundError
from caesar_breaker.services.engines.caesar import CaesarCipher
from caesar_breaker.services.tables.registry import TableRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache
def get_registry() -> TableRegistry:
    """Get cached table registry."""
    return TableRegistry()


RegistryDep = Annotated[TableRegistry, Depends(get_registry)]


def resolve_cipher(
    language: str | None,
    settings: Settings,
    registry: TableRegistry,
) -> CaesarCipher:
    """Build a cipher for the requested language, or the configured default."""
    try:
        table = registry.get(language or settings.default_language)
    except TableNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return CaesarCipher(table=table)


def check_length(text: str, settings: Settings) -> None:
    """Reject input longer than the configured maximum."""
    if len(text) > settings.max_ciphertext_length:
        error = CiphertextTooLongError(len(text), settings.max_ciphertext_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )
