from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(CryptanalysisError):
    """Raised when a cipher or formatter is constructed with bad settings."""

    pass


class InvalidAlphabetSizeError(ConfigurationError):
    """Raised when a letter vector does not have one entry per letter."""

    def __init__(self, length: int, expected: int = 26):
        super().__init__(
            f"Expected {expected} entries, got {length}",
            {"length": length, "expected": expected},
        )


class InvalidProbabilityTableError(ConfigurationError):
    """Raised when a probability table holds negative probabilities."""

    pass


class InvalidBannerError(ConfigurationError):
    """Raised when banner glyphs or margins are malformed."""

    pass


class ValidationError(CryptanalysisError):
    """Raised when input validation fails."""

    pass


class DenormalizedInputError(ValidationError):
    """Raised when a message holds characters outside a-z and space."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Unexpected character {character!r} at position {position}; "
            "normalize the message first",
            {"character": character, "position": position},
        )


class CiphertextTooLongError(ValidationError):
    """Raised when ciphertext exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Ciphertext length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class TableNotFoundError(CryptanalysisError):
    """Raised when requested probability table is not registered."""

    def __init__(self, table_name: str):
        super().__init__(
            f"Probability table '{table_name}' not found",
            {"table_name": table_name},
        )
