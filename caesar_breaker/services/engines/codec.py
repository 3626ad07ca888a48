from caesar_breaker.services.alphabet import (
    ALPHABET,
    SPACE,
    canonical_offset,
    ensure_normalized,
    inverse_offset,
)


def cipher(message: str, offset: int) -> str:
    """
    Shift every letter of a normalized message forward by ``offset``.

    Spaces pass through unchanged. The offset may be any integer; it is
    reduced modulo 26 first.

    Raises:
        DenormalizedInputError: If the message holds characters other than
            lowercase letters and spaces
    """
    ensure_normalized(message)
    shift = canonical_offset(offset)
    if shift == 0:
        return message

    table = str.maketrans(ALPHABET, ALPHABET[shift:] + ALPHABET[:shift])
    return message.translate(table)


def decipher(message: str, offset: int) -> str:
    """Undo :func:`cipher` for the same offset."""
    return cipher(message, inverse_offset(offset))


def letter_count(message: str) -> int:
    """Number of non-space characters in a normalized message."""
    return len(message) - message.count(SPACE)

