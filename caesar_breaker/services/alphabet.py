"""Letter index arithmetic over the 26-letter lowercase Latin alphabet."""

import string

from caesar_breaker.core.exceptions import DenormalizedInputError

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)
SPACE = " "

_INDEX = {letter: index for index, letter in enumerate(ALPHABET)}


def letter_index(char: str) -> int:
    """Map 'a'..'z' to 0..25."""
    try:
        return _INDEX[char]
    except KeyError:
        raise DenormalizedInputError(char, 0) from None


def index_letter(index: int) -> str:
    """Map an index (reduced modulo 26) back to its letter."""
    return ALPHABET[index % ALPHABET_SIZE]


def canonical_offset(offset: int) -> int:
    """Reduce an offset to its representative in [0, 25]."""
    return offset % ALPHABET_SIZE


def inverse_offset(offset: int) -> int:
    """Return the offset that undoes ``offset``."""
    return (ALPHABET_SIZE - canonical_offset(offset)) % ALPHABET_SIZE


def shift_letter(char: str, offset: int) -> str:
    """Shift a single letter forward by ``offset`` positions."""
    return ALPHABET[(letter_index(char) + offset) % ALPHABET_SIZE]


def ensure_normalized(message: str) -> str:
    """
    Check that a message only holds lowercase letters and spaces.

    Raises:
        DenormalizedInputError: On the first character outside the alphabet
    """
    for position, char in enumerate(message):
        if char != SPACE and char not in _INDEX:
            raise DenormalizedInputError(char, position)
    return message
