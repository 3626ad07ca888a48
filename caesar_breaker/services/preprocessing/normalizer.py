import string
from dataclasses import dataclass

from caesar_breaker.services.alphabet import ALPHABET, SPACE


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int]


class TextNormalizer:
    """
    Normalizes text for Caesar cryptanalysis.

    Handles:
    - ASCII case folding (only A-Z are folded)
    - Removal of everything that is neither a lowercase letter nor a space

    Letters outside ASCII (e.g. 'ö', 'ß') are dropped rather than folded or
    transliterated, so callers wanting to keep them must pre-process.
    """

    ALLOWED = frozenset(ALPHABET + SPACE)
    _FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

    def normalize(self, text: str | bytes) -> str:
        """
        Normalize text for cryptanalysis.

        Args:
            text: Raw input; bytes are read one byte per character

        Returns:
            Normalized text string
        """
        return self.normalize_full(text).text

    def normalize_full(self, text: str | bytes) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Raw input; bytes are read one byte per character

        Returns:
            NormalizedText with counts of the characters that were dropped
        """
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("latin-1")

        original = text
        removed_chars: dict[str, int] = {}
        result = []

        for char in text.translate(self._FOLD):
            if char in self.ALLOWED:
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return NormalizedText(
            text="".join(result),
            original=original,
            removed_chars=removed_chars,
        )

    def is_normalized(self, text: str) -> bool:
        """Check whether text already satisfies the normalized form."""
        return all(char in self.ALLOWED for char in text)


_default_normalizer = TextNormalizer()


def normalize(text: str | bytes) -> str:
    """Normalize text with the default normalizer."""
    return _default_normalizer.normalize(text)
