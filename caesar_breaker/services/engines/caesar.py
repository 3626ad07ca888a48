import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from caesar_breaker.services.alphabet import canonical_offset
from caesar_breaker.services.analysis import statistics
from caesar_breaker.services.engines import codec
from caesar_breaker.services.preprocessing.normalizer import TextNormalizer
from caesar_breaker.services.tables.probability import ENGLISH, ProbabilityTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftCandidate:
    """A candidate shift with its deciphered text and score."""

    offset: int
    plaintext: str
    chi_squared: float


class RecoveryResult(NamedTuple):
    """Outcome of breaking a ciphertext; compares equal to ``(offset, plaintext)``."""

    offset: int
    plaintext: str


@dataclass(frozen=True)
class CaesarCipher:
    """
    Caesar cipher bound to a reference letter distribution.

    The cipher shifts every letter by a fixed amount. With only 26 possible
    keys it is broken by deciphering with every shift and keeping the one
    whose letter counts are closest (by chi-squared) to ``table``.

    Instances are immutable and can be shared between threads.
    """

    table: ProbabilityTable = ENGLISH
    normalizer: TextNormalizer = field(default_factory=TextNormalizer, repr=False, compare=False)

    def normalize(self, message: str | bytes) -> str:
        return self.normalizer.normalize(message)

    def cipher(self, message: str, offset: int) -> str:
        return codec.cipher(message, offset)

    def decipher(self, message: str, offset: int) -> str:
        return codec.decipher(message, offset)

    def histogram(self, message: str) -> list[int]:
        return statistics.histogram(message)

    def count_letter(self, message: str, letter: str) -> int:
        return statistics.count_letter(message, letter)

    def score_all(self, ciphered: str) -> list[float]:
        """Chi-squared score of each shift against this cipher's table."""
        return statistics.score_all(ciphered, self.table)

    chi_squares = score_all

    def most_probable_offset(self, scores: list[float]) -> int:
        return statistics.most_probable_offset(scores)

    def recover(self, ciphered: str | bytes) -> RecoveryResult:
        """
        Find the most probable shift and decipher with it.

        The input is normalized first, so raw text is accepted.

        Args:
            ciphered: The ciphertext

        Returns:
            RecoveryResult with the shift and plaintext
        """
        normalized = self.normalize(ciphered)
        scores = self.score_all(normalized)
        offset = self.most_probable_offset(scores)
        plaintext = self.decipher(normalized, offset)

        logger.debug(
            "Recovered shift %d (chi-squared %.2f) using '%s'",
            offset,
            scores[offset],
            self.table.name,
        )
        return RecoveryResult(offset=offset, plaintext=plaintext)

    def candidates(self, ciphered: str | bytes, limit: int = 5) -> list[ShiftCandidate]:
        """
        Rank shifts from most to least probable.

        Args:
            ciphered: The ciphertext (normalized first)
            limit: Maximum number of candidates to return

        Returns:
            Up to ``limit`` candidates, best first
        """
        normalized = self.normalize(ciphered)
        return self.rank_candidates(normalized, self.score_all(normalized), limit)

    def rank_candidates(
        self,
        normalized: str,
        scores: Sequence[float],
        limit: int = 5,
    ) -> list[ShiftCandidate]:
        """Build ranked candidates from scores already computed for ``normalized``."""
        return [
            ShiftCandidate(
                offset=offset,
                plaintext=self.decipher(normalized, offset),
                chi_squared=scores[offset],
            )
            for offset in statistics.rank_offsets(scores)[:max(limit, 0)]
        ]

    def explain(self, offset: int, ciphertext: str, plaintext: str) -> str:
        """Generate human-readable explanation."""
        shift = canonical_offset(offset)
        first_cipher = next((c for c in ciphertext if c != " "), None)
        first_plain = next((c for c in plaintext if c != " "), None)

        explanation = (
            f"Caesar cipher with shift of {shift}, scored against the "
            f"{self.table.name} letter distribution. "
            f"Each letter was shifted back {shift} positions in the alphabet."
        )
        if first_cipher and first_plain:
            explanation += (
                f" For example, the first ciphertext letter '{first_cipher}' "
                f"becomes '{first_plain}'."
            )
        return explanation
