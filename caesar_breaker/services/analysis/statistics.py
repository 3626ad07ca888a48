"""
Letter statistics for Caesar cryptanalysis.

For every candidate shift the ciphertext is deciphered, its letters are
counted and the counts are compared against a reference distribution with
Pearson's chi-squared statistic. The shift with the smallest statistic is
the most probable key.
"""

import logging
from collections import Counter
from typing import Sequence

from caesar_breaker.core.exceptions import InvalidAlphabetSizeError
from caesar_breaker.services.alphabet import ALPHABET, ALPHABET_SIZE, ensure_normalized
from caesar_breaker.services.engines.codec import decipher, letter_count
from caesar_breaker.services.tables.probability import ProbabilityTable

logger = logging.getLogger(__name__)


def histogram(message: str) -> list[int]:
    """
    Count each letter of a normalized message.

    Returns:
        26 counts indexed by letter index; spaces are ignored
    """
    counter = Counter(ensure_normalized(message))
    return [counter.get(letter, 0) for letter in ALPHABET]


def count_letter(message: str, letter: str) -> int:
    """Count occurrences of one letter in a normalized message."""
    return ensure_normalized(message).count(letter)


def chi_squared(observed: Sequence[int], expected: Sequence[float]) -> float:
    """
    Pearson's chi-squared statistic of observed against expected counts.

    Letters with an expected count of zero are left out of the sum, even
    when they were observed.
    """
    if len(observed) != ALPHABET_SIZE:
        raise InvalidAlphabetSizeError(len(observed), ALPHABET_SIZE)
    if len(expected) != ALPHABET_SIZE:
        raise InvalidAlphabetSizeError(len(expected), ALPHABET_SIZE)

    statistic = 0.0
    for index, (obs, exp) in enumerate(zip(observed, expected)):
        if exp > 0:
            statistic += ((obs - exp) ** 2) / exp
        elif obs > 0:
            logger.debug(
                "Dropping letter %r from chi-squared: observed %d, expected 0",
                ALPHABET[index],
                obs,
            )
    return statistic


def score_all(ciphered: str, table: ProbabilityTable) -> list[float]:
    """
    Chi-squared statistic for each of the 26 candidate shifts.

    ``scores[k]`` compares the letter counts of ``decipher(ciphered, k)``
    with ``table`` scaled to the number of letters. The expected counts are
    shared by every shift because deciphering only permutes the counts.

    Args:
        ciphered: Normalized ciphertext
        table: Reference distribution

    Returns:
        26 non-negative scores indexed by shift (all 0.0 when the text has
        no letters)
    """
    ensure_normalized(ciphered)
    length = letter_count(ciphered)

    if length == 0:
        return [0.0] * ALPHABET_SIZE

    expected = table.expected_counts(length)
    scores = []
    for offset in range(ALPHABET_SIZE):
        observed = histogram(decipher(ciphered, offset))
        scores.append(chi_squared(observed, expected))

    logger.debug(
        "Scored %d letters against '%s': best %.2f, worst %.2f",
        length,
        table.name,
        min(scores),
        max(scores),
    )
    return scores


def most_probable_offset(scores: Sequence[float]) -> int:
    """
    Index of the smallest score.

    Ties go to the lowest offset.
    """
    if len(scores) != ALPHABET_SIZE:
        raise InvalidAlphabetSizeError(len(scores), ALPHABET_SIZE)

    probable = 0
    for offset, score in enumerate(scores):
        if score < scores[probable]:
            probable = offset
    return probable


def rank_offsets(scores: Sequence[float]) -> list[int]:
    """All offsets ordered from most to least probable, ties by offset."""
    if len(scores) != ALPHABET_SIZE:
        raise InvalidAlphabetSizeError(len(scores), ALPHABET_SIZE)
    return sorted(range(ALPHABET_SIZE), key=lambda offset: scores[offset])
