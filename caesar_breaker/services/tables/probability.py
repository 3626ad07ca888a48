import math
from dataclasses import dataclass
from typing import Mapping

from caesar_breaker.core.exceptions import (
    InvalidAlphabetSizeError,
    InvalidProbabilityTableError,
)
from caesar_breaker.services.alphabet import ALPHABET, ALPHABET_SIZE, letter_index


@dataclass(frozen=True)
class ProbabilityTable:
    """
    Reference letter distribution of a language.

    ``probabilities[i]`` is the expected share of letter ``ALPHABET[i]`` in
    plaintext. Entries are non-negative and sum to roughly 1.0; the sum is
    not enforced, see :meth:`is_normalized`.
    """

    name: str
    code: str
    probabilities: tuple[float, ...]

    def __post_init__(self) -> None:
        probabilities = tuple(float(p) for p in self.probabilities)
        if len(probabilities) != ALPHABET_SIZE:
            raise InvalidAlphabetSizeError(len(probabilities), ALPHABET_SIZE)

        invalid = {ALPHABET[i]: p for i, p in enumerate(probabilities) if not math.isfinite(p) or p < 0}
        if invalid:
            raise InvalidProbabilityTableError(
                f"Probability table '{self.name}' has invalid entries",
                {"table_name": self.name, "letters": invalid},
            )

        object.__setattr__(self, "probabilities", probabilities)

    @classmethod
    def from_mapping(cls, name: str, code: str, frequencies: Mapping[str, float]) -> "ProbabilityTable":
        """
        Build a table from a letter -> probability mapping.

        Keys are case-insensitive; letters missing from the mapping get 0.
        """
        by_letter = {letter.lower(): p for letter, p in frequencies.items()}
        unknown = set(by_letter) - set(ALPHABET)
        if unknown:
            raise InvalidProbabilityTableError(
                f"Probability table '{name}' has letters outside a-z",
                {"table_name": name, "letters": sorted(unknown)},
            )
        return cls(
            name=name,
            code=code,
            probabilities=tuple(by_letter.get(letter, 0.0) for letter in ALPHABET),
        )

    def __getitem__(self, index: int) -> float:
        return self.probabilities[index]

    def __len__(self) -> int:
        return len(self.probabilities)

    def probability_of(self, letter: str) -> float:
        """Reference probability of a single letter."""
        return self.probabilities[letter_index(letter.lower())]

    def expected_counts(self, length: int) -> list[float]:
        """Expected letter counts for a message with ``length`` letters."""
        return [p * length for p in self.probabilities]

    def is_normalized(self, tolerance: float = 1e-3) -> bool:
        """Check that the probabilities sum to 1 within ``tolerance``."""
        return abs(sum(self.probabilities) - 1.0) <= tolerance

    def as_dict(self) -> dict[str, float]:
        return dict(zip(ALPHABET, self.probabilities))


ENGLISH = ProbabilityTable(
    name="english",
    code="en",
    probabilities=(
        0.073, 0.009, 0.030,  # abc
        0.044, 0.130, 0.028,  # def
        0.016, 0.035, 0.074,  # ghi
        0.002, 0.003, 0.035,  # jkl
        0.025, 0.078, 0.074,  # mno
        0.027, 0.003, 0.077,  # pqr
        0.063, 0.093, 0.027,  # stu
        0.013, 0.016, 0.005,  # vwx
        0.019, 0.001,         # yz
    ),
)

GERMAN = ProbabilityTable(
    name="german",
    code="de",
    probabilities=(
        0.0558, 0.0196, 0.0316,
        0.0498, 0.1693, 0.0149,
        0.0302, 0.0498, 0.0802,
        0.0024, 0.0132, 0.0360,
        0.0255, 0.1053, 0.0224,
        0.0067, 0.0002, 0.0689,
        0.0642, 0.0579, 0.0383,
        0.0084, 0.0178, 0.0005,
        0.0005, 0.0121,
    ),
)
