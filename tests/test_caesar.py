"""Tests for the Caesar cipher and its cryptanalysis."""

import pytest

from caesar_breaker.core.exceptions import DenormalizedInputError, InvalidAlphabetSizeError
from caesar_breaker.services.engines.caesar import CaesarCipher, RecoveryResult
from caesar_breaker.services.engines.codec import cipher, decipher
from caesar_breaker.services.preprocessing.normalizer import normalize
from caesar_breaker.services.tables import ENGLISH, GERMAN, ProbabilityTable


LONG_ENGLISH = (
    "cryptography is the study of secure communication in the presence of "
    "adversaries long before computers existed people invented ciphers to "
    "hide meaning from unauthorized readers"
)

GERMAN_SENTENCE = "hallo ich bin christian aus deutschland und meine arbeit ist wunderbar"


class TestShiftCodec:
    """Test suite for cipher/decipher."""

    def test_identity_shift(self):
        """Shift 0 leaves the message untouched."""
        assert cipher("hello world", 0) == "hello world"
        assert decipher("hello world", 0) == "hello world"

    def test_wraps_around_alphabet(self):
        assert cipher("abcxyz", 3) == "defabc"
        assert decipher("defabc", 3) == "abcxyz"

    def test_negative_and_large_offsets(self):
        assert cipher("abc", -1) == "zab"
        assert cipher("abc", 25) == "zab"
        assert cipher("abc", 25 + 26 * 4) == "zab"

    def test_encrypt_shift_7(self):
        """Test specific encryption with shift 7."""
        assert cipher("hello", 7) == "olssv"

    def test_roundtrip_all_offsets(self):
        """Test that cipher followed by decipher returns original."""
        message = "the quick brown fox jumps over the lazy dog"
        for offset in range(-30, 60):
            assert decipher(cipher(message, offset), offset) == message
            assert cipher(decipher(message, offset), offset) == message

    def test_offset_periodicity(self):
        message = "attack at dawn"
        for offset in range(26):
            expected = cipher(message, offset)
            assert cipher(message, offset + 26) == expected
            assert cipher(message, offset - 26) == expected

    def test_preserves_length_and_spaces(self):
        message = " two  spaces here "
        for offset in range(26):
            result = cipher(message, offset)
            assert len(result) == len(message)
            assert [i for i, c in enumerate(result) if c == " "] == [
                i for i, c in enumerate(message) if c == " "
            ]

    def test_empty_message(self):
        assert cipher("", 5) == ""
        assert decipher("", 5) == ""

    @pytest.mark.parametrize("message", ["Hello", "abc!", "tab\there", "über"])
    def test_rejects_denormalized_input(self, message):
        with pytest.raises(DenormalizedInputError):
            cipher(message, 3)


class TestCaesarCipher:
    """Test suite for the configured cipher."""

    @pytest.fixture
    def caesar(self):
        return CaesarCipher()

    @pytest.fixture
    def german(self):
        return CaesarCipher(table=GERMAN)

    def test_default_table_is_english(self, caesar):
        assert caesar.table is ENGLISH

    def test_recover_pangram(self, caesar):
        """The classic pangram is broken with the English table."""
        plaintext = normalize("the quick brown fox jumps over the lazy dog")
        offset, recovered = caesar.recover(cipher(plaintext, 7))

        assert offset == 7
        assert recovered == plaintext

    def test_recover_english_all_offsets(self, caesar):
        for shift in range(26):
            result = caesar.recover(cipher(LONG_ENGLISH, shift))
            assert result.offset == shift
            assert result.plaintext == LONG_ENGLISH

    def test_recover_german_all_offsets(self, german):
        plaintext = normalize(GERMAN_SENTENCE)
        for shift in range(26):
            assert tuple(german.recover(cipher(plaintext, shift))) == (shift, plaintext)

    def test_recover_normalizes_raw_input(self, caesar):
        raw = cipher(LONG_ENGLISH, 11).upper() + "!!\n"
        result = caesar.recover(raw)

        assert result.offset == 11
        assert result.plaintext == LONG_ENGLISH

    def test_recover_equals_offset_plaintext_pair(self, caesar):
        """The result compares equal to a plain (offset, plaintext) tuple."""
        plaintext = normalize("the quick brown fox jumps over the lazy dog")
        result = caesar.recover(cipher(plaintext, 7))

        assert isinstance(result, RecoveryResult)
        assert result == (7, plaintext)
        assert caesar.recover(cipher(LONG_ENGLISH, 4)) == (4, LONG_ENGLISH)

    def test_recover_picks_lowest_score(self, caesar):
        ciphertext = cipher(LONG_ENGLISH, 4)
        scores = caesar.score_all(ciphertext)

        assert len(scores) == 26
        assert caesar.recover(ciphertext).offset == scores.index(min(scores)) == 4

    def test_recover_without_letters(self, caesar):
        """No letters means every score is zero and shift 0 wins."""
        assert caesar.recover("12 3!") == (0, " ")
        assert caesar.score_all(" ") == [0.0] * 26

    def test_scoring_uses_configured_table(self):
        """A table that only expects 'z' makes all-'z' plaintext the best fit."""
        only_z = ProbabilityTable.from_mapping("zeds", "zz", {"z": 1.0})
        caesar = CaesarCipher(table=only_z)

        offset, plaintext = caesar.recover(cipher("zzzz zz", 9))

        assert offset == 9
        assert plaintext == "zzzz zz"

    def test_candidates_ranked(self, caesar):
        ciphertext = cipher(LONG_ENGLISH, 5)
        candidates = caesar.candidates(ciphertext)

        assert 0 < len(candidates) <= 5
        assert candidates[0].offset == 5
        assert candidates[0].plaintext == LONG_ENGLISH
        scores = [c.chi_squared for c in candidates]
        assert scores == sorted(scores)

    def test_rank_candidates_reuses_scores(self, caesar):
        """Candidates built from precomputed scores match a fresh ranking."""
        ciphertext = cipher(LONG_ENGLISH, 5)
        scores = caesar.score_all(ciphertext)
        ranked = caesar.rank_candidates(ciphertext, scores, limit=3)

        assert ranked == caesar.candidates(ciphertext, limit=3)
        assert [c.chi_squared for c in ranked] == [scores[c.offset] for c in ranked]

    def test_candidates_limit(self, caesar):
        assert len(caesar.candidates(LONG_ENGLISH, limit=26)) == 26
        assert caesar.candidates(LONG_ENGLISH, limit=0) == []

    def test_most_probable_offset_requires_26_scores(self, caesar):
        with pytest.raises(InvalidAlphabetSizeError):
            caesar.most_probable_offset([1.0, 2.0])

    def test_explain(self, caesar):
        """Test explanation generation."""
        explanation = caesar.explain(7, "olssv", "hello")

        assert "7" in explanation
        assert "shift" in explanation.lower()
        assert "english" in explanation
        assert "'o'" in explanation

    def test_explain_without_letters(self, caesar):
        assert "shift of 0" in caesar.explain(0, "", "")

    def test_equality_by_table(self):
        assert CaesarCipher(table=GERMAN) == CaesarCipher(table=GERMAN)
        assert CaesarCipher() != CaesarCipher(table=GERMAN)
