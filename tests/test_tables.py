"""Tests for probability tables and the table registry."""

import pytest

from caesar_breaker.core.exceptions import (
    ConfigurationError,
    DenormalizedInputError,
    InvalidAlphabetSizeError,
    InvalidProbabilityTableError,
    TableNotFoundError,
)
from caesar_breaker.services.tables import ENGLISH, GERMAN, ProbabilityTable, TableRegistry


class TestProbabilityTable:
    """Test suite for ProbabilityTable."""

    def test_bundled_tables(self):
        assert len(ENGLISH) == 26
        assert len(GERMAN) == 26
        assert ENGLISH.probability_of("e") == pytest.approx(0.130)
        assert ENGLISH.probability_of("Z") == pytest.approx(0.001)
        assert GERMAN.probability_of("e") == pytest.approx(0.1693)
        assert GERMAN[16] == pytest.approx(0.0002)

    def test_bundled_tables_sum_to_one(self):
        assert ENGLISH.is_normalized()
        # umlauts and eszett are not part of the German table
        assert not GERMAN.is_normalized()
        assert GERMAN.is_normalized(tolerance=0.02)

    def test_wrong_size_is_configuration_error(self):
        with pytest.raises(InvalidAlphabetSizeError) as excinfo:
            ProbabilityTable(name="short", code="xx", probabilities=(0.5, 0.5))

        assert isinstance(excinfo.value, ConfigurationError)
        assert excinfo.value.details == {"length": 2, "expected": 26}

    def test_negative_probability(self):
        probabilities = [1 / 26] * 26
        probabilities[3] = -0.1
        with pytest.raises(InvalidProbabilityTableError):
            ProbabilityTable(name="bad", code="xx", probabilities=tuple(probabilities))

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_probability(self, value):
        """Infinite or NaN entries would turn every chi-squared score into NaN."""
        probabilities = (value,) + (0.0,) * 25
        with pytest.raises(InvalidProbabilityTableError) as excinfo:
            ProbabilityTable(name="broken", code="xx", probabilities=probabilities)

        assert "a" in excinfo.value.details["letters"]

    def test_accepts_list_and_stores_tuple(self):
        table = ProbabilityTable(name="uniform", code="un", probabilities=[1 / 26] * 26)

        assert isinstance(table.probabilities, tuple)
        assert table.is_normalized()

    def test_immutable(self):
        with pytest.raises(AttributeError):
            ENGLISH.name = "other"

    def test_from_mapping(self):
        table = ProbabilityTable.from_mapping("ab", "ab", {"A": 0.25, "b": 0.75})

        assert table[0] == 0.25
        assert table[1] == 0.75
        assert sum(table.probabilities) == 1.0
        assert table.as_dict()["c"] == 0.0

    def test_from_mapping_rejects_unknown_letters(self):
        with pytest.raises(InvalidProbabilityTableError):
            ProbabilityTable.from_mapping("de", "de", {"ä": 0.1})

    def test_probability_of_rejects_non_letters(self):
        with pytest.raises(DenormalizedInputError):
            ENGLISH.probability_of("!")
        with pytest.raises(DenormalizedInputError):
            GERMAN.probability_of(" ")

    def test_expected_counts(self):
        counts = ENGLISH.expected_counts(1000)

        assert len(counts) == 26
        assert counts[4] == pytest.approx(130.0)


class TestTableRegistry:
    """Test suite for TableRegistry."""

    @pytest.fixture
    def registry(self):
        return TableRegistry()

    def test_bundled_tables_registered(self, registry):
        assert registry.list_registered() == ["english", "german"]
        assert registry.get("english") is ENGLISH
        assert registry.get("german") is GERMAN

    def test_lookup_by_code_and_case(self, registry):
        assert registry.get("EN") is ENGLISH
        assert registry.get("German") is GERMAN
        assert registry.is_registered("de")

    def test_unknown_table(self, registry):
        assert not registry.is_registered("klingon")
        with pytest.raises(TableNotFoundError) as excinfo:
            registry.get("klingon")

        assert excinfo.value.details == {"table_name": "klingon"}

    def test_extra_tables_at_construction(self):
        uniform = ProbabilityTable(name="uniform", code="un", probabilities=(1 / 26,) * 26)
        registry = TableRegistry(extra_tables=[uniform])

        assert registry.get("uniform") is uniform
        assert len(registry.get_all_tables()) == 3

    def test_register_does_not_leak_between_registries(self, registry):
        uniform = ProbabilityTable(name="uniform", code="un", probabilities=(1 / 26,) * 26)
        registry.register(uniform)

        assert registry.is_registered("uniform")
        assert not TableRegistry().is_registered("uniform")
