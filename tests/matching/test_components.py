"""Tests for component-wise name matching."""

import pytest

from beneficiary_dedup.matching.components import component_similarity
from beneficiary_dedup.matching.schemas import NameRecord


class TestComponentSimilarity:
    """Tests for component_similarity function."""

    def test_exact_components(self):
        """Two exact components: 100 plus bonus, capped at 100."""
        record = NameRecord(first_name="JUAN", last_name="SANTOS")
        result = component_similarity(record, record)

        assert result.first_name == 100
        assert result.last_name == 100
        assert result.middle_name == 0
        assert result.overall == 100.0

    def test_missing_middle_name_does_not_penalize(self):
        """A component present on one side only carries no weight."""
        incoming = NameRecord(
            first_name="JUAN", middle_name="REYES", last_name="SANTOS"
        )
        candidate = NameRecord(first_name="JUAN", last_name="SANTOS")

        result = component_similarity(incoming, candidate)

        assert result.middle_name == 0
        assert result.overall == 100.0

    def test_no_shared_components_is_0(self):
        incoming = NameRecord(first_name="JUAN")
        candidate = NameRecord(last_name="SANTOS")

        result = component_similarity(incoming, candidate)

        assert result.overall == 0.0

    def test_single_strong_component_bonus(self):
        """First name exact, last name unrelated: (100 x 0.4) / 0.8 + 5."""
        incoming = NameRecord(first_name="JUAN", last_name="SANTOS")
        candidate = NameRecord(first_name="JUAN", last_name="CRUZ")

        result = component_similarity(incoming, candidate)

        assert result.first_name == 100
        assert result.last_name == 0
        assert result.overall == pytest.approx(55.0)

    def test_weights_and_multi_component_bonus(self):
        """(100 x 0.4 + 100 x 0.2 + 0 x 0.4) / 1.0 + 15."""
        incoming = NameRecord(
            first_name="JUAN", middle_name="REYES", last_name="SANTOS"
        )
        candidate = NameRecord(
            first_name="JUAN", middle_name="REYES", last_name="CRUZ"
        )

        result = component_similarity(incoming, candidate)

        assert result.overall == pytest.approx(75.0)

    def test_misspelled_first_name(self):
        """FLORIAD GUTIERREZ AQUINO vs FLORIDA GUTIERREZ AQUINO."""
        incoming = NameRecord(
            first_name="FLORIAD", middle_name="GUTIERREZ", last_name="AQUINO"
        )
        candidate = NameRecord(
            first_name="FLORIDA", middle_name="GUTIERREZ", last_name="AQUINO"
        )

        result = component_similarity(incoming, candidate)

        assert result.first_name >= 80
        assert result.middle_name == 100
        assert result.last_name == 100
        assert result.overall == 100.0

    def test_placeholder_values_count_as_missing(self):
        """'null' cells from the upload pipeline are not compared."""
        incoming = NameRecord(
            first_name="JUAN", middle_name="null", last_name="SANTOS"
        )
        candidate = NameRecord(
            first_name="JUAN", middle_name="CRUZ", last_name="SANTOS"
        )

        result = component_similarity(incoming, candidate)

        assert result.middle_name == 0
        assert result.overall == 100.0
