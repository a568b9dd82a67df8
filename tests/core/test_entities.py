"""
Unit tests for ExtractedEntities.
"""

from mcq_toolkit.core.models.entities import ExtractedEntities


class TestBuild:
    """Tests for ExtractedEntities.build normalization."""

    def test_build_trims_and_dedupes_phrases(self):
        """Phrases are trimmed and duplicates dropped, first occurrence wins."""
        entities = ExtractedEntities.build(
            concepts=["gravity ", "inertia", " gravity", "inertia"],
        )

        assert entities.concepts == ("gravity", "inertia")

    def test_build_drops_blank_phrases(self):
        """Blank captures never reach the phrase collections."""
        entities = ExtractedEntities.build(processes=["", "   ", "digestion"])

        assert entities.processes == ("digestion",)

    def test_build_keeps_duplicate_relationships(self):
        """Relationships keep discovery order and duplicates."""
        pairs = [("a", "b"), ("c", "d"), ("a", "b")]

        entities = ExtractedEntities.build(relationships=pairs)

        assert entities.relationships == (("a", "b"), ("c", "d"), ("a", "b"))


class TestProperties:
    """Tests for derived properties."""

    def test_is_empty_for_default(self):
        """Default entities are empty."""
        assert ExtractedEntities().is_empty

    def test_is_empty_false_with_relationship_only(self):
        """A single relationship makes the entities non-empty."""
        assert not ExtractedEntities.build(relationships=[("x", "y")]).is_empty

    def test_counts(self):
        """counts reports the size of each collection."""
        entities = ExtractedEntities.build(
            processes=["p"], structures=["s1", "s2"], relationships=[("x", "y")]
        )

        assert entities.counts == {
            "processes": 1,
            "structures": 2,
            "concepts": 0,
            "relationships": 1,
        }

    def test_dict_round_trip(self):
        """to_dict/from_dict preserve every collection."""
        entities = ExtractedEntities.build(
            processes=["p"], structures=["s"], concepts=["c"], relationships=[("x", "y")]
        )

        assert ExtractedEntities.from_dict(entities.to_dict()) == entities
