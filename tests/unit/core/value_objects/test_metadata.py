"""
Tests pour l'objet valeur Metadata.
"""

import pytest

from m3u_catalog.core.value_objects import Metadata


class TestMetadata:
    """Tests pour le mapping immutable des metadonnees."""

    def test_empty(self) -> None:
        metadata = Metadata.empty()

        assert len(metadata) == 0
        assert metadata == {}

    def test_compares_with_dict(self) -> None:
        assert Metadata({"tvg-id": "a"}) == {"tvg-id": "a"}

    def test_blank_values_are_not_stored(self) -> None:
        """Une valeur vide ou blanche est traitee comme absente."""
        metadata = Metadata({"a": "", "b": "   ", "c": "x"})

        assert metadata == {"c": "x"}
        assert "a" not in metadata

    def test_is_immutable(self) -> None:
        metadata = Metadata({"a": "1"})

        with pytest.raises(TypeError):
            metadata["a"] = "2"  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak(self) -> None:
        source = {"a": "1"}
        metadata = Metadata(source)
        source["a"] = "2"

        assert metadata["a"] == "1"

    def test_hashable(self) -> None:
        assert hash(Metadata({"a": "1"})) == hash(Metadata({"a": "1"}))
