"""
Tests unitaires pour le parser de metadonnees cle="valeur".
"""

from m3u_catalog.adapters.parsing import parse_metadata


class TestParseMetadata:
    """Tests pour l'extraction des paires cle/valeur."""

    def test_none_yields_empty_metadata(self) -> None:
        assert parse_metadata(None) == {}

    def test_typical_iptv_attributes(self) -> None:
        metadata = parse_metadata(' tvg-id="news.fr" tvg-logo="http://x/logo.png" group-title="Info"')

        assert metadata == {
            "tvg-id": "news.fr",
            "tvg-logo": "http://x/logo.png",
            "group-title": "Info",
        }

    def test_leading_comma_is_ignored(self) -> None:
        """Les attributs bruts captures apres la duree commencent souvent par une virgule."""
        assert parse_metadata(',tvg-logo="x.png"') == {"tvg-logo": "x.png"}

    def test_key_charset(self) -> None:
        """Les cles acceptent lettres, chiffres, tiret, souligne et point."""
        metadata = parse_metadata('tvg.name="A" tvg_chno="5" x-1="b"')

        assert metadata == {"tvg.name": "A", "tvg_chno": "5", "x-1": "b"}

    def test_value_may_contain_spaces_and_commas(self) -> None:
        assert parse_metadata('group-title="News, Sport"') == {"group-title": "News, Sport"}

    def test_repeated_key_keeps_last_value(self, log_messages: list[str]) -> None:
        """La derniere occurrence ecrase la precedente, avec un diagnostic."""
        metadata = parse_metadata('a="1" a="2"')

        assert metadata == {"a": "2"}
        assert any("'1' -> '2'" in message for message in log_messages)

    def test_blank_values_are_skipped(self, log_messages: list[str]) -> None:
        metadata = parse_metadata('a="" b="  " c="x"')

        assert metadata == {"c": "x"}
        assert any("cle a" in message for message in log_messages)

    def test_garbage_between_pairs_does_not_abort(self) -> None:
        metadata = parse_metadata('junk a="1" more junk b="2" trailing "garbage')

        assert metadata == {"a": "1", "b": "2"}

    def test_no_pairs(self) -> None:
        assert parse_metadata("no attributes here") == {}

    def test_non_ascii_key_is_ignored(self) -> None:
        """Les cles sont limitees aux caracteres ASCII."""
        assert parse_metadata('clé="v" id="1"') == {"id": "1"}
