"""
Tests unitaires pour l'expansion des playlists imbriquees.
"""

from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from m3u_catalog.adapters.file_system import FileLineSource
from m3u_catalog.core.entities import M3uEntry
from m3u_catalog.core.value_objects import MediaPath, MediaUrl
from m3u_catalog.services.classifier import ClassifierService
from m3u_catalog.services.parser import M3uParser

WritePlaylist = Callable[[str, str], Path]


def _locations(entries: list[M3uEntry]) -> list[str]:
    return [str(entry.location) for entry in entries]


class TestResolveNestedPlaylists:
    """Tests pour le remplacement en place des playlists imbriquees."""

    def test_no_playlist_entries_is_identity(self, parser: M3uParser) -> None:
        entries = parser.parse_string("http://x/a.mp4\n#EXTINF:1,B\nhttp://x/b.ts")

        assert parser.resolve_nested_playlists(entries) == entries

    def test_nested_playlist_replaced_in_place(
        self, parser: M3uParser, write_playlist: WritePlaylist, tmp_path: Path
    ) -> None:
        write_playlist("sub/inner.m3u", "#EXTINF:5,B\nb.mp4")
        main = write_playlist("main.m3u", "a.mp4\nsub/inner.m3u\nc.mp4")

        resolved = parser.resolve_nested_playlists(parser.parse_file(main))

        assert _locations(resolved) == [
            str(tmp_path / "a.mp4"),
            str(tmp_path / "sub" / "b.mp4"),
            str(tmp_path / "c.mp4"),
        ]
        assert resolved[1].title == "B"

    def test_recursive_expansion(
        self, parser: M3uParser, write_playlist: WritePlaylist, tmp_path: Path
    ) -> None:
        write_playlist("level2.m3u8", "deep.mkv")
        write_playlist("level1.M3U", "level2.m3u8\nmid.mkv")
        main = write_playlist("main.m3u", "level1.M3U\ntop.mkv")

        resolved = parser.resolve_nested_playlists(parser.parse_file(main))

        assert _locations(resolved) == [
            str(tmp_path / "deep.mkv"),
            str(tmp_path / "mid.mkv"),
            str(tmp_path / "top.mkv"),
        ]

    def test_missing_nested_playlist_is_dropped(
        self,
        parser: M3uParser,
        write_playlist: WritePlaylist,
        tmp_path: Path,
        log_messages: list[str],
    ) -> None:
        main = write_playlist("main.m3u", "a.mp4\nabsent.m3u\nc.mp4")

        resolved = parser.resolve_nested_playlists(parser.parse_file(main))

        assert _locations(resolved) == [str(tmp_path / "a.mp4"), str(tmp_path / "c.mp4")]
        assert any("absent.m3u" in message for message in log_messages)

    def test_directory_named_like_playlist_is_dropped(
        self, parser: M3uParser, tmp_path: Path
    ) -> None:
        (tmp_path / "folder.m3u").mkdir()
        entries = [M3uEntry(MediaPath(tmp_path / "folder.m3u")), M3uEntry(MediaUrl("http://x/a"))]

        resolved = parser.resolve_nested_playlists(entries)

        assert _locations(resolved) == ["http://x/a"]

    def test_undecodable_nested_playlist_is_dropped(
        self, parser: M3uParser, write_playlist: WritePlaylist, tmp_path: Path
    ) -> None:
        (tmp_path / "broken.m3u").write_bytes(b"\xff\xfe\xfa\n")
        main = write_playlist("main.m3u", "broken.m3u\nok.mp4")

        resolved = parser.resolve_nested_playlists(parser.parse_file(main))

        assert _locations(resolved) == [str(tmp_path / "ok.mp4")]

    def test_unreadable_nested_path_is_dropped(self, parser: M3uParser, tmp_path: Path) -> None:
        """Un nom trop long fait echouer la verification du fichier : seule l'entree tombe."""
        entries = [
            M3uEntry(MediaPath(tmp_path / ("x" * 300 + ".m3u"))),
            M3uEntry(MediaUrl("http://x/a")),
        ]

        resolved = parser.resolve_nested_playlists(entries)

        assert _locations(resolved) == ["http://x/a"]

    def test_file_check_error_is_dropped(
        self, mock_line_source: MagicMock, log_messages: list[str]
    ) -> None:
        mock_line_source.is_regular_file.side_effect = PermissionError("acces refuse")
        parser = M3uParser(mock_line_source, ClassifierService())
        entries = [
            M3uEntry(MediaUrl("http://x/a")),
            M3uEntry(MediaPath(Path("/secret/list.m3u"))),
            M3uEntry(MediaUrl("http://x/b")),
        ]

        resolved = parser.resolve_nested_playlists(entries)

        assert _locations(resolved) == ["http://x/a", "http://x/b"]
        assert any("acces refuse" in message for message in log_messages)
        mock_line_source.read_lines.assert_not_called()

    def test_remote_playlist_is_kept(self, parser: M3uParser) -> None:
        entries = [M3uEntry(MediaUrl("http://x/list.m3u"))]

        assert parser.resolve_nested_playlists(entries) == entries

    def test_self_reference_terminates(
        self,
        parser: M3uParser,
        write_playlist: WritePlaylist,
        tmp_path: Path,
        log_messages: list[str],
    ) -> None:
        loop = write_playlist("loop.m3u", "x.mp4\nloop.m3u")

        resolved = parser.resolve_nested_playlists(parser.parse_file(loop))

        assert _locations(resolved) == [str(tmp_path / "x.mp4"), str(tmp_path / "x.mp4")]
        assert any("cyclique" in message for message in log_messages)

    def test_mutual_reference_terminates(
        self, parser: M3uParser, write_playlist: WritePlaylist, tmp_path: Path
    ) -> None:
        write_playlist("b.m3u", "a.m3u\ny.mp4")
        a = write_playlist("a.m3u", "x.mp4\nb.m3u")

        resolved = parser.resolve_nested_playlists(parser.parse_file(a))

        assert str(tmp_path / "y.mp4") in _locations(resolved)
        assert _locations(resolved)[-1] == str(tmp_path / "y.mp4")

    @pytest.mark.parametrize(("max_depth", "expected"), [(1, []), (2, ["z.mp4"])])
    def test_max_depth(
        self,
        write_playlist: WritePlaylist,
        tmp_path: Path,
        max_depth: int,
        expected: list[str],
    ) -> None:
        write_playlist("sub2.m3u", "z.mp4")
        write_playlist("sub1.m3u", "sub2.m3u")
        parser = M3uParser(FileLineSource(), ClassifierService(), max_nesting_depth=max_depth)
        entries = [M3uEntry(MediaPath(tmp_path / "sub1.m3u"))]

        resolved = parser.resolve_nested_playlists(entries)

        assert _locations(resolved) == [str(tmp_path / name) for name in expected]
