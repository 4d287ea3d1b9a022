"""
Fixtures pytest partagees pour les tests m3u-catalog.

Ce module contient les fixtures communes utilisees dans les tests:
- Parser reel (FileLineSource + ClassifierService)
- Mock de ILineSource
- Fabrique de fichiers playlist dans tmp_path
- Capture des messages loguru
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Callable, Iterator
from unittest.mock import MagicMock

import pytest
from loguru import logger

from m3u_catalog.adapters.file_system import FileLineSource
from m3u_catalog.config import Settings
from m3u_catalog.core.ports.line_source import ILineSource
from m3u_catalog.services.classifier import ClassifierService
from m3u_catalog.services.parser import M3uParser


@pytest.fixture
def parser() -> M3uParser:
    """Parser avec la source de lignes du systeme de fichiers reel."""
    return M3uParser(FileLineSource(), ClassifierService())


@pytest.fixture
def mock_line_source() -> MagicMock:
    """
    Mock de ILineSource pour les tests.

    Par defaut, tout chemin est un fichier regulier et ne contient aucune ligne.
    """
    mock = MagicMock(spec=ILineSource)
    mock.is_regular_file.return_value = True
    mock.read_lines.return_value = iter([])
    return mock


@pytest.fixture
def write_playlist(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Fabrique de fichiers playlist.

    Usage:
        path = write_playlist("main.m3u", "#EXTM3U\\nhttp://x/a.mp4")
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture les messages loguru (niveau DEBUG et plus) emis pendant le test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec un fichier de log temporaire."""
    return Settings(
        encoding="utf-8",
        max_nesting_depth=16,
        log_file=tmp_path / "test.log",
    )
