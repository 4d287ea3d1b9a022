"""
Adaptateur pour la lecture des fichiers de playlist.

Implementation concrete de ILineSource pour le systeme de fichiers reel.
"""

from pathlib import Path
from typing import Iterator

from m3u_catalog.core.ports.line_source import ILineSource


class FileLineSource(ILineSource):
    """
    Implementation de ILineSource pour le systeme de fichiers reel.

    Le fichier n'est ouvert qu'au premier parcours de l'iterateur et
    il est referme des que l'iterateur est epuise ou libere.
    """

    def is_regular_file(self, path: Path) -> bool:
        """Verifie si un chemin designe un fichier regulier."""
        return path.is_file()

    def read_lines(self, path: Path, encoding: str = "utf-8") -> Iterator[str]:
        """Lit les lignes du fichier, sans les fins de ligne."""
        with open(path, encoding=encoding) as f:
            for line in f:
                yield line.rstrip("\r\n")
