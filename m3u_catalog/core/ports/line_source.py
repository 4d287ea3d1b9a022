"""
Interface port pour la lecture des lignes d'une playlist.

La source de lignes est le seul collaborateur bloquant du pipeline : elle
retourne une sequence paresseuse, a parcours unique, des lignes d'un fichier.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class ILineSource(ABC):
    """
    Interface pour l'acces aux fichiers de playlist.

    Definit le contrat pour verifier qu'un chemin est un fichier regulier
    et pour lire ses lignes dans un encodage donne.
    """

    @abstractmethod
    def is_regular_file(self, path: Path) -> bool:
        """Verifie si un chemin designe un fichier regulier."""
        ...

    @abstractmethod
    def read_lines(self, path: Path, encoding: str = "utf-8") -> Iterator[str]:
        """
        Lit les lignes d'un fichier de maniere paresseuse.

        Args:
            path: Chemin du fichier
            encoding: Encodage des caracteres

        Returns:
            Iterateur a parcours unique sur les lignes (sans fin de ligne)

        Raises:
            OSError: Si le fichier ne peut pas etre ouvert ou lu
            UnicodeDecodeError: Si le contenu ne respecte pas l'encodage
        """
        ...
