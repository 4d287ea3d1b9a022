"""
Exceptions du domaine.

Les erreurs de contenu (emplacement invalide) sont recuperees localement par
l'assembleur ; les erreurs d'acces a l'entree sont remontees a l'appelant.
"""

from pathlib import Path


class InvalidLocation(ValueError):
    """
    Exception levee quand une chaine ne peut pas etre interpretee comme emplacement.

    Attributes:
        raw: Chaine brute rejetee
    """

    def __init__(self, raw: str, reason: str = "emplacement invalide") -> None:
        """
        Initialise l'erreur avec la chaine rejetee.

        Args:
            raw: Chaine brute rejetee
            reason: Motif du rejet
        """
        self.raw = raw
        super().__init__(f"{reason}: {raw!r}")


class NotAFileError(ValueError):
    """Exception levee quand le chemin fourni n'est pas un fichier regulier."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} n'est pas un fichier")
