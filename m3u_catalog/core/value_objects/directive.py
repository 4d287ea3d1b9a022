"""
Objet valeur pour une directive #EXTINF en attente.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from loguru import logger


@dataclass(frozen=True)
class Directive:
    """
    Directive d'information etendue, pas encore associee a un emplacement.

    Attributs:
        seconds: Duree brute en secondes (peut etre negative)
        raw_attributes: Attributs bruts, transmis tels quels au parser de metadonnees
        title: Titre (au moins un caractere)
        line: Ligne source, pour les diagnostics
    """

    seconds: int
    raw_attributes: str
    title: str
    line: str = ""

    @property
    def duration(self) -> Optional[timedelta]:
        """
        Duree de la directive.

        None si la valeur brute est negative (inconnue) ou trop grande pour
        une timedelta.
        """
        if self.seconds < 0:
            return None
        try:
            return timedelta(seconds=self.seconds)
        except OverflowError:
            logger.debug(f"Duree hors limites traitee comme inconnue: {self.seconds}")
            return None
