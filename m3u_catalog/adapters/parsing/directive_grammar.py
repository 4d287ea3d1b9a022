"""
Grammaire des lignes de directive #EXTINF.

Forme attendue, sur la ligne entiere :
    #EXTINF:<entier signe><attributs bruts>,<titre>

Le groupe des attributs est glouton : le titre est ce qui suit la derniere virgule.
"""

import re
from typing import Optional

from m3u_catalog.core.value_objects import Directive
from m3u_catalog.utils.constants import COMMENT_START, EXTENDED_INFO_PREFIX

# Chiffres ASCII uniquement : les chiffres d'autres ecritures donnent un commentaire
EXTENDED_INFO_PATTERN = re.compile(
    re.escape(EXTENDED_INFO_PREFIX) + r"(-?\d+)(.*),(.+)", re.ASCII
)


def is_comment(line: str) -> bool:
    """Vrai pour toute ligne commencant par le marqueur de commentaire."""
    return line.startswith(COMMENT_START)


def match_directive(line: str) -> Optional[Directive]:
    """
    Reconnait une directive d'information etendue.

    Args:
        line: Ligne deja nettoyee a droite

    Returns:
        Directive si la ligne entiere correspond a la grammaire, None sinon
        (ligne de commentaire ordinaire).
    """
    match = EXTENDED_INFO_PATTERN.fullmatch(line)
    if match is None:
        return None
    return Directive(
        seconds=int(match.group(1)),
        raw_attributes=match.group(2),
        title=match.group(3),
        line=line,
    )
