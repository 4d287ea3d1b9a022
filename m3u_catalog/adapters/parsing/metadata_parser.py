"""
Parser des metadonnees cle="valeur" d'une directive #EXTINF.

Les fragments mal formes entre deux paires sont simplement ignores :
chaque correspondance est independante des autres.
"""

import re
from typing import Optional

from loguru import logger

from m3u_catalog.core.value_objects import Metadata

# Cles en caracteres ASCII uniquement
KEY_VALUE_PATTERN = re.compile(r'([\w\-_.]+)="(.*?)"( )?', re.ASCII)


def parse_metadata(raw: Optional[str]) -> Metadata:
    """
    Extrait le mapping cle -> valeur d'une chaine d'attributs bruts.

    Args:
        raw: Attributs bruts captures par la directive, ou None

    Returns:
        Metadata (vide si raw est None). En cas de cle repetee,
        la derniere valeur l'emporte.
    """
    if raw is None:
        return Metadata.empty()

    value_by_key: dict[str, str] = {}
    for match in KEY_VALUE_PATTERN.finditer(raw.strip()):
        key = match.group(1)
        value = match.group(2)
        if not value or value.isspace():
            logger.debug(f"Valeur vide ignoree pour la cle {key}")
            continue
        overwritten = value_by_key.get(key)
        value_by_key[key] = value
        if overwritten is not None:
            logger.info(
                f"Valeur ecrasee pour la cle de metadonnee dupliquee {key}: "
                f"'{overwritten}' -> '{value}'"
            )

    return Metadata(value_by_key)
