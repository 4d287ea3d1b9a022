"""
Configuration du logging de m3u-catalog via loguru.

Deux sorties :
- Console : coloree, au niveau choisi (configuration, puis -v / -q)
- Fichier : JSON avec rotation, toujours en DEBUG

Niveaux des diagnostics de parsing :
- DEBUG : commentaires ignores, directive remplacee, valeur de metadonnee vide,
  duree hors limites
- INFO : cle de metadonnee ecrasee
- WARNING : emplacement inexploitable, playlist imbriquee abandonnee
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant du handler console, pour pouvoir changer son niveau
_console_handler_id: Optional[int] = None


def console_level(verbose: int, quiet: bool, default: str) -> str:
    """
    Niveau console correspondant aux options globales de la CLI.

    -q n'affiche que les erreurs, -v ajoute les INFO (cles ecrasees),
    -vv ajoute les DEBUG (lignes ignorees).
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return default


def set_console_level(log_level: str) -> None:
    """Remplace le handler console par un handler au niveau indique.

    Sans effet tant que configure_logging n'a pas ete appele.
    """
    global _console_handler_id
    if _console_handler_id is None:
        return
    logger.remove(_console_handler_id)
    _console_handler_id = logger.add(
        sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/m3ucat.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum de la sortie console
        log_file : Chemin du fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    global _console_handler_id
    logger.remove()

    _console_handler_id = logger.add(
        sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), rotation=rotation_size)
