"""
Utilitaires partages pour les commandes CLI de m3u-catalog.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- state : options globales de verbosite
- load_entries : parsing d'un fichier avec gestion des erreurs d'entree
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from m3u_catalog.container import Container
from m3u_catalog.core.entities import M3uEntry
from m3u_catalog.core.exceptions import NotAFileError

# Console globale pour tous les affichages
console = Console()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@contextmanager
def suppress_loguru(enabled: bool = True):
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Les diagnostics de parsing restent visibles en mode verbeux.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    if not enabled or state["verbose"] > 0:
        yield
        return
    loguru_logger.disable("m3u_catalog")
    try:
        yield
    finally:
        loguru_logger.enable("m3u_catalog")


def load_entries(
    container: Container,
    file: Path,
    encoding: Optional[str],
    resolve_nested: Optional[bool],
) -> list[M3uEntry]:
    """
    Parse un fichier de playlist pour une commande CLI.

    Args:
        container: Container DI initialise
        file: Chemin du fichier .m3u
        encoding: Encodage force, sinon celui de la configuration
        resolve_nested: Expansion des playlists imbriquees, sinon selon la configuration

    Returns:
        Entrees parsees

    Raises:
        typer.Exit: code 1 si le fichier est absent ou illisible
    """
    config = container.config()
    encoding = encoding or config.encoding
    if resolve_nested is None:
        resolve_nested = config.resolve_nested

    parser = container.parser()
    try:
        with suppress_loguru():
            entries = parser.parse_file(file, encoding)
            if resolve_nested:
                entries = parser.resolve_nested_playlists(entries, encoding)
    except NotAFileError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Erreur:[/red] lecture impossible de {file}: {e}")
        raise typer.Exit(code=1)
    return entries
