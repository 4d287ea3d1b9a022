"""
Point d'entree CLI de m3u-catalog.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import catalog, parse
from .adapters.cli.helpers import state
from .config import Settings
from .container import Container
from .logging_config import configure_logging, console_level, set_console_level

app = typer.Typer(
    name="m3ucat",
    help="Analyse et classement de playlists .m3u",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Affiche les diagnostics de parsing (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """m3u-catalog - Parsing et classement de playlists .m3u."""
    if quiet:
        state["quiet"] = True
        state["verbose"] = 0
    else:
        state["quiet"] = False
        state["verbose"] = verbose
    if verbose or quiet:
        set_console_level(console_level(verbose, quiet, get_config().log_level))


app.command()(parse)
app.command()(catalog)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Encodage : {config.encoding}")
    typer.echo(f"Playlists imbriquees : {'developpees' if config.resolve_nested else 'conservees'}")
    typer.echo(f"Profondeur maximale : {config.max_nesting_depth}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"m3u-catalog v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage de m3u-catalog", version=__version__)

    app()


if __name__ == "__main__":
    main()
