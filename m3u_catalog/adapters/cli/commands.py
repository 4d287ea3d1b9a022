"""
Commandes CLI de parsing (parse, catalog).
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from m3u_catalog.adapters.cli.helpers import (
    console,
    load_entries,
    state,
    suppress_loguru,
)
from m3u_catalog.adapters.cli.rendering import catalog_tree, entries_table
from m3u_catalog.container import Container
from m3u_catalog.core.entities import EntryKind


class KindFilter(str, Enum):
    """Filtre par type d'entree."""

    ALL = "all"
    CHANNELS = "channels"
    MOVIES = "movies"
    SERIES = "series"


_KIND_BY_FILTER = {
    KindFilter.CHANNELS: EntryKind.CHANNEL,
    KindFilter.MOVIES: EntryKind.MOVIE,
    KindFilter.SERIES: EntryKind.SERIES,
}


def parse(
    file: Annotated[Path, typer.Argument(help="Fichier .m3u a analyser")],
    encoding: Annotated[
        Optional[str],
        typer.Option("--encoding", "-e", help="Encodage du fichier (defaut: configuration)"),
    ] = None,
    resolve_nested: Annotated[
        Optional[bool],
        typer.Option(
            "--resolve-nested/--no-resolve-nested",
            help="Developpe les playlists imbriquees",
        ),
    ] = None,
    kind: Annotated[
        KindFilter,
        typer.Option("--kind", "-k", help="Type d'entrees a afficher"),
    ] = KindFilter.ALL,
) -> None:
    """Affiche les entrees d'une playlist, classees par type."""
    container = Container()
    entries = load_entries(container, file, encoding, resolve_nested)

    if kind is not KindFilter.ALL:
        wanted = _KIND_BY_FILTER[kind]
        entries = [entry for entry in entries if entry.kind is wanted]

    console.print(entries_table(entries, title=str(file)))
    if not state["quiet"]:
        console.print(f"Total: {len(entries)} entree(s)")


def catalog(
    file: Annotated[Path, typer.Argument(help="Fichier .m3u a analyser")],
    encoding: Annotated[
        Optional[str],
        typer.Option("--encoding", "-e", help="Encodage du fichier (defaut: configuration)"),
    ] = None,
    resolve_nested: Annotated[
        Optional[bool],
        typer.Option(
            "--resolve-nested/--no-resolve-nested",
            help="Developpe les playlists imbriquees",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON au lieu de l'arbre"),
    ] = False,
) -> None:
    """Construit le catalogue films / flux en direct / series d'une playlist."""
    container = Container()
    entries = load_entries(container, file, encoding, resolve_nested)

    with suppress_loguru():
        result = container.catalog_builder().build(entries)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    console.print(catalog_tree(result))
