"""
Rendu Rich des entrees et du catalogue.
"""

from datetime import timedelta
from typing import Iterable, Optional

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from m3u_catalog.core.entities import Catalog, EntryKind, M3uEntry

KIND_STYLES = {
    EntryKind.CHANNEL: "cyan",
    EntryKind.MOVIE: "green",
    EntryKind.SERIES: "magenta",
}


def format_duration(duration: Optional[timedelta]) -> str:
    """Formate une duree en h:mm:ss, ou '-' si inconnue."""
    if duration is None:
        return "-"
    total = int(duration.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_episode(entry: M3uEntry) -> str:
    """Formate saison/episode au format SxxEyy, ou chaine vide."""
    if entry.series is None:
        return ""
    return f"S{entry.series.season:02d}E{entry.series.episode:02d}"


def entries_table(entries: Iterable[M3uEntry], title: str = "Entrees") -> Table:
    """Construit le tableau Rich des entrees, dans l'ordre de la playlist."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type")
    table.add_column("Titre")
    table.add_column("Duree", justify="right")
    table.add_column("Episode")
    table.add_column("Emplacement", overflow="fold")

    for index, entry in enumerate(entries, start=1):
        style = KIND_STYLES[entry.kind]
        table.add_row(
            str(index),
            f"[{style}]{entry.kind.value}[/{style}]",
            escape(entry.title) if entry.title is not None else "[dim]-[/dim]",
            format_duration(entry.duration),
            format_episode(entry),
            escape(str(entry.location)),
        )
    return table


def catalog_tree(catalog: Catalog) -> Tree:
    """Construit l'arbre Rich du catalogue (films, flux en direct, series)."""
    root = Tree("[bold]Catalogue[/bold]")

    movies = root.add(f"[green]Films[/green] ({len(catalog.movies)})")
    for movie in catalog.movies:
        movies.add(f"{escape(movie.name or '')} [dim]{escape(movie.stream_url)}[/dim]")

    streams = root.add(f"[cyan]Flux en direct[/cyan] ({len(catalog.live_streams)})")
    for stream in catalog.live_streams:
        streams.add(f"{escape(stream.name or '')} [dim]{escape(stream.stream_url)}[/dim]")

    series_node = root.add(f"[magenta]Series[/magenta] ({len(catalog.series)})")
    for series in catalog.series:
        node = series_node.add(f"[bold]{escape(series.name.strip()) or '?'}[/bold]")
        for season_num, season in enumerate(series.seasons):
            if season is None:
                continue
            season_node = node.add(f"Saison {season_num}")
            for episode in season.episodes:
                if episode is None:
                    continue
                season_node.add(
                    f"E{episode.episode_num:02d} {escape(episode.episode_title or '')} "
                    f"[dim]{escape(episode.stream_url)}[/dim]"
                )
    return root
