"""
Commandes CLI de consultation du catalogue : recherche, fiche, episodes, video.
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, exit_on_error, suppress_loguru, with_container
from src.core.entities.media import Episode, Show, ShowEntry, VideoAsset


def _format_number(number) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def display_entries(entries: list[ShowEntry]) -> None:
    """Affiche des resultats de recherche sous forme de tableau."""
    table = Table(title=f"{len(entries)} resultat(s)")
    table.add_column("ID", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Type")
    table.add_column("Annee", justify="right")
    for entry in entries:
        table.add_row(
            entry.id,
            entry.title,
            entry.kind.value,
            str(entry.year) if entry.year else "-",
        )
    console.print(table)


def display_show(show: Show) -> None:
    """Affiche la fiche agregee d'une serie."""
    console.print(f"[bold cyan]{show.title}[/bold cyan] [dim]({show.id})[/dim]")
    console.print(f"Type : {show.kind.value}")
    if show.status:
        console.print(f"Statut : {show.status.value}")
    if show.release_date:
        console.print(f"Sortie : {show.release_date.isoformat()}")
    if show.genres:
        console.print(f"Genres : {', '.join(show.genres)}")
    console.print(f"Note : {show.rating:g}")
    if show.duration_seconds:
        console.print(f"Duree : {show.duration_seconds // 60} min")
    if show.poster_url:
        console.print(f"Affiche : {show.poster_url}")
    if show.backdrop_url:
        console.print(f"Fond : {show.backdrop_url}")
    if show.seasons is not None:
        names = ", ".join(f"{s.number}: {s.name}" for s in show.seasons)
        console.print(f"Saisons : {names or 'aucune'}")
    if show.overview:
        console.print(f"\n{show.overview}")


def display_episodes(episodes: list[Episode]) -> None:
    """Affiche les episodes d'une saison."""
    table = Table(title=f"{len(episodes)} episode(s)")
    table.add_column("N°", justify="right", style="cyan")
    table.add_column("ID")
    table.add_column("Titre")
    table.add_column("Miniature", style="dim")
    for episode in episodes:
        table.add_row(
            _format_number(episode.number),
            episode.id,
            episode.title or "-",
            episode.thumbnail_url or "-",
        )
    console.print(table)


def display_assets(assets: list[VideoAsset]) -> None:
    """Affiche les manifestes video resolus."""
    for asset in assets:
        console.print(f"[green]{asset.format.upper()}[/green] {asset.url}")
        for name, value in asset.headers.items():
            console.print(f"  [dim]{name}: {value}[/dim]")


@exit_on_error
def search(
    query: Annotated[str, typer.Argument(help="Texte a rechercher dans les titres")],
) -> None:
    """Recherche des series dans le catalogue principal."""
    asyncio.run(_search_async(query))


@with_container()
async def _search_async(container, query: str) -> None:
    """Implementation async de la commande search."""
    service = container.catalog_service()
    with suppress_loguru():
        entries = await service.search(query)
    if not entries:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return
    display_entries(entries)


@exit_on_error
def show(
    show_id: Annotated[str, typer.Argument(help="Identifiant <id>-<slug>")],
) -> None:
    """Affiche la fiche agregee d'une serie."""
    asyncio.run(_show_async(show_id))


@with_container()
async def _show_async(container, show_id: str) -> None:
    """Implementation async de la commande show."""
    service = container.show_aggregator_service()
    aggregated = await service.aggregate(show_id)
    display_show(aggregated.show)
    if aggregated.degraded_sources:
        console.print(
            f"\n[yellow]Sources indisponibles :[/yellow] "
            f"{', '.join(aggregated.degraded_sources)}"
        )


@exit_on_error
def episodes(
    show_id: Annotated[str, typer.Argument(help="Identifiant <id>-<slug>")],
    season: Annotated[
        int,
        typer.Option("--season", "-s", min=0, help="Fenetre de 100 episodes (0 = 1-100)"),
    ] = 0,
) -> None:
    """Liste les episodes d'une fenetre de saison."""
    asyncio.run(_episodes_async(show_id, season))


@with_container()
async def _episodes_async(container, show_id: str, season: int) -> None:
    """Implementation async de la commande episodes."""
    service = container.episode_windower_service()
    result = await service.fetch_episodes(show_id, season)
    if not result:
        console.print("[yellow]Aucun episode dans cette saison.[/yellow]")
        return
    display_episodes(result)


@exit_on_error
def video(
    media_ref: Annotated[
        str,
        typer.Argument(help="Identifiant d'episode <id>-<slug>/<media> ou de film"),
    ],
) -> None:
    """Resout le manifeste video d'un episode ou d'un film."""
    asyncio.run(_video_async(media_ref))


@with_container()
async def _video_async(container, media_ref: str) -> None:
    """Implementation async de la commande video."""
    service = container.video_resolver_service()
    display_assets(await service.fetch_video_assets(media_ref))
