"""
Commandes CLI des flux statiques : lecture et generation hors ligne.
"""

import asyncio

import typer
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from src.adapters.cli.helpers import console, exit_on_error, suppress_loguru, with_container
from src.core.entities.media import FeedCollection

feed_app = typer.Typer(help="Lecture des flux statiques pre-generes")
generate_app = typer.Typer(help="Generation hors ligne des flux statiques")


@feed_app.command("collections")
@exit_on_error
def feed_collections() -> None:
    """Affiche les collections de l'accueil."""
    asyncio.run(_feed_collections_async())


@with_container()
async def _feed_collections_async(container) -> None:
    collections = container.feed_provider_service().get_collections()
    if not collections:
        console.print("[yellow]Aucune collection. Lancer 'generate collections'.[/yellow]")
        return
    table = Table(title="Collections")
    table.add_column("ID", style="cyan")
    table.add_column("Nom", style="bold")
    table.add_column("Series", justify="right")
    for collection in collections:
        table.add_row(
            str(collection.get("id", "")),
            str(collection.get("name", "")),
            str(len(collection.get("shows", []))),
        )
    console.print(table)


@feed_app.command("trending")
@exit_on_error
def feed_trending() -> None:
    """Affiche la selection tendance."""
    asyncio.run(_feed_trending_async())


@with_container()
async def _feed_trending_async(container) -> None:
    trending = container.feed_provider_service().get_trending()
    if not trending:
        console.print("[yellow]Aucune serie tendance. Lancer 'generate trending'.[/yellow]")
        return
    for item in trending:
        console.print(f"[bold]{item.get('title')}[/bold] [dim]({item.get('id')})[/dim]")


@generate_app.command("collections")
@exit_on_error
def generate_collections() -> None:
    """Regenere les collections depuis le classement du catalogue principal."""
    asyncio.run(_generate_collections_async())


@with_container()
async def _generate_collections_async(container) -> None:
    """Implementation async de la commande generate collections."""
    service = container.feed_generator_service()
    total = len(service.definitions)
    console.print(f"[bold cyan]Generation des collections[/bold cyan]: {total}\n")

    with suppress_loguru():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=False,
        ) as progress:
            task = progress.add_task("[cyan]Generation...", total=total)

            def on_progress(collection: FeedCollection) -> None:
                progress.update(
                    task,
                    advance=1,
                    description=f"[cyan]{collection.name}[/cyan] ({len(collection.shows)})",
                )

            collections = await service.generate_collections(on_progress=on_progress)

    console.print(f"\n[green]{len(collections)} collection(s) ecrite(s).[/green]")


@generate_app.command("trending")
@exit_on_error
def generate_trending() -> None:
    """Ecrit la selection tendance."""
    asyncio.run(_generate_trending_async())


@with_container()
async def _generate_trending_async(container) -> None:
    trending = container.feed_generator_service().generate_trending()
    console.print(f"[green]{len(trending)} serie(s) tendance ecrite(s).[/green]")
