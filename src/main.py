"""
Point d'entrée CLI d'AnimeBridge.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    episodes,
    feed_app,
    generate_app,
    search,
    show,
    video,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="animebridge",
    help="Catalogue d'anime federe (AnimeUnity, Jikan, AniList, Kitsu)",
)
container = Container()


def get_version() -> str:
    """Version installée du paquet."""
    try:
        return package_version("animebridge")
    except PackageNotFoundError:
        return "0.1.0"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """AnimeBridge - Catalogue d'anime federe."""
    settings = get_config()
    configure_logging(
        log_level=level_for_verbosity(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Commandes de consultation
app.command()(search)
app.command()(show)
app.command()(episodes)
app.command()(video)

# Flux statiques
app.add_typer(feed_app, name="feed")
app.add_typer(generate_app, name="generate")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration AnimeBridge")
    typer.echo(f"AnimeUnity : {config.animeunity_base_url}")
    typer.echo(f"Jikan : {config.jikan_base_url}")
    typer.echo(f"AniList : {config.anilist_base_url}")
    typer.echo(
        f"Kitsu : {config.kitsu_base_url} "
        f"({'activé' if config.kitsu_enabled else 'désactivé'})"
    )
    typer.echo(f"Flux statiques : {config.feed_dir}")
    typer.echo(f"Timeout HTTP : {config.http_timeout:g}s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AnimeBridge v{get_version()}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web AnimeBridge."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    logger.info("Démarrage d'AnimeBridge", version=get_version())

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
