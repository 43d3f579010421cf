"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import (
    episodes,
    search,
    show,
    video,
)
from src.adapters.cli.commands.feed_commands import (
    feed_app,
    generate_app,
)

__all__ = [
    # catalogue
    "search",
    "show",
    "episodes",
    "video",
    # flux
    "feed_app",
    "generate_app",
]
