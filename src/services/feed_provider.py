"""
Service de lecture des flux pre-generes.

Les collections et tendances sont transmises sans modification.
"""

from typing import Any

from src.core.ports.feeds import IFeedStore


class FeedProviderService:
    """Expose les flux statiques du stockage."""

    def __init__(self, store: IFeedStore) -> None:
        self._store = store

    def get_collections(self) -> list[dict[str, Any]]:
        """Collections de l'accueil."""
        return self._store.read_collections()

    def get_trending(self) -> list[dict[str, Any]]:
        """Series mises en avant."""
        return self._store.read_trending()
