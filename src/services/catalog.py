"""
Service de recherche dans le catalogue principal.
"""

from loguru import logger

from src.core.entities.media import ShowEntry
from src.core.ports.api_clients import IPrimaryCatalogClient
from src.services.mappers import show_entry_from_au


class CatalogService:
    """Recherche de series par titre, projetees en ShowEntry."""

    def __init__(self, catalog: IPrimaryCatalogClient) -> None:
        self._catalog = catalog

    async def search(self, query: str) -> list[ShowEntry]:
        """
        Recherche des series par titre.

        Une requete vide ne declenche aucun appel et retourne une liste vide.
        """
        query = query.strip()
        if not query:
            return []
        shows = await self._catalog.search(query)
        logger.debug(f"Recherche '{query}': {len(shows)} resultat(s)")
        return [show_entry_from_au(show) for show in shows]
