"""
Port du resolveur de playlist.

Le resolveur transforme une URL d'embed en manifeste video lisible. Ses
erreurs sont propagees telles quelles par le service de resolution.
"""

from abc import ABC, abstractmethod

from src.core.entities.media import VideoAsset


class IPlaylistResolver(ABC):
    """Interface d'extraction de playlist depuis une URL d'embed."""

    @abstractmethod
    async def resolve(self, embed_url: str) -> VideoAsset:
        """Resout une URL d'embed en VideoAsset."""
        ...
