"""
Port du stockage des flux pre-generes.

Les collections et tendances sont produites hors ligne puis consommees
telles quelles : aucun traitement ne porte sur leur contenu.
"""

from abc import ABC, abstractmethod
from typing import Any


class IFeedStore(ABC):
    """Interface de lecture/ecriture des flux statiques."""

    @abstractmethod
    def read_collections(self) -> list[dict[str, Any]]:
        """Retourne les collections pre-generees."""
        ...

    @abstractmethod
    def read_trending(self) -> list[dict[str, Any]]:
        """Retourne les series tendance pre-generees."""
        ...

    @abstractmethod
    def write_collections(self, collections: list[dict[str, Any]]) -> None:
        """Ecrit les collections generees."""
        ...

    @abstractmethod
    def write_trending(self, shows: list[dict[str, Any]]) -> None:
        """Ecrit les series tendance generees."""
        ...
