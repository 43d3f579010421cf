"""
Stockage JSON des flux pre-generes.

Les collections et tendances sont ecrites par le generateur hors ligne puis
servies telles quelles. Un fichier absent donne une liste vide (le flux n'a
pas encore ete genere) ; un fichier illisible est une erreur.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from src.core.exceptions import MalformedResponseError
from src.core.ports.feeds import IFeedStore

COLLECTIONS_FILENAME = "au_feed_collections.json"
TRENDING_FILENAME = "au_feed_trending_shows.json"


class JsonFeedStore(IFeedStore):
    """
    Flux stockes sous forme de fichiers JSON dans un repertoire.

    Attributes:
        feed_dir: Repertoire contenant les fichiers de flux
    """

    def __init__(self, feed_dir: Path) -> None:
        self.feed_dir = Path(feed_dir)

    @property
    def collections_path(self) -> Path:
        return self.feed_dir / COLLECTIONS_FILENAME

    @property
    def trending_path(self) -> Path:
        return self.feed_dir / TRENDING_FILENAME

    def _read(self, path: Path) -> list[dict[str, Any]]:
        if not path.exists():
            logger.warning(f"Flux non genere: {path}")
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Flux illisible: {path}") from e
        if not isinstance(data, list):
            raise MalformedResponseError(f"Liste JSON attendue dans {path}")
        return data

    def _write(self, path: Path, items: list[dict[str, Any]]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Flux ecrit: {path} ({len(items)} entrees)")

    def read_collections(self) -> list[dict[str, Any]]:
        return self._read(self.collections_path)

    def read_trending(self) -> list[dict[str, Any]]:
        return self._read(self.trending_path)

    def write_collections(self, collections: list[dict[str, Any]]) -> None:
        self._write(self.collections_path, collections)

    def write_trending(self, shows: list[dict[str, Any]]) -> None:
        self._write(self.trending_path, shows)
