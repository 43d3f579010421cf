"""Tests du stockage JSON des flux pre-generes."""

import json
from pathlib import Path

import pytest

from src.adapters.feeds.json_feed_store import (
    COLLECTIONS_FILENAME,
    TRENDING_FILENAME,
    JsonFeedStore,
)
from src.core.exceptions import MalformedResponseError


@pytest.fixture
def store(tmp_path: Path) -> JsonFeedStore:
    return JsonFeedStore(feed_dir=tmp_path / "assets")


class TestJsonFeedStore:
    """Tests pour JsonFeedStore."""

    def test_missing_files_read_as_empty(self, store: JsonFeedStore) -> None:
        assert store.read_collections() == []
        assert store.read_trending() == []

    def test_write_then_read_collections(self, store: JsonFeedStore) -> None:
        collections = [{"id": "au-anime-del-momento", "name": "Anime del momento", "shows": []}]

        store.write_collections(collections)

        path = store.feed_dir / COLLECTIONS_FILENAME
        assert path.exists()
        assert store.read_collections() == collections

    def test_write_keeps_non_ascii_characters(self, store: JsonFeedStore) -> None:
        store.write_trending([{"title": "Gli anime più visti"}])

        content = (store.feed_dir / TRENDING_FILENAME).read_text(encoding="utf-8")
        assert "più" in content

    def test_invalid_json_is_malformed(self, store: JsonFeedStore) -> None:
        store.feed_dir.mkdir(parents=True)
        (store.feed_dir / TRENDING_FILENAME).write_text("{oops", encoding="utf-8")

        with pytest.raises(MalformedResponseError):
            store.read_trending()

    def test_non_list_is_malformed(self, store: JsonFeedStore) -> None:
        store.feed_dir.mkdir(parents=True)
        (store.feed_dir / COLLECTIONS_FILENAME).write_text(json.dumps({"a": 1}), encoding="utf-8")

        with pytest.raises(MalformedResponseError):
            store.read_collections()
