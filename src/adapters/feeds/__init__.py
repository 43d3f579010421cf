"""Stockage des flux statiques pre-generes."""

from src.adapters.feeds.json_feed_store import JsonFeedStore

__all__ = ["JsonFeedStore"]
