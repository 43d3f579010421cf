"""Resolveurs de playlist pour les hebergeurs video."""

from src.adapters.playlist.vixcloud import VixcloudPlaylistResolver

__all__ = ["VixcloudPlaylistResolver"]
