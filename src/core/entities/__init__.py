"""
Entites metier representant les concepts du domaine.

Exports:
- ShowEntry: Projection d'une serie pour la recherche et les collections
- Show: Serie canonique enrichie
- Episode: Episode d'une fenetre de saison
- VideoAsset: Manifeste video lisible
- FeedCollection: Collection pre-generee
"""

from src.core.entities.media import Episode, FeedCollection, Show, ShowEntry, VideoAsset

__all__ = [
    "ShowEntry",
    "Show",
    "Episode",
    "VideoAsset",
    "FeedCollection",
]
