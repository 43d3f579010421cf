"""
AnimeBridge - Federation de metadonnees anime et resolution video.

Ce package fusionne un catalogue principal (AnimeUnity) avec trois catalogues
d'enrichissement (Jikan/MyAnimeList, AniList, Kitsu) pour produire une
representation canonique des series et episodes, puis resout un identifiant
composite en playlist video lisible.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, identifiants, exceptions)
- services/ : Couche application (agregation, fenetrage, resolution video)
- adapters/ : Couche infrastructure (CLI, clients API, resolveur de playlist)
- web/ : Surface HTTP JSON (FastAPI)
"""
