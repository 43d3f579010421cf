"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Clients des catalogues (AnimeUnity, Jikan, AniList, Kitsu) et transport HTTP
- playlist/ : Résolveurs de playlist (Vixcloud)
- feeds/ : Stockage JSON des flux pré-générés
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
