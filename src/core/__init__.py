"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), le codec
d'identifiants composites et la hiérarchie d'exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages / modules :
- entities/ : Entités canoniques (Show, ShowEntry, Season, Episode, VideoAsset)
- ports/ : Interfaces abstraites et DTOs des sources externes
- identifiers : Composition/décomposition des identifiants composites
- exceptions : Erreurs du domaine
"""
