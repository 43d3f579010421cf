"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external clients.

This layer contains:
- CatalogService: search by query
- ShowAggregatorService: primary record + optional enrichments -> Show
- EpisodeWindowerService: 100-episode windows joined with titles/thumbnails
- VideoResolverService: composite id -> media id -> embed URL -> VideoAsset
- FeedProviderService / FeedGeneratorService: static feeds

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
