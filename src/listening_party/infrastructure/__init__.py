"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (in-memory party registry)
- Catalog (Spotify Web API over httpx)
- Discord (bot, cogs)
"""
