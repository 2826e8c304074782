"""Core: configuration, domain models and contracts.

Why:
- Nothing here knows about httpx or loguru; adapters depend on the Core,
  never the other way round.
"""
