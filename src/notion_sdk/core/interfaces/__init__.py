"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
"""
