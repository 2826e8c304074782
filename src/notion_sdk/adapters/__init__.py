"""Adapters: httpx transport, loguru diagnostics and the API client."""
