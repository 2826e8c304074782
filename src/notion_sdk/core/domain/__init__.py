"""Domain models and errors.

Why:
- Pure, strict data structures (Pydantic v2) for the Notion wire shapes.
- The domain knows nothing about HTTP: only envelopes, cursors and failures.
"""
