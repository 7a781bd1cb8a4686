"""Domain models and entities.

Pure data structures (Pydantic v2). The domain knows nothing about HTTP,
the CLI or settings: only coordinates, repositories and probe results.
"""
