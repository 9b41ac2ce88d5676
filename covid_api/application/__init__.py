"""Application layer - use cases orchestrating entities and repositories."""
