"""Application layer: use cases and startup helpers."""
