"""Infrastructure adapters (PostgreSQL, Redis, in-memory)"""
