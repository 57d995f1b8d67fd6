"""User Directory API: registration, bearer tokens and user CRUD over stored functions."""
