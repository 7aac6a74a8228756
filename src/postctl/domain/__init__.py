"""Domain layer — post record, front-matter codec, lint rules.

This layer depends only on stdlib, pydantic, and the round-trip parsers.
It must never import from services, infrastructure, commands, or config.
"""
