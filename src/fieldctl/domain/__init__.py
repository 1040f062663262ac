"""Domain layer — value types, value sets, field types, storage keys.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
