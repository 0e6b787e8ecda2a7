"""Domain layer: employee model, roster, and the pure query engine.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
