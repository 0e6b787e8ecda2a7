"""Configuration layer: models, layered settings, discovery, logging."""
