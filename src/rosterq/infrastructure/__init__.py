"""Infrastructure layer: concrete roster sources for the CLI."""
