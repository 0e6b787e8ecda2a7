"""rosterq: read-only query engine over in-memory employee rosters."""

__version__ = "0.1.0"
