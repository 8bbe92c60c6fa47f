"""metasurf - cache-first meta search service."""

__version__ = "1.0.0"
