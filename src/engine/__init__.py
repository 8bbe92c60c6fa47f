"""Engine Layer - Search Request Pipeline

This module provides the core engine layer for the meta search service:
- SearchOrchestrator: Main entry point for search request handling
- resolve_page: Pagination normalization and cache key construction
- select_engines: Per-request upstream engine selection
- enrich: Post-aggregation style/empty-result enrichment
- CacheAdapter: Cache service adapter
- SingleFlight: Optional de-duplication of concurrent identical misses
- SearchOutcome: Standardized orchestrator result
"""

from .cache_adapter import CacheAdapter
from .engine_selector import select_engines
from .enricher import enrich
from .orchestrator import SearchOrchestrator
from .pagination import PageResolution, resolve_page
from .request import SearchRequest
from .result import SearchOutcome, SearchStatus
from .single_flight import SingleFlight

__all__ = [
    "SearchOrchestrator",
    "SearchRequest",
    "SearchOutcome",
    "SearchStatus",
    "CacheAdapter",
    "PageResolution",
    "resolve_page",
    "select_engines",
    "enrich",
    "SingleFlight",
]
