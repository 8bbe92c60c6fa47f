"""Utilities package - Flat structure"""

# Hash utilities
from .hash_utils import hash_string, generate_cache_key

# URL utilities
from .url_utils import normalize_href, unwrap_redirect_href, display_url

__all__ = [
    # hash
    "hash_string",
    "generate_cache_key",
    # url
    "normalize_href",
    "unwrap_redirect_href",
    "display_url",
]
