"""캐시 케이스 자산

오케스트레이터는 cache.get()에서 SearchResultSet JSON 문자열을 기대합니다.
"""

CACHE_CASES = {
    "valid_enriched": (
        '{"results": [{"title": "Cached Sweden", "url": "cached.example/sweden", '
        '"visiting_url": "https://cached.example/sweden", "description": "from cache", '
        '"engine": ["engineA"]}], "page_query": "sweden", "page": 1, '
        '"style": {"theme": "simple", "colorscheme": "catppuccin-mocha"}, '
        '"empty_result_set": false}'
    ),
    "valid_empty": (
        '{"results": [], "page_query": "sweden", "page": 1, '
        '"style": {"theme": "simple", "colorscheme": "catppuccin-mocha"}, '
        '"empty_result_set": true}'
    ),
    "not_json": "<html>not json</html>",
    "missing_query": '{"results": [], "page": 1}',
    "invalid_page": '{"results": [], "page_query": "sweden", "page": 0}',
}
