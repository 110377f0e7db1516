"""
Core modules for Mushaf.

This package contains the query layer:
- Corpus store with surah, ayah, juz and page indexes
- Address parsing and bounds checking
- Query resolution into response-ready projections

Primary API:
    from mushaf.core import CorpusStore, QueryResolver

    resolver = QueryResolver(CorpusStore(surahs))
    result = resolver.get_ayah("1", "1")
"""

from mushaf.core.corpus import CorpusStore, LocatedAyah
from mushaf.core.resolver import QueryResolver
from mushaf.core.result import QueryResult

# Address helpers - for transports that validate up front
from mushaf.core.addresses import parse_ayah_key, parse_number

__all__ = [
    "CorpusStore",
    "LocatedAyah",
    "QueryResolver",
    "QueryResult",
    "parse_ayah_key",
    "parse_number",
]
