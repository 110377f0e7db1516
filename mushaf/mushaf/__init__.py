"""
Mushaf - indexed, read-only access to the Quran by surah, ayah, juz and page.

Quick start:
    from mushaf import QueryResolver, load_corpus

    resolver = QueryResolver(load_corpus("data/quran_v2.json"))
    print(resolver.get_ayah_by_key("1:1").unwrap().text)
"""

__version__ = "2.0.0"

from mushaf.core import CorpusStore, QueryResolver, QueryResult
from mushaf.data import build_corpus, load_corpus
from mushaf.exceptions import (
    CorpusLoadError,
    FormatError,
    MushafError,
    NotFoundError,
    RangeError,
)

__all__ = [
    "__version__",
    "CorpusStore",
    "QueryResolver",
    "QueryResult",
    "build_corpus",
    "load_corpus",
    "MushafError",
    "FormatError",
    "RangeError",
    "NotFoundError",
    "CorpusLoadError",
]
