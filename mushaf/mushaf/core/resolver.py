"""
Query resolution over a corpus store.

The resolver validates raw addresses, looks them up in the injected
CorpusStore and projects the result. Every operation returns a QueryResult;
per-query failures never escape as exceptions.
"""

import logging
from functools import wraps
from typing import Callable

from mushaf.core.addresses import (
    check_bounds,
    parse_ayah_key,
    parse_juz_number,
    parse_number,
    parse_page_number,
    parse_surah_number,
)
from mushaf.core.corpus import CorpusStore, LocatedAyah
from mushaf.core.result import QueryResult
from mushaf.exceptions import MushafError, NotFoundError
from mushaf.models import (
    AyahView,
    JuzView,
    PageView,
    Surah,
    SurahDetail,
    SurahSummary,
)

logger = logging.getLogger(__name__)


def _as_result(method: Callable) -> Callable:
    """Wrap a resolver method so MushafError becomes a failed QueryResult."""

    @wraps(method)
    def wrapper(self, *args, **kwargs) -> QueryResult:
        try:
            return QueryResult.success(method(self, *args, **kwargs))
        except MushafError as e:
            logger.debug("%s%r rejected: %s", method.__name__, args, e.message)
            return QueryResult.failure(e)

    return wrapper


class QueryResolver:
    """
    Resolve surah, ayah, juz and page addresses against a corpus.

    Example:
        resolver = QueryResolver(load_corpus("data/quran_v2.json"))

        result = resolver.get_ayah_by_key("2:255")
        print(result.unwrap().text)
    """

    def __init__(self, store: CorpusStore):
        self.store = store

    @_as_result
    def list_surahs(self) -> list[SurahSummary]:
        """Summaries of every loaded surah in order."""
        return [SurahSummary.of(surah) for surah in self.store.chapters]

    @_as_result
    def get_surah(self, number: str | int, include_ayahs: bool = True) -> SurahSummary:
        """
        Resolve a surah by number.

        Args:
            number: Surah number (1-114)
            include_ayahs: Return the full projection with every ayah
                instead of the summary

        Returns:
            SurahDetail or SurahSummary
        """
        surah = self._surah(number)
        if include_ayahs:
            return SurahDetail.of(surah)
        return SurahSummary.of(surah)

    @_as_result
    def get_ayah(self, surah_number: str | int, ayah_number: str | int) -> AyahView:
        """Resolve an ayah by surah number and ayah number."""
        surah = self._surah(surah_number)
        return self._ayah(surah, parse_number("ayah", ayah_number))

    @_as_result
    def get_ayah_by_key(self, key: str) -> AyahView:
        """Resolve an ayah by its combined "surah:ayah" identifier."""
        surah_number, ayah_number = parse_ayah_key(key)
        surah = self._surah(surah_number)
        return self._ayah(surah, ayah_number)

    @_as_result
    def get_juz(self, number: str | int) -> JuzView:
        """All ayahs of a juz (1-30) in canonical order."""
        juz = parse_juz_number(number)
        ayahs = self._views(self.store.verses_by_division(juz))
        if not ayahs:
            raise NotFoundError("juz", juz)
        return JuzView(juz=juz, ayahs=ayahs, count=len(ayahs))

    @_as_result
    def get_page(self, number: str | int) -> PageView:
        """All ayahs on a mushaf page (1-604) in canonical order."""
        page = parse_page_number(number)
        ayahs = self._views(self.store.verses_by_page(page))
        if not ayahs:
            raise NotFoundError("page", page)
        return PageView(page=page, ayahs=ayahs, count=len(ayahs))

    def _surah(self, raw: str | int) -> Surah:
        number = parse_surah_number(raw)
        surah = self.store.chapter_by_number(number)
        if surah is None:
            raise NotFoundError("surah", number)
        return surah

    def _ayah(self, surah: Surah, number: int) -> AyahView:
        check_bounds("ayah", number, 1, surah.ayah_count, scope=f"surah {surah.number}")
        ayah = self.store.verse_by_chapter_and_number(surah.number, number)
        if ayah is None:
            raise NotFoundError("ayah", f"{surah.number}:{number}")
        return AyahView.of(ayah, surah)

    @staticmethod
    def _views(located: tuple[LocatedAyah, ...]) -> list[AyahView]:
        return [AyahView.of(ayah, surah) for surah, ayah in located]
