"""
In-memory corpus store.

Holds the immutable surah/ayah dataset and answers direct-key lookups:
by surah number, by (surah, ayah) pair, by juz and by page. Juz and page
lookups are served from slice indexes built in a single pass, which is only
correct because page and juz numbers never decrease in canonical order.
The constructor enforces that.
"""

import logging
from typing import Iterable, Iterator, NamedTuple

from mushaf.exceptions import CorpusLoadError
from mushaf.models import Ayah, Surah

logger = logging.getLogger(__name__)


class LocatedAyah(NamedTuple):
    """An ayah paired with the surah that owns it."""

    surah: Surah
    ayah: Ayah


class CorpusStore:
    """
    Read-only, indexed view over the loaded surahs.

    Surah numbers must run 1..n without gaps. Lookups never raise for
    unknown keys: they return None or an empty tuple and leave range
    checking to the caller.

    Example:
        store = CorpusStore(surahs)
        store.chapter_by_number(1)
        store.verses_by_page(604)
    """

    def __init__(self, surahs: Iterable[Surah]):
        self._surahs: tuple[Surah, ...] = tuple(surahs)
        _check_surah_numbers(self._surahs)

        self._ayahs: tuple[LocatedAyah, ...] = tuple(
            LocatedAyah(surah, ayah) for surah in self._surahs for ayah in surah.ayahs
        )
        self._juz_index = _build_slice_index(self._ayahs, "juz")
        self._page_index = _build_slice_index(self._ayahs, "page")

        logger.debug(
            "Corpus indexed: %d surahs, %d ayahs, %d juz, %d pages",
            len(self._surahs), len(self._ayahs),
            len(self._juz_index), len(self._page_index),
        )

    # ============ Direct lookups ============

    def chapter_by_number(self, number: int) -> Surah | None:
        """Return the surah with this number, or None if it is not loaded."""
        if 1 <= number <= len(self._surahs):
            return self._surahs[number - 1]
        return None

    def verse_by_chapter_and_number(self, surah_number: int, ayah_number: int) -> Ayah | None:
        """Return the ayah, or None if the surah is not loaded or lacks it."""
        surah = self.chapter_by_number(surah_number)
        if surah is None:
            return None
        return surah.ayah(ayah_number)

    def verses_by_division(self, juz: int) -> tuple[LocatedAyah, ...]:
        """All ayahs of a juz in canonical order; empty if none match."""
        return self._slice(self._juz_index, juz)

    def verses_by_page(self, page: int) -> tuple[LocatedAyah, ...]:
        """All ayahs on a page in canonical order; empty if none match."""
        return self._slice(self._page_index, page)

    # ============ Collection protocol ============

    @property
    def chapters(self) -> tuple[Surah, ...]:
        return self._surahs

    @property
    def verse_count(self) -> int:
        return len(self._ayahs)

    def __len__(self) -> int:
        return len(self._surahs)

    def __iter__(self) -> Iterator[LocatedAyah]:
        return iter(self._ayahs)

    def __repr__(self) -> str:
        return f"CorpusStore(surahs={len(self._surahs)}, ayahs={len(self._ayahs)})"

    def _slice(self, index: dict[int, tuple[int, int]], key: int) -> tuple[LocatedAyah, ...]:
        bounds = index.get(key)
        if bounds is None:
            return ()
        start, stop = bounds
        return self._ayahs[start:stop]


def _check_surah_numbers(surahs: tuple[Surah, ...]) -> None:
    if not surahs:
        raise CorpusLoadError("Corpus contains no surahs")
    for expected, surah in enumerate(surahs, start=1):
        if surah.number != expected:
            raise CorpusLoadError(
                f"Surah numbers must be contiguous from 1: expected {expected}, got {surah.number}"
            )


def _build_slice_index(
    ayahs: tuple[LocatedAyah, ...], attribute: str
) -> dict[int, tuple[int, int]]:
    """
    Map each value of ``attribute`` to the [start, stop) slice holding it.

    Raises CorpusLoadError if the value ever decreases along the corpus.
    """
    index: dict[int, tuple[int, int]] = {}
    previous: int | None = None
    for position, located in enumerate(ayahs):
        value = getattr(located.ayah, attribute)
        if previous is not None and value < previous:
            raise CorpusLoadError(
                f"{attribute} decreases from {previous} to {value} at "
                f"{located.surah.number}:{located.ayah.number}"
            )
        if value == previous:
            start, _ = index[value]
            index[value] = (start, position + 1)
        else:
            index[value] = (position, position + 1)
        previous = value
    return index
