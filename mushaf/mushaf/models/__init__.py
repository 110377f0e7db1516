"""
Pydantic data models for the Mushaf corpus.

These models represent the core data structures used throughout the package:
- Ayah: A single verse with its page and juz
- Surah: A chapter and its ordered ayahs
- Projections: response-ready views returned by the query resolver
"""

from mushaf.models.ayah import Ayah, JUZ_COUNT, PAGE_COUNT
from mushaf.models.surah import Surah, SURAH_COUNT
from mushaf.models.projection import (
    AyahView,
    JuzView,
    PageView,
    SurahDetail,
    SurahRef,
    SurahSummary,
)

__all__ = [
    "Ayah",
    "Surah",
    "AyahView",
    "SurahRef",
    "SurahSummary",
    "SurahDetail",
    "JuzView",
    "PageView",
    "SURAH_COUNT",
    "JUZ_COUNT",
    "PAGE_COUNT",
]
