"""
Response-ready projections of corpus entities.

These are what the query resolver hands back to callers. They carry no
behaviour and serialize the same way no matter which addressing scheme
produced them.
"""

from typing import Optional

from pydantic import BaseModel, Field

from mushaf.models.ayah import Ayah
from mushaf.models.surah import Surah


class SurahRef(BaseModel):
    """Back-reference from an ayah to its owning surah."""

    number: int
    name: str


class AyahView(BaseModel):
    """A single ayah annotated with the surah it belongs to."""

    id: Optional[int] = None
    number: int
    text: str
    page: int
    juz: int
    surah: SurahRef

    @classmethod
    def of(cls, ayah: Ayah, surah: Surah) -> "AyahView":
        return cls(
            id=ayah.id,
            number=ayah.number,
            text=ayah.text,
            page=ayah.page,
            juz=ayah.juz,
            surah=SurahRef(number=surah.number, name=surah.name),
        )


class SurahSummary(BaseModel):
    """Surah metadata without its ayahs."""

    number: int
    name: str
    ayah_count: int = Field(..., ge=1)

    @classmethod
    def of(cls, surah: Surah) -> "SurahSummary":
        return cls(number=surah.number, name=surah.name, ayah_count=surah.ayah_count)


class SurahDetail(SurahSummary):
    """Surah metadata plus every ayah, each with its surah back-reference."""

    ayahs: list[AyahView]

    @classmethod
    def of(cls, surah: Surah) -> "SurahDetail":
        return cls(
            number=surah.number,
            name=surah.name,
            ayah_count=surah.ayah_count,
            ayahs=[AyahView.of(ayah, surah) for ayah in surah.ayahs],
        )


class JuzView(BaseModel):
    """All ayahs of one juz in canonical order."""

    juz: int
    ayahs: list[AyahView]
    count: int


class PageView(BaseModel):
    """All ayahs printed on one mushaf page in canonical order."""

    page: int
    ayahs: list[AyahView]
    count: int
