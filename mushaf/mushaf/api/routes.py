"""
HTTP routes for the Mushaf API.

Each route passes its raw path parameters to the QueryResolver and unwraps
the result. Failed results raise their MushafError, which the handlers in
mushaf.api.errors turn into status codes.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from mushaf import __version__
from mushaf.core import QueryResolver
from mushaf.models import AyahView, JuzView, PageView, SurahDetail, SurahSummary

router = APIRouter()

ENDPOINTS = {
    "surahs": "/surahs",
    "surah": "/surahs/{number}",
    "ayah": "/surahs/{number}/ayahs/{ayah_number}",
    "ayahById": "/ayahs/{surah:ayah}",
    "juz": "/juz/{number}",
    "page": "/pages/{number}",
}


def get_resolver(request: Request) -> QueryResolver:
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Corpus not loaded.")
    return resolver


@router.get("/")
async def index():
    return {
        "name": "Mushaf API",
        "version": __version__,
        "description": "A public Quran API with Arabic text and metadata",
        "endpoints": ENDPOINTS,
    }


@router.get("/health")
async def health_check(resolver: QueryResolver = Depends(get_resolver)):
    """Liveness probe with the size of the loaded corpus."""
    return {
        "status": "healthy",
        "surahs": len(resolver.store),
        "ayahs": resolver.store.verse_count,
    }


@router.get("/surahs", response_model=list[SurahSummary])
async def list_surahs(resolver: QueryResolver = Depends(get_resolver)):
    return resolver.list_surahs().unwrap()


@router.get("/surahs/{number}", response_model=SurahDetail)
async def get_surah(number: str, resolver: QueryResolver = Depends(get_resolver)):
    return resolver.get_surah(number, include_ayahs=True).unwrap()


@router.get("/surahs/{number}/ayahs/{ayah_number}", response_model=AyahView)
async def get_ayah(
    number: str,
    ayah_number: str,
    resolver: QueryResolver = Depends(get_resolver),
):
    return resolver.get_ayah(number, ayah_number).unwrap()


@router.get("/ayahs/{ayah_key}", response_model=AyahView)
async def get_ayah_by_key(ayah_key: str, resolver: QueryResolver = Depends(get_resolver)):
    return resolver.get_ayah_by_key(ayah_key).unwrap()


@router.get("/juz/{number}", response_model=JuzView)
async def get_juz(number: str, resolver: QueryResolver = Depends(get_resolver)):
    return resolver.get_juz(number).unwrap()


@router.get("/pages/{number}", response_model=PageView)
async def get_page(number: str, resolver: QueryResolver = Depends(get_resolver)):
    return resolver.get_page(number).unwrap()
