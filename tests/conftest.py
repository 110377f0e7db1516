"""
Shared fixtures and test configuration for Mushaf tests.

The corpus used here is synthetic: real surah names and Hafs ayah counts
(6236 ayahs in total), with page and juz numbers spread evenly so that
every page 1-604 and every juz 1-30 is non-empty and never decreases.
"""

import json

import pytest

from mushaf.core import CorpusStore, QueryResolver
from mushaf.data import build_corpus
from mushaf.models import JUZ_COUNT, PAGE_COUNT

SURAH_NAMES = [
    "الفاتحة", "البقرة", "آل عمران", "النساء", "المائدة", "الأنعام", "الأعراف",
    "الأنفال", "التوبة", "يونس", "هود", "يوسف", "الرعد", "إبراهيم", "الحجر",
    "النحل", "الإسراء", "الكهف", "مريم", "طه", "الأنبياء", "الحج", "المؤمنون",
    "النور", "الفرقان", "الشعراء", "النمل", "القصص", "العنكبوت", "الروم", "لقمان",
    "السجدة", "الأحزاب", "سبأ", "فاطر", "يس", "الصافات", "ص", "الزمر", "غافر",
    "فصلت", "الشورى", "الزخرف", "الدخان", "الجاثية", "الأحقاف", "محمد", "الفتح",
    "الحجرات", "ق", "الذاريات", "الطور", "النجم", "القمر", "الرحمن", "الواقعة",
    "الحديد", "المجادلة", "الحشر", "الممتحنة", "الصف", "الجمعة", "المنافقون",
    "التغابن", "الطلاق", "التحريم", "الملك", "القلم", "الحاقة", "المعارج", "نوح",
    "الجن", "المزمل", "المدثر", "القيامة", "الإنسان", "المرسلات", "النبأ",
    "النازعات", "عبس", "التكوير", "الانفطار", "المطففين", "الانشقاق", "البروج",
    "الطارق", "الأعلى", "الغاشية", "الفجر", "البلد", "الشمس", "الليل", "الضحى",
    "الشرح", "التين", "العلق", "القدر", "البينة", "الزلزلة", "العاديات", "القارعة",
    "التكاثر", "العصر", "الهمزة", "الفيل", "قريش", "الماعون", "الكوثر", "الكافرون",
    "النصر", "المسد", "الإخلاص", "الفلق", "الناس",
]

# Hafs ayah counts, surah 1..114
AYAH_COUNTS = [
    7, 286, 200, 176, 120, 165, 206, 75, 129, 109, 123, 111, 43, 52, 99, 128,
    111, 110, 98, 135, 112, 78, 118, 64, 77, 227, 93, 88, 69, 60, 34, 30, 73,
    54, 45, 83, 182, 88, 75, 85, 54, 53, 89, 59, 37, 35, 38, 29, 18, 45, 60,
    49, 62, 55, 78, 96, 29, 22, 24, 13, 14, 11, 11, 18, 12, 12, 30, 52, 52, 44,
    28, 28, 20, 56, 40, 31, 50, 40, 46, 42, 29, 19, 36, 25, 22, 17, 19, 26, 30,
    20, 15, 21, 11, 8, 8, 19, 5, 8, 8, 11, 11, 8, 3, 9, 5, 4, 7, 3, 6, 3, 5, 4,
    5, 6,
]

TOTAL_AYAHS = 6236

OPENING_AYAH_TEXT = "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ"


def make_document(ayah_counts: list[int] = AYAH_COUNTS) -> dict:
    """Build a source document with evenly spread page and juz numbers."""
    total = sum(ayah_counts)
    surahs = []
    position = 0
    for number, count in enumerate(ayah_counts, start=1):
        ayahs = []
        for ayah_number in range(1, count + 1):
            ayahs.append({
                "id": position + 1,
                "number": ayah_number,
                "text": f"نص {number}:{ayah_number}",
                "page": position * PAGE_COUNT // total + 1,
                "juz": position * JUZ_COUNT // total + 1,
            })
            position += 1
        surahs.append({"number": number, "name": SURAH_NAMES[number - 1], "ayahs": ayahs})
    surahs[0]["ayahs"][0]["text"] = OPENING_AYAH_TEXT
    return {"surahs": surahs}


@pytest.fixture
def corpus_document():
    """A fresh, complete source document (safe to mutate)."""
    return make_document()


@pytest.fixture(scope="session")
def corpus_store() -> CorpusStore:
    """Complete 114-surah corpus store."""
    return build_corpus(make_document())


@pytest.fixture(scope="session")
def resolver(corpus_store) -> QueryResolver:
    return QueryResolver(corpus_store)


@pytest.fixture
def partial_store() -> CorpusStore:
    """Store holding only the first three surahs (no completeness check)."""
    return build_corpus(make_document(AYAH_COUNTS[:3]), require_complete=False)


@pytest.fixture
def corpus_file(tmp_path, corpus_document):
    """The complete document written to a JSON file."""
    path = tmp_path / "quran_v2.json"
    path.write_text(json.dumps(corpus_document, ensure_ascii=False), encoding="utf-8")
    return path
