"""
Unit tests for data models.
"""

import pytest
from mushaf.models import Ayah, AyahView, Surah, SurahDetail, SurahSummary


def _ayahs(count: int) -> list[dict]:
    return [
        {"id": n, "number": n, "text": f"text {n}", "page": 1, "juz": 1}
        for n in range(1, count + 1)
    ]


class TestAyah:
    """Test Ayah model."""

    def test_ayah_creation(self):
        """Test creating an ayah."""
        ayah = Ayah(id=1, number=1, text="بِسْمِ اللَّهِ", page=1, juz=1)

        assert ayah.id == 1
        assert ayah.number == 1
        assert ayah.page == 1
        assert ayah.juz == 1
        assert "بِسْمِ" in ayah.text

    def test_id_is_optional(self):
        ayah = Ayah(number=3, text="text", page=2, juz=1)
        assert ayah.id is None

    @pytest.mark.parametrize("invalid_field,value", [
        ("number", 0),
        ("page", 0),
        ("page", 605),
        ("juz", 0),
        ("juz", 31),
    ])
    def test_ayah_validation(self, invalid_field, value):
        """Test ayah validation for out-of-bound values."""
        kwargs = {"id": 1, "number": 1, "text": "text", "page": 1, "juz": 1}
        kwargs[invalid_field] = value

        with pytest.raises(Exception):
            Ayah(**kwargs)

    def test_ayah_is_immutable(self):
        ayah = Ayah(number=1, text="text", page=1, juz=1)
        with pytest.raises(Exception):
            ayah.page = 2


class TestSurah:
    """Test Surah model."""

    def test_surah_creation(self):
        surah = Surah(number=1, name="الفاتحة", ayahs=_ayahs(7))

        assert surah.ayah_count == 7
        assert surah.ayah(1).number == 1
        assert surah.ayah(7).number == 7
        assert str(surah) == "Surah 1: الفاتحة"

    @pytest.mark.parametrize("number", [0, 8, -1])
    def test_ayah_lookup_out_of_range(self, number):
        surah = Surah(number=1, name="الفاتحة", ayahs=_ayahs(7))
        assert surah.ayah(number) is None

    @pytest.mark.parametrize("number", [0, 115])
    def test_surah_number_bounds(self, number):
        with pytest.raises(Exception):
            Surah(number=number, name="x", ayahs=_ayahs(1))

    def test_surah_needs_ayahs(self):
        with pytest.raises(Exception):
            Surah(number=1, name="x", ayahs=[])

    def test_ayah_numbers_must_start_at_one(self):
        ayahs = _ayahs(3)[1:]
        with pytest.raises(Exception, match="contiguous"):
            Surah(number=1, name="x", ayahs=ayahs)

    def test_ayah_numbers_must_not_skip(self):
        ayahs = _ayahs(4)
        del ayahs[2]
        with pytest.raises(Exception, match="contiguous"):
            Surah(number=1, name="x", ayahs=ayahs)


class TestProjections:
    """Test response projections."""

    def test_ayah_view_carries_surah_reference(self):
        surah = Surah(number=112, name="الإخلاص", ayahs=_ayahs(4))
        view = AyahView.of(surah.ayahs[1], surah)

        assert view.number == 2
        assert view.surah.number == 112
        assert view.surah.name == "الإخلاص"

    def test_summary_has_no_ayahs(self):
        surah = Surah(number=112, name="الإخلاص", ayahs=_ayahs(4))
        summary = SurahSummary.of(surah)

        assert summary.model_dump() == {"number": 112, "name": "الإخلاص", "ayah_count": 4}

    def test_detail_lists_every_ayah(self):
        surah = Surah(number=112, name="الإخلاص", ayahs=_ayahs(4))
        detail = SurahDetail.of(surah)

        assert detail.ayah_count == len(detail.ayahs) == 4
        assert [a.number for a in detail.ayahs] == [1, 2, 3, 4]
        assert all(a.surah.number == 112 for a in detail.ayahs)
