"""
Surah (chapter) data model.
"""

from pydantic import BaseModel, Field, field_validator

from mushaf.models.ayah import Ayah

SURAH_COUNT = 114


class Surah(BaseModel):
    """
    Represents a Surah (chapter) of the Quran together with its ayahs.

    Attributes:
        number: Surah number (1-114)
        name: Display name of the surah
        ayahs: Ayahs in canonical recitation order, numbered 1..n without gaps
    """

    number: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=SURAH_COUNT,
    )
    name: str = Field(
        ...,
        description="Display name of the surah",
    )
    ayahs: tuple[Ayah, ...] = Field(
        ...,
        description="Ayahs of the surah in recitation order",
        min_length=1,
    )

    @field_validator("ayahs")
    @classmethod
    def ayahs_contiguous(cls, v: tuple[Ayah, ...]) -> tuple[Ayah, ...]:
        """Ensure ayah numbers run 1, 2, ..., n."""
        for expected, ayah in enumerate(v, start=1):
            if ayah.number != expected:
                raise ValueError(
                    f"ayah numbers must be contiguous from 1: "
                    f"expected {expected}, got {ayah.number}"
                )
        return v

    @property
    def ayah_count(self) -> int:
        """Number of ayahs in this surah."""
        return len(self.ayahs)

    def ayah(self, number: int) -> Ayah | None:
        """Return the ayah with the given number, or None."""
        if 1 <= number <= len(self.ayahs):
            return self.ayahs[number - 1]
        return None

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "number": 112,
                    "name": "الإخلاص",
                    "ayahs": [
                        {"id": 6222, "number": 1, "text": "...", "page": 604, "juz": 30}
                    ],
                }
            ]
        },
    }

    def __str__(self) -> str:
        return f"Surah {self.number}: {self.name}"

    def __repr__(self) -> str:
        return f"Surah(number={self.number}, name={self.name!r}, ayahs={len(self.ayahs)})"
