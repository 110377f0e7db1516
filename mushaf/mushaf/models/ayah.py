"""
Ayah (verse) data model.
"""

from typing import Optional

from pydantic import BaseModel, Field

JUZ_COUNT = 30
PAGE_COUNT = 604


class Ayah(BaseModel):
    """
    Represents a single ayah (verse) from the Quran.

    Attributes:
        id: Global identifier of the ayah across the corpus (optional)
        number: Ayah number within its surah (1-based)
        text: The Arabic text of the ayah
        page: Print page of the mushaf the ayah starts on (1-604)
        juz: Juz (recitation division) the ayah belongs to (1-30)
    """

    id: Optional[int] = Field(
        default=None,
        description="Global identifier of the ayah (1-6236)",
        ge=1,
    )
    number: int = Field(
        ...,
        description="Ayah number within the surah (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="The Arabic text of the ayah",
    )
    page: int = Field(
        ...,
        description="Mushaf page number (1-604)",
        ge=1,
        le=PAGE_COUNT,
    )
    juz: int = Field(
        ...,
        description="Juz number (1-30)",
        ge=1,
        le=JUZ_COUNT,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "number": 1,
                    "text": "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
                    "page": 1,
                    "juz": 1,
                }
            ]
        },
    }

    def __str__(self) -> str:
        return f"Ayah({self.number}, page={self.page}, juz={self.juz})"
