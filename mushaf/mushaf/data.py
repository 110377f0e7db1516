"""
Corpus loading.

Reads the JSON source document once at startup and turns it into a
CorpusStore. Any problem with the document is reported as CorpusLoadError:
missing file, invalid JSON, a shape the models reject, a wrong surah count,
gaps in surah or ayah numbering, or page/juz numbers that go backwards.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from mushaf.core.corpus import CorpusStore
from mushaf.exceptions import CorpusLoadError
from mushaf.models import SURAH_COUNT, Surah

logger = logging.getLogger(__name__)


class CorpusDocument(BaseModel):
    """Top-level shape of the source document."""

    surahs: list[Surah]


def build_corpus(
    document: dict[str, Any],
    require_complete: bool = True,
    source: str | None = None,
) -> CorpusStore:
    """
    Validate a parsed source document and build a store from it.

    Args:
        document: Parsed JSON object with a "surahs" list
        require_complete: Require exactly 114 surahs
        source: Where the document came from, for error messages

    Returns:
        CorpusStore over the document's surahs

    Raises:
        CorpusLoadError: If the document violates the corpus invariants
    """
    try:
        parsed = CorpusDocument.model_validate(document)
    except ValidationError as e:
        raise CorpusLoadError(f"Malformed corpus document: {_first_error(e)}", source) from e

    if require_complete and len(parsed.surahs) != SURAH_COUNT:
        raise CorpusLoadError(
            f"Expected {SURAH_COUNT} surahs, found {len(parsed.surahs)}", source
        )

    try:
        return CorpusStore(parsed.surahs)
    except CorpusLoadError as e:
        raise CorpusLoadError(e.message, source) from e


def load_corpus(path: str | Path, require_complete: bool = True) -> CorpusStore:
    """
    Load the corpus from a JSON file.

    Args:
        path: Path of the source document
        require_complete: Require exactly 114 surahs

    Returns:
        CorpusStore ready for queries

    Raises:
        CorpusLoadError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise CorpusLoadError("Corpus file not found", str(path))

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusLoadError(f"Invalid JSON at line {e.lineno}: {e.msg}", str(path)) from e
    except UnicodeDecodeError as e:
        raise CorpusLoadError("Corpus file is not valid UTF-8", str(path)) from e
    except OSError as e:
        raise CorpusLoadError(f"Cannot read corpus file: {e.strerror}", str(path)) from e

    if not isinstance(document, dict):
        raise CorpusLoadError("Corpus document must be a JSON object", str(path))

    store = build_corpus(document, require_complete=require_complete, source=str(path))
    logger.info(
        "Corpus loaded from %s",
        path,
        extra={"surahs": len(store), "ayahs": store.verse_count, "source": str(path)},
    )
    return store


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"
