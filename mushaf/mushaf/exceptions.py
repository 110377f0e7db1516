"""
Exception hierarchy for Mushaf.

Every error carries a stable machine-readable ``code`` and can render itself
as a protocol-agnostic envelope via ``to_response()``. Mapping an error kind to
a transport status is the transport's job, not the core's.
"""

from typing import Any


class MushafError(Exception):
    """Base exception for all Mushaf errors."""

    code = "MUSHAF_ERROR"
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any]:
        """Diagnostic fields specific to the error kind."""
        return {}

    def to_response(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "kind": self.kind,
                "message": self.message,
                **self.details(),
            }
        }


class FormatError(MushafError):
    """A caller-supplied address does not parse into the expected shape."""

    code = "INVALID_FORMAT"
    kind = "format"

    def __init__(self, field: str, value: Any, expected: str):
        super().__init__(f"Invalid {field} {value!r}: expected {expected}")
        self.field = field
        self.value = value
        self.expected = expected

    def details(self) -> dict[str, Any]:
        return {"field": self.field, "value": str(self.value), "expected": self.expected}


class RangeError(MushafError):
    """A numeric address parsed but lies outside its valid bound."""

    code = "OUT_OF_RANGE"
    kind = "range"

    def __init__(self, field: str, value: int, lower: int, upper: int, scope: str = ""):
        suffix = f" for {scope}" if scope else ""
        super().__init__(
            f"{field.capitalize()} number must be between {lower} and {upper}{suffix}, got {value}"
        )
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper

    @property
    def bound(self) -> tuple[int, int]:
        return self.lower, self.upper

    def details(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "value": self.value,
            "bound": [self.lower, self.upper],
        }


class NotFoundError(MushafError):
    """A valid address has no corresponding entity in the loaded corpus."""

    code = "NOT_FOUND"
    kind = "not_found"

    def __init__(self, resource: str, identifier: Any):
        super().__init__(f"{resource.capitalize()} {identifier} not found")
        self.resource = resource
        self.identifier = identifier

    def details(self) -> dict[str, Any]:
        return {"resource": self.resource, "identifier": str(self.identifier)}


class CorpusLoadError(MushafError):
    """The corpus source is absent, malformed, or violates an invariant."""

    code = "CORPUS_LOAD_FAILED"
    kind = "corpus_load"

    def __init__(self, message: str, source: str | None = None):
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)
        self.source = source
