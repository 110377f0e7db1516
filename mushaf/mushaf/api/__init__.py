"""HTTP transport for the Mushaf query layer."""

from mushaf.api.app import create_app

__all__ = ["create_app"]
