"""HTTP API for the resolution engine."""

from vidresolve.api.app import create_app

__all__ = ["create_app"]
