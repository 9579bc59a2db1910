"""FastAPI application for swarmresolver."""

from swarmresolver.api.app import create_app

__all__ = ["create_app"]
