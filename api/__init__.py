"""
Commerce API package.

Provides the FastAPI application, the response envelope and the
cross-cutting request machinery (auth, logging, decoding, pagination).
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
