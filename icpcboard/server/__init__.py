"""
HTTP API for icpcboard.

This package exposes a contest over JSON endpoints and provides a
standalone app factory.
"""

from .app import create_app
from .blueprint import register_api_blueprint

__all__ = ["create_app", "register_api_blueprint"]
