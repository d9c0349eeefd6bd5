"""Core package for the roster service.

Exposes the database :func:`get_session` helper so scripts can work with the
person table without going through the HTTP layer.
"""

from .db import get_session

__all__ = ["get_session"]
