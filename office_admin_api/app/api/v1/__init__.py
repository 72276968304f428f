"""
Version 1 of the API.

Exports the aggregated ``router`` that includes every domain router
under its prefix.
"""

from .router import router  # noqa: F401
