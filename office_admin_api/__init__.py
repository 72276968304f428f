"""
Top-level package for the Office Admin API.

All functionality lives in submodules under ``app``; importing
``office_admin_api.app.main`` gives access to the ASGI application.
"""

__all__ = []
