"""
Application package initializer.

The project is organised by concern: ``core`` holds configuration,
logging, the entity store, security and upload helpers; ``schemas`` the
request and response models; ``services`` the business logic per
domain; and ``api`` the versioned routers that expose it.
"""

from .main import app  # noqa: F401
