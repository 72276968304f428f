"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  When a new domain is added,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    analytics,
    auth,
    clients,
    contacts,
    documents,
    employees,
    followups,
    projects,
    services,
)

router = APIRouter()

# Login, logout, registration and the current-user lookup live at the
# API root (``/api/login``...), so the auth router takes no prefix.
router.include_router(auth.router, tags=["auth"])
router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
# Document routes span ``/projects/{id}/documents`` and ``/documents/{id}``.
router.include_router(documents.router, tags=["documents"])
router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
router.include_router(followups.router, prefix="/followups", tags=["followups"])
router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
