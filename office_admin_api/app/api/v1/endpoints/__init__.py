"""
Domain-specific routers for API version 1.

Each module defines a ``router`` for one domain (clients, projects,
follow-ups, ...).  Every route except login and registration depends on
``get_current_user`` and answers 401 without a valid session.
"""
