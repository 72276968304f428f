"""
Pydantic schema definitions for API payloads.

Each domain (clients, projects, follow-ups, etc.) defines its own
Pydantic models for request and response bodies.  Schemas are separated
from the store records to decouple API representation from storage;
all of them serialize with camelCase keys for the dashboard.
"""
