"""
Core infrastructure shared by every domain: settings, logging, the
in-process store, authentication and file uploads.
"""
