"""
Service layer abstraction.

Each service encapsulates the business logic of one domain and works on
the ``Store`` it is handed, so API handlers never touch the tables
directly and tests can drive the services against a fresh store.
Absence is reported with ``None``/``False``; rule violations such as a
duplicate unique key raise ``ValueError``.
"""
