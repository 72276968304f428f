"""
In-process entity store.

This module replaces a database with plain dictionaries.  Each entity
type lives in a ``Table`` keyed by an auto-incrementing integer id and
each many-to-many relationship in an ``AssociationTable`` keyed by an
``(left_id, right_id)`` tuple.  Nothing is persisted across restarts.

A ``Store`` is built once by ``create_app`` and attached to
``app.state``; route handlers receive it through the ``get_store``
dependency.  Tests get isolation simply by building a fresh application
(and therefore a fresh store) per test.

All operations are synchronous dictionary operations which complete in a
single scheduling turn of the event loop, so no locking is performed.
Foreign ids are never checked here and deletes never cascade.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterator, List, Optional, Tuple

from fastapi import Request


Record = Dict[str, Any]


class Table:
    """Records of one entity type keyed by an auto-incrementing id."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._rows: Dict[int, Record] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.all())

    def insert(self, values: Record) -> Record:
        """Store ``values`` under the next id and return the new record.

        Any ``id`` key in ``values`` is overwritten: ids are only ever
        assigned by the table.
        """
        record_id = self._next_id
        self._next_id += 1
        record = dict(values)
        record["id"] = record_id
        self._rows[record_id] = record
        return copy.deepcopy(record)

    def get(self, record_id: int) -> Optional[Record]:
        record = self._rows.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def all(self) -> List[Record]:
        """Return every record in insertion order."""
        return [copy.deepcopy(record) for record in self._rows.values()]

    def update(self, record_id: int, changes: Record) -> Optional[Record]:
        """Merge ``changes`` into an existing record.

        Returns the updated record, or ``None`` when there is no record
        with that id (nothing is inserted in that case).
        """
        record = self._rows.get(record_id)
        if record is None:
            return None
        merged = {**record, **changes, "id": record_id}
        self._rows[record_id] = merged
        return copy.deepcopy(merged)

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def filter(self, **criteria: Any) -> List[Record]:
        """Linear scan returning records whose fields equal ``criteria``."""
        return [
            copy.deepcopy(record)
            for record in self._rows.values()
            if all(record.get(field) == value for field, value in criteria.items())
        ]

    def find_one(self, **criteria: Any) -> Optional[Record]:
        matches = self.filter(**criteria)
        return matches[0] if matches else None


class AssociationTable:
    """Many-to-many links keyed by an ``(left_id, right_id)`` tuple.

    ``left`` and ``right`` name the two id fields of each association
    record, e.g. ``client_id`` and ``service_id``.  Adding an existing
    pair overwrites it, so an association is stored at most once.
    """

    def __init__(self, name: str, left: str, right: str) -> None:
        self.name = name
        self.left = left
        self.right = right
        self._pairs: Dict[Tuple[int, int], Record] = {}

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: Tuple[int, int]) -> bool:
        return pair in self._pairs

    def add(self, left_id: int, right_id: int) -> Record:
        record = {self.left: left_id, self.right: right_id}
        self._pairs[(left_id, right_id)] = record
        return dict(record)

    def remove(self, left_id: int, right_id: int) -> bool:
        return self._pairs.pop((left_id, right_id), None) is not None

    def all(self) -> List[Record]:
        return [dict(record) for record in self._pairs.values()]

    def for_left(self, left_id: int) -> List[Record]:
        return [dict(record) for (left, _), record in self._pairs.items() if left == left_id]

    def rights_for(self, left_id: int) -> List[int]:
        return [right for (left, right) in self._pairs if left == left_id]

    def lefts_for(self, right_id: int) -> List[int]:
        return [left for (left, right) in self._pairs if right == right_id]


class Store:
    """All entity tables of one application instance."""

    def __init__(self) -> None:
        self.users = Table("users")
        self.clients = Table("clients")
        self.services = Table("services")
        self.projects = Table("projects")
        self.documents = Table("project_documents")
        self.contacts = Table("new_client_contacts")
        self.followups = Table("follow_ups")
        self.employees = Table("employees")

        self.client_services = AssociationTable("client_services", "client_id", "service_id")
        self.employee_clients = AssociationTable("employee_clients", "employee_id", "client_id")

        # Active login sessions: session id -> user id.
        self.sessions: Dict[str, int] = {}


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the store of the running application."""
    return request.app.state.store
