"""
Tests for the in-process entity store
"""
import pytest

from office_admin_api.app.core.store import AssociationTable, Store, Table


@pytest.mark.unit
class TestTable:
    """Tests for id-keyed tables"""

    def test_insert_assigns_increasing_ids(self):
        table = Table("clients")
        first = table.insert({"name": "A"})
        second = table.insert({"name": "B"})
        assert first == {"name": "A", "id": 1}
        assert second["id"] == 2

    def test_insert_ignores_client_supplied_id(self):
        table = Table("clients")
        record = table.insert({"id": 42, "name": "A"})
        assert record["id"] == 1
        assert table.get(42) is None

    def test_ids_are_not_reused_after_delete(self):
        table = Table("clients")
        table.insert({"name": "A"})
        table.delete(1)
        assert table.insert({"name": "B"})["id"] == 2

    def test_get_missing_returns_none(self):
        assert Table("clients").get(1) is None

    def test_all_keeps_insertion_order(self):
        table = Table("clients")
        for name in ("C", "A", "B"):
            table.insert({"name": name})
        assert [r["name"] for r in table.all()] == ["C", "A", "B"]

    def test_update_merges_fields(self):
        table = Table("clients")
        table.insert({"name": "A", "phone": "1"})
        updated = table.update(1, {"phone": "2"})
        assert updated == {"name": "A", "phone": "2", "id": 1}
        assert table.get(1)["phone"] == "2"

    def test_update_cannot_change_id(self):
        table = Table("clients")
        table.insert({"name": "A"})
        assert table.update(1, {"id": 9})["id"] == 1

    def test_update_missing_does_not_insert(self):
        table = Table("clients")
        assert table.update(5, {"name": "X"}) is None
        assert len(table) == 0

    def test_delete_twice(self):
        table = Table("clients")
        table.insert({"name": "A"})
        assert table.delete(1) is True
        assert table.delete(1) is False

    def test_returned_records_are_copies(self):
        table = Table("clients")
        record = table.insert({"name": "A", "tags": ["x"]})
        record["name"] = "changed"
        table.get(1)["tags"].append("y")
        assert table.get(1) == {"name": "A", "tags": ["x"], "id": 1}

    def test_filter_by_equality(self):
        table = Table("projects")
        table.insert({"client_id": 1, "status": "Pending"})
        table.insert({"client_id": 2, "status": "Pending"})
        table.insert({"client_id": 1, "status": "Completed"})
        assert [r["id"] for r in table.filter(client_id=1)] == [1, 3]
        assert [r["id"] for r in table.filter(client_id=1, status="Pending")] == [1]
        assert table.filter(status="In Progress") == []


@pytest.mark.unit
class TestAssociationTable:
    """Tests for compound-key association tables"""

    def test_add_returns_named_record(self):
        links = AssociationTable("client_services", "client_id", "service_id")
        assert links.add(1, 2) == {"client_id": 1, "service_id": 2}

    def test_add_is_idempotent(self):
        links = AssociationTable("client_services", "client_id", "service_id")
        links.add(1, 2)
        links.add(1, 2)
        assert len(links) == 1
        assert links.all() == [{"client_id": 1, "service_id": 2}]

    def test_pairs_are_ordered(self):
        links = AssociationTable("client_services", "client_id", "service_id")
        links.add(1, 2)
        assert (1, 2) in links
        assert (2, 1) not in links

    def test_ids_do_not_collide_like_strings(self):
        links = AssociationTable("employee_clients", "employee_id", "client_id")
        links.add(1, 12)
        links.add(11, 2)
        assert links.rights_for(1) == [12]
        assert links.rights_for(11) == [2]

    def test_remove(self):
        links = AssociationTable("employee_clients", "employee_id", "client_id")
        links.add(1, 2)
        assert links.remove(1, 2) is True
        assert links.remove(1, 2) is False

    def test_lookups(self):
        links = AssociationTable("employee_clients", "employee_id", "client_id")
        links.add(1, 2)
        links.add(1, 3)
        links.add(4, 3)
        assert links.rights_for(1) == [2, 3]
        assert links.lefts_for(3) == [1, 4]
        assert links.for_left(4) == [{"employee_id": 4, "client_id": 3}]


@pytest.mark.unit
def test_stores_are_independent():
    first, second = Store(), Store()
    first.clients.insert({"name": "A"})
    assert len(second.clients) == 0
    assert second.clients.insert({"name": "B"})["id"] == 1
