"""
Tests for lead contacts and follow-up tasks
"""
import pytest


@pytest.mark.api
class TestContactEndpoints:
    """Tests for /api/contacts"""

    def test_create_defaults(self, client, sample_contact_data):
        response = client.post("/api/contacts", json=sample_contact_data)
        assert response.status_code == 201
        contact = response.json()
        assert contact["convertedToClient"] is False
        assert contact["convertedClientId"] is None
        assert contact["contactMethod"] == "Email"

    def test_unknown_method_rejected(self, client, sample_contact_data):
        response = client.post("/api/contacts", json={**sample_contact_data, "contactMethod": "Fax"})
        assert response.status_code == 400

    def test_update_and_delete(self, client, sample_contact_data):
        client.post("/api/contacts", json=sample_contact_data)
        response = client.put("/api/contacts/1", json={"responseType": "No Response"})
        assert response.json()["responseType"] == "No Response"
        assert response.json()["notes"] == "Interested in a monthly plan"
        assert client.delete("/api/contacts/1").status_code == 204
        assert client.get("/api/contacts/1").status_code == 404

    def test_convert(self, client, sample_contact_data, sample_client_data):
        client.post("/api/contacts", json=sample_contact_data)
        client.post("/api/clients", json=sample_client_data)
        response = client.post("/api/contacts/1/convert", json={"clientId": 1})
        assert response.status_code == 200
        assert response.json() == {"success": True}
        contact = client.get("/api/contacts/1").json()
        assert contact["convertedToClient"] is True
        assert contact["convertedClientId"] == 1

    def test_convert_does_not_check_client(self, client, sample_contact_data):
        client.post("/api/contacts", json=sample_contact_data)
        response = client.post("/api/contacts/1/convert", json={"clientId": 77})
        assert response.status_code == 200
        assert client.get("/api/contacts/1").json()["convertedClientId"] == 77

    def test_convert_requires_client_id(self, client, sample_contact_data):
        client.post("/api/contacts", json=sample_contact_data)
        assert client.post("/api/contacts/1/convert", json={}).status_code == 400
        assert client.post("/api/contacts/1/convert", json={"clientId": 0}).status_code == 400
        assert client.get("/api/contacts/1").json()["convertedToClient"] is False

    def test_convert_missing_contact(self, client):
        assert client.post("/api/contacts/5/convert", json={"clientId": 1}).status_code == 404


@pytest.mark.api
class TestFollowUpEndpoints:
    """Tests for /api/followups"""

    def test_creator_defaults_to_logged_in_user(self, client, sample_followup_data):
        response = client.post("/api/followups", json=sample_followup_data)
        assert response.status_code == 201
        followup = response.json()
        assert followup["createdById"] == 1
        assert followup["status"] == "Pending"
        assert followup["relatedProjectId"] is None

    def test_explicit_creator_kept(self, client, sample_followup_data):
        response = client.post("/api/followups", json={**sample_followup_data, "createdById": 5})
        assert response.json()["createdById"] == 5

    def test_required_fields(self, client):
        response = client.post("/api/followups", json={"taskDescription": "Call"})
        fields = {error["field"] for error in response.json()["errors"]}
        assert response.status_code == 400
        assert fields == {"body.assignedEmployeeId", "body.dueDate"}

    def test_filters(self, client, sample_followup_data):
        client.post("/api/followups", json=sample_followup_data)
        client.post("/api/followups", json={**sample_followup_data, "clientId": 2, "status": "Done"})
        client.post("/api/followups", json={**sample_followup_data, "clientId": 2, "assignedEmployeeId": 3})

        def ids(**params):
            return [f["id"] for f in client.get("/api/followups", params=params).json()]

        assert ids() == [1, 2, 3]
        assert ids(status="Pending") == [1, 3]
        assert ids(clientId=2) == [2, 3]
        assert ids(employeeId=3) == [3]
        assert ids(status="Done", clientId=1) == [2]

    def test_mark_done(self, client, sample_followup_data):
        client.post("/api/followups", json=sample_followup_data)
        response = client.put("/api/followups/1", json={"status": "Done"})
        assert response.status_code == 200
        assert response.json()["status"] == "Done"
        assert client.put("/api/followups/1", json={"dueDate": None}).status_code == 400

    def test_missing_followup(self, client):
        assert client.get("/api/followups/1").status_code == 404
        assert client.put("/api/followups/1", json={"status": "Done"}).status_code == 404
        assert client.delete("/api/followups/1").status_code == 404


@pytest.mark.api
class TestEmployeeEndpoints:
    """Tests for /api/employees"""

    def test_seeded_manager(self, client):
        employees = client.get("/api/employees").json()
        assert employees == [
            {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Manager", "activeStatus": True}
        ]

    def test_role_filter(self, client, sample_employee_data):
        client.post("/api/employees", json=sample_employee_data)
        sales = client.get("/api/employees", params={"role": "Sales"}).json()
        assert [e["name"] for e in sales] == ["Mary Major"]
        assert client.get("/api/employees", params={"role": "Technician"}).json() == []

    def test_duplicate_email(self, client, sample_employee_data):
        assert client.post("/api/employees", json=sample_employee_data).status_code == 201
        duplicate = {**sample_employee_data, "email": "Mary@Example.com"}
        response = client.post("/api/employees", json=duplicate)
        assert response.status_code == 400
        assert len(client.get("/api/employees").json()) == 2

    def test_update_to_taken_email(self, client, sample_employee_data):
        client.post("/api/employees", json=sample_employee_data)
        response = client.put("/api/employees/2", json={"email": "john@example.com"})
        assert response.status_code == 400
        assert client.get("/api/employees/2").json()["email"] == "mary@example.com"

    def test_invalid_email(self, client, sample_employee_data):
        response = client.post("/api/employees", json={**sample_employee_data, "email": "mary"})
        assert response.status_code == 400

    def test_deactivate(self, client):
        response = client.put("/api/employees/1", json={"activeStatus": False})
        assert response.json()["activeStatus"] is False

    def test_client_assignments(self, client, sample_client_data):
        client.post("/api/clients", json=sample_client_data)
        first = client.post("/api/employees/1/clients/1")
        assert first.status_code == 201
        assert first.json() == {"employeeId": 1, "clientId": 1}
        assert client.post("/api/employees/1/clients/1").status_code == 201
        assigned = client.get("/api/employees/1/clients").json()
        assert [c["name"] for c in assigned] == ["Acme Co"]
        assert client.delete("/api/employees/1/clients/1").status_code == 204
        assert client.delete("/api/employees/1/clients/1").status_code == 404
        assert client.get("/api/employees/1/clients").json() == []

    def test_assign_unknown_records(self, client, sample_client_data):
        client.post("/api/clients", json=sample_client_data)
        assert client.post("/api/employees/9/clients/1").status_code == 404
        assert client.post("/api/employees/1/clients/9").status_code == 404
