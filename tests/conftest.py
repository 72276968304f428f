"""
Pytest configuration and shared fixtures
"""
import base64

import pytest
from fastapi.testclient import TestClient

from office_admin_api.app.core.config import Settings
from office_admin_api.app.core.store import Store
from office_admin_api.app.main import create_app


def data_uri(content: bytes, mime: str = "application/pdf") -> str:
    """Encode bytes the way the dashboard embeds files in JSON bodies"""
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


@pytest.fixture
def make_data_uri():
    return data_uri


@pytest.fixture
def app_settings(tmp_path):
    """Fixture providing settings with uploads in a temporary directory"""
    return Settings(
        secret_key="test-secret-key-minimum-32-chars-long",
        uploads_dir=str(tmp_path / "uploads"),
        seed_data=True,
    )


@pytest.fixture
def app(app_settings):
    """Fresh application, and therefore a fresh store, per test"""
    return create_app(app_settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def empty_store():
    """Store without seed data, for service-level tests"""
    return Store()


@pytest.fixture
def anon_client(app):
    """Client without a session; server errors come back as 500 responses"""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def client(app):
    """Client logged in as the seeded admin user (session cookie)"""
    test_client = TestClient(app, raise_server_exceptions=False)
    response = test_client.post("/api/login", json={"username": "admin", "password": "password"})
    assert response.status_code == 200
    return test_client


@pytest.fixture
def sample_client_data():
    return {
        "name": "Acme Co",
        "phone": "+1 555 0100",
        "address": "1 Main Street",
        "clientType": "Company",
    }


@pytest.fixture
def sample_service_data():
    return {
        "name": "Window cleaning",
        "description": "Inside and outside",
        "frequency": "Monthly",
        "basePrice": 120.0,
    }


@pytest.fixture
def sample_project_data():
    return {
        "clientId": 1,
        "name": "Spring clean-up",
        "dateRequested": "2024-03-01",
        "description": "Full office clean",
        "cost": 300.0,
        "price": 500.0,
        "duration": "2 days",
    }


@pytest.fixture
def sample_contact_data():
    return {
        "contactName": "Jane Roe",
        "phoneEmail": "jane@example.com",
        "contactedDate": "2024-02-10",
        "contactMethod": "Email",
        "responseType": "Positive",
        "notes": "Interested in a monthly plan",
    }


@pytest.fixture
def sample_followup_data():
    return {
        "taskDescription": "Call back about the quote",
        "clientId": 1,
        "assignedEmployeeId": 1,
        "dueDate": "2024-04-01",
    }


@pytest.fixture
def sample_employee_data():
    return {
        "name": "Mary Major",
        "email": "mary@example.com",
        "role": "Sales",
    }
