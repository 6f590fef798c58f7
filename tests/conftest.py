import pytest
from fastapi.testclient import TestClient

from eduassess.core.config import Settings
from eduassess.main import create_app

# Test database (in-memory SQLite, one shared connection)
TEST_DATABASE_URL = "sqlite:///:memory:"

EXAMPLE_CORRECT = [1, 0, 2, 3]


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        SECRET_KEY="test-secret-key",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client):
    db = client.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def register(client, username, email, role="student", password="secret123"):
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password, "role": role},
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    body = register(client, "Admin", "admin@school.edu", role="admin")
    return bearer(body["token"])


@pytest.fixture
def student(client):
    return register(client, "Student", "student@school.edu")


@pytest.fixture
def student_headers(student):
    return bearer(student["token"])


def question(correct, text="Question"):
    return {
        "questionText": text,
        "options": ["A", "B", "C", "D"],
        "correctAnswer": correct,
    }


def assessment_payload(
    correct=EXAMPLE_CORRECT,
    level="beginner",
    field="Computer Science",
    title="CS Basics",
    duration=30,
):
    return {
        "title": title,
        "engineeringField": field,
        "level": level,
        "duration": duration,
        "questions": [question(c, f"Q{i + 1}") for i, c in enumerate(correct)],
    }


@pytest.fixture
def create_assessment(client, admin_headers):
    def _create(**kwargs):
        response = client.post(
            "/api/dashboard/assessments",
            json=assessment_payload(**kwargs),
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def submit(client):
    def _submit(assessment_id, answers, headers, time_spent=120, is_auto_submit=False):
        response = client.post(
            f"/api/student/assessments/{assessment_id}/submit",
            json={
                "answers": {str(k): v for k, v in answers.items()},
                "timeSpent": time_spent,
                "isAutoSubmit": is_auto_submit,
            },
            headers=headers,
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _submit
