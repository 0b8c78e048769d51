# /tests/test_routers.py

"""
End-to-end tests through the FastAPI app: status codes and the
`{success, data, message, error, pagination}` envelope.
"""

import pytest

from app.routers import responses
from app.services import student_service
from app.services.errors import StoreError

ANN = {"first_name": "Ann", "last_name": "Lee", "email": "ann@x.com"}


def test_root_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "Student Management API is running"


def test_create_student_envelope(client):
    response = client.post("/api/students", json=ANN)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Student created successfully"
    assert body["data"]["id"] == 1
    assert body["data"]["phone"] is None
    assert "pagination" not in body
    assert "error" not in body


def test_create_student_missing_fields_is_400(client):
    response = client.post("/api/students", json={"first_name": "Ann"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "First name, last name, and email are required"}


def test_create_student_duplicate_email_is_409(client):
    client.post("/api/students", json=ANN)
    response = client.post("/api/students", json={**ANN, "first_name": "Annie"})
    assert response.status_code == 409
    assert response.json()["message"] == "Email already exists"


def test_blank_date_of_birth_from_form_is_accepted(client):
    response = client.post("/api/students", json={**ANN, "phone": "", "date_of_birth": ""})
    assert response.status_code == 201
    assert response.json()["data"]["date_of_birth"] is None


def test_list_students_with_pagination(client):
    for i in range(3):
        client.post("/api/students", json={**ANN, "email": f"ann{i}@x.com"})

    response = client.get("/api/students", params={"page": 2, "limit": 2})
    assert response.status_code == 200
    body = response.json()
    assert [s["email"] for s in body["data"]] == ["ann2@x.com"]
    assert body["pagination"] == {"currentPage": 2, "totalPages": 2, "totalCount": 3, "limit": 2}


def test_list_students_non_numeric_query_uses_defaults(client):
    response = client.get("/api/students?page=abc&limit=")
    assert response.status_code == 200
    assert response.json()["pagination"]["currentPage"] == 1
    assert response.json()["pagination"]["limit"] == 10


def test_list_students_with_huge_page_or_limit(client):
    client.post("/api/students", json=ANN)

    response = client.get("/api/students?page=99999999999999999999")
    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["pagination"]["currentPage"] == 99999999999999999999

    response = client.get("/api/students?limit=99999999999999999999")
    assert response.status_code == 200
    assert len(response.json()["data"]) == 1
    assert response.json()["pagination"]["totalPages"] == 1
    assert response.json()["pagination"]["limit"] == 99999999999999999999


def test_get_missing_student_is_404(client):
    response = client.get("/api/students/999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Student not found"}


def test_non_numeric_id_is_400(client):
    response = client.get("/api/students/abc")
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_partial_update_via_put(client):
    client.post("/api/students", json={**ANN, "phone": "555-0100"})
    response = client.put("/api/students/1", json={"phone": "555-0199"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone"] == "555-0199"
    assert data["email"] == "ann@x.com"
    assert response.json()["message"] == "Student updated successfully"


def test_subject_endpoints(client):
    assert client.post("/api/subjects", json={"name": "Math", "code": "MTH1"}).status_code == 201
    assert client.post("/api/subjects", json={"name": "Art", "code": "ART1"}).status_code == 201
    assert client.post("/api/subjects", json={"name": "Dup", "code": "MTH1"}).status_code == 409
    assert client.post("/api/subjects", json={"name": "No code"}).status_code == 400

    listing = client.get("/api/subjects").json()
    assert [s["name"] for s in listing["data"]] == ["Art", "Math"]
    assert client.get("/api/subjects/1").json()["data"]["code"] == "MTH1"
    assert client.get("/api/subjects/50").status_code == 404


def test_non_numeric_score_is_400(client):
    response = client.post("/api/marks", json={"student_id": 1, "subject_id": 1, "score": "lots"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


def test_mark_update_and_delete(client):
    client.post("/api/students", json=ANN)
    client.post("/api/subjects", json={"name": "Math", "code": "MTH1"})
    client.post("/api/marks", json={"student_id": 1, "subject_id": 1, "score": 50, "exam_date": "2025-06-01"})

    response = client.put("/api/marks/1", json={"score": 65})
    assert response.status_code == 200
    assert response.json()["data"]["score"] == 65
    assert response.json()["data"]["exam_date"] == "2025-06-01"

    assert client.delete("/api/marks/1").json() == {"success": True, "message": "Mark deleted successfully"}
    assert client.delete("/api/marks/1").status_code == 404
    assert client.put("/api/marks/1", json={"score": 1}).status_code == 404


def test_student_mark_lifecycle_scenario(client):
    """
    Ann Lee gets a Math mark, a duplicate mark is refused, and deleting Ann
    takes her marks with her.
    """
    student = client.post("/api/students", json=ANN).json()["data"]
    subject = client.post("/api/subjects", json={"name": "Math", "code": "MTH1"}).json()["data"]
    assert student["id"] == 1 and subject["id"] == 1

    mark = {"student_id": 1, "subject_id": 1, "score": 88}
    created = client.post("/api/marks", json=mark)
    assert created.status_code == 201
    assert created.json()["message"] == "Mark added successfully"
    assert client.post("/api/marks", json=mark).status_code == 409

    details = client.get("/api/students/1").json()["data"]
    assert details["marks"][0]["subject_name"] == "Math"
    assert details["marks"][0]["subject_code"] == "MTH1"
    assert client.get("/api/marks/student/1").json()["data"][0]["score"] == 88

    deleted = client.delete("/api/students/1")
    assert deleted.json() == {"success": True, "message": "Student deleted successfully"}

    response = client.get("/api/marks/student/1")
    assert response.status_code == 404
    assert response.json()["message"] == "Student not found"


def test_mark_for_missing_student_is_404(client):
    client.post("/api/subjects", json={"name": "Math", "code": "MTH1"})
    response = client.post("/api/marks", json={"student_id": 3, "subject_id": 1, "score": 70})
    assert response.status_code == 404
    assert response.json()["message"] == "Student not found"


# --- Unexpected failures ---

@pytest.mark.parametrize("development, expect_detail", [(True, True), (False, False)])
def test_unexpected_error_is_500_with_operation_name(client, monkeypatch, development, expect_detail):
    def boom(**kwargs):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(student_service, "list_students", boom)
    monkeypatch.setattr(responses, "is_development", lambda: development)

    response = client.get("/api/students")
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Failed to get students"
    assert ("error" in body) is expect_detail
    if expect_detail:
        assert body["error"] == "connection reset"


def test_store_error_is_reported_as_failure(client, monkeypatch):
    def broken_store(**kwargs):
        raise StoreError("disk I/O error")

    monkeypatch.setattr(student_service, "create_student", broken_store)
    response = client.post("/api/students", json=ANN)
    assert response.status_code == 500
    assert response.json()["message"] == "Failed to create student"
