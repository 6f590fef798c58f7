from eduassess.models.submission import Submission

from tests.conftest import EXAMPLE_CORRECT, assessment_payload, question

ALL_CORRECT = dict(enumerate(EXAMPLE_CORRECT))


# --------- Reporting ---------

def test_overview_with_no_submissions(client, admin_headers, create_assessment):
    assessment = create_assessment()

    response = client.get("/api/dashboard/overview", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["totalSubmissions"] == 0
    assert body["averageScore"] == 0
    assert body["highestScore"] == 0
    assert body["lowestScore"] == 0
    assert body["assessmentStats"] == [
        {
            "id": assessment["id"],
            "title": "CS Basics",
            "submissions": 0,
            "averageScore": None,
            "passRate": 0,
        }
    ]


def test_overview_aggregates_per_assessment(
    client, admin_headers, create_assessment, submit, student_headers
):
    easy = create_assessment(title="Easy")
    hard = create_assessment(title="Hard")
    submit(easy["id"], ALL_CORRECT, student_headers)  # 100
    submit(easy["id"], {0: 1, 1: 0, 2: 2}, student_headers)  # 75
    submit(easy["id"], {0: 1}, student_headers)  # 25
    submit(hard["id"], {0: 1, 1: 0}, student_headers)  # 50

    body = client.get("/api/dashboard/overview", headers=admin_headers).json()

    assert body["totalSubmissions"] == 4
    assert body["averageScore"] == 63  # 62.5 rounds up
    assert body["highestScore"] == 100
    assert body["lowestScore"] == 25
    stats = {s["title"]: s for s in body["assessmentStats"]}
    assert stats["Easy"]["submissions"] == 3
    assert stats["Easy"]["averageScore"] == 67
    assert stats["Easy"]["passRate"] == 67
    assert stats["Hard"]["submissions"] == 1
    assert stats["Hard"]["averageScore"] == 50
    assert stats["Hard"]["passRate"] == 0


def test_platform_stats(client, admin_headers, create_assessment, submit, student_headers):
    assessment = create_assessment()
    submit(assessment["id"], ALL_CORRECT, student_headers)
    submit(assessment["id"], {}, student_headers)

    response = client.get("/api/dashboard/stats", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["totalStudents"] == 1
    assert body["activeCourses"] == 2  # seeded categories
    assert body["completionRate"] == "50%"
    # the student submitted just now
    assert body["activeUsers"] == 1


def test_platform_stats_without_submissions(client, admin_headers):
    body = client.get("/api/dashboard/stats", headers=admin_headers).json()

    assert body["completionRate"] == "0%"
    assert body["totalStudents"] == 0


# --------- Students ---------

def test_list_students_excludes_admins(client, admin_headers, student):
    response = client.get("/api/dashboard/students", headers=admin_headers)

    assert response.status_code == 200
    assert [s["email"] for s in response.json()] == ["student@school.edu"]


def test_delete_student_removes_their_submissions(
    client, admin_headers, db_session, create_assessment, submit, student, student_headers
):
    assessment = create_assessment()
    submit(assessment["id"], {0: 1}, student_headers)

    response = client.delete(
        f"/api/dashboard/students/{student['user']['id']}", headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Student deleted successfully"}
    assert db_session.query(Submission).count() == 0
    assert client.get("/api/auth/me", headers=student_headers).status_code == 401


def test_delete_admin_account_is_refused(client, admin_headers):
    me = client.get("/api/auth/me", headers=admin_headers).json()

    response = client.delete(f"/api/dashboard/students/{me['id']}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Can only delete student accounts"


def test_delete_unknown_student_is_404(client, admin_headers):
    response = client.delete("/api/dashboard/students/999", headers=admin_headers)

    assert response.status_code == 404


# --------- Assessments ---------

def test_create_assessment_keeps_answer_key_for_admins(client, admin_headers, create_assessment):
    created = create_assessment()

    assert [q["correctAnswer"] for q in created["questions"]] == EXAMPLE_CORRECT

    response = client.get(f"/api/dashboard/assessments/{created['id']}", headers=admin_headers)
    assert response.json()["questions"][0]["correctAnswer"] == 1


def test_create_assessment_rejects_out_of_range_answer(client, admin_headers):
    payload = assessment_payload()
    payload["questions"][1]["correctAnswer"] = 4

    response = client.post("/api/dashboard/assessments", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert "questions.1" in response.json()["errors"]


def test_create_assessment_rejects_unknown_field_and_level(client, admin_headers):
    payload = assessment_payload(field="Astrology", level="wizard")

    response = client.post("/api/dashboard/assessments", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert {"engineeringField", "level"} <= set(response.json()["errors"])


def test_create_assessment_requires_questions(client, admin_headers):
    payload = assessment_payload()
    payload["questions"] = []

    response = client.post("/api/dashboard/assessments", json=payload, headers=admin_headers)

    assert response.status_code == 400


def test_update_assessment_replaces_questions(client, admin_headers, create_assessment):
    created = create_assessment()

    response = client.put(
        f"/api/dashboard/assessments/{created['id']}",
        json={"title": "Renamed", "questions": [question(2), question(3)]},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Renamed"
    assert body["level"] == "beginner"
    assert [q["correctAnswer"] for q in body["questions"]] == [2, 3]
    assert [q["position"] for q in body["questions"]] == [0, 1]


def test_editing_assessment_keeps_stored_totals(
    client, admin_headers, create_assessment, submit, student_headers
):
    created = create_assessment()
    submit(created["id"], {0: 1}, student_headers)

    client.put(
        f"/api/dashboard/assessments/{created['id']}",
        json={"questions": [question(0)]},
        headers=admin_headers,
    )

    history = client.get("/api/student/submissions", headers=student_headers).json()
    assert history[0]["totalQuestions"] == 4
    assert history[0]["score"] == 25


def test_delete_assessment(client, admin_headers, create_assessment, submit, student_headers, db_session):
    created = create_assessment()
    submit(created["id"], {0: 1}, student_headers)

    response = client.delete(f"/api/dashboard/assessments/{created['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert client.get("/api/dashboard/assessments", headers=admin_headers).json() == []
    assert db_session.query(Submission).count() == 0

    again = client.delete(f"/api/dashboard/assessments/{created['id']}", headers=admin_headers)
    assert again.status_code == 404


def test_assessments_listed_newest_first(client, admin_headers, create_assessment):
    create_assessment(title="First")
    create_assessment(title="Second")

    response = client.get("/api/dashboard/assessments", headers=admin_headers)

    assert [a["title"] for a in response.json()] == ["Second", "First"]


# --------- Resources ---------

RESOURCE = {
    "title": "Big-O in ten minutes",
    "description": "Short video on complexity",
    "type": "video",
    "category": "Algorithms",
    "difficulty": 2,
    "url": "https://videos.school.edu/big-o",
    "tags": ["complexity"],
}


def test_resource_lifecycle(client, admin_headers, create_assessment):
    assessment = create_assessment()

    created = client.post(
        f"/api/dashboard/assessments/{assessment['id']}/resources",
        json=RESOURCE,
        headers=admin_headers,
    )
    assert created.status_code == 201
    resource = created.json()
    assert resource["assessmentId"] == assessment["id"]
    assert resource["createdBy"] is not None

    listed = client.get(
        f"/api/dashboard/assessments/{assessment['id']}/resources", headers=admin_headers
    ).json()
    assert [r["id"] for r in listed] == [resource["id"]]

    updated = client.put(
        f"/api/dashboard/resources/{resource['id']}",
        json={"difficulty": 4, "type": "article"},
        headers=admin_headers,
    ).json()
    assert updated["difficulty"] == 4
    assert updated["type"] == "article"

    deleted = client.delete(f"/api/dashboard/resources/{resource['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get("/api/dashboard/resources", headers=admin_headers).json() == []


def test_resource_difficulty_must_be_1_to_5(client, admin_headers, create_assessment):
    assessment = create_assessment()

    response = client.post(
        f"/api/dashboard/assessments/{assessment['id']}/resources",
        json={**RESOURCE, "difficulty": 6},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "difficulty" in response.json()["errors"]


def test_recent_resources_are_capped(client, admin_headers, create_assessment):
    assessment = create_assessment()
    for i in range(11):
        client.post(
            f"/api/dashboard/assessments/{assessment['id']}/resources",
            json={**RESOURCE, "title": f"Resource {i}"},
            headers=admin_headers,
        )

    recent = client.get("/api/dashboard/resources", headers=admin_headers).json()

    assert len(recent) == 9
    assert recent[0]["title"] == "Resource 10"


def test_resource_for_unknown_assessment_is_404(client, admin_headers):
    response = client.post(
        "/api/dashboard/assessments/999/resources", json=RESOURCE, headers=admin_headers
    )

    assert response.status_code == 404


# --------- Categories ---------

def test_default_categories_are_seeded_and_sorted_by_level(client, admin_headers):
    client.post(
        "/api/dashboard/categories",
        json={"name": "Expert Circuits", "engineeringField": "Electrical Engineering", "level": "expert"},
        headers=admin_headers,
    )

    response = client.get("/api/dashboard/categories", headers=admin_headers)

    assert [(c["name"], c["level"]) for c in response.json()] == [
        ("Computer Science Fundamentals", "beginner"),
        ("Advanced Programming Concepts", "intermediate"),
        ("Expert Circuits", "expert"),
    ]


def test_initialize_categories_is_idempotent(client, admin_headers):
    response = client.post("/api/dashboard/categories/init", headers=admin_headers)

    assert response.json() == {"success": True, "message": "Categories already exist", "count": 2}


def test_initialize_categories_after_clearing(client, admin_headers):
    for category in client.get("/api/dashboard/categories", headers=admin_headers).json():
        client.delete(f"/api/dashboard/categories/{category['id']}", headers=admin_headers)

    response = client.post("/api/dashboard/categories/init", headers=admin_headers)

    assert response.json()["message"] == "Categories initialized successfully"
    assert response.json()["count"] == 2


def test_update_category(client, admin_headers):
    category = client.get("/api/dashboard/categories", headers=admin_headers).json()[0]

    response = client.put(
        f"/api/dashboard/categories/{category['id']}",
        json={"recommendedDuration": 5, "topics": ["Recursion"]},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["recommendedDuration"] == 5
    assert body["topics"] == ["Recursion"]
    assert body["name"] == category["name"]


def test_beginner_courses_filtered_by_fields(client, admin_headers):
    response = client.get(
        "/api/dashboard/categories/beginner-courses",
        params={"fields": "computer science,Civil Engineering"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Computer Science Fundamentals"]


def test_unknown_category_is_404(client, admin_headers):
    response = client.delete("/api/dashboard/categories/999", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Category not found"}
