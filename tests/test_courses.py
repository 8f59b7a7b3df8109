from bson import ObjectId


def test_create_course(client, admin_headers):
    res = client.post("/courses", json={"title": "Data Structures", "code": "CS101", "credits": 3},
                      headers=admin_headers)

    assert res.status_code == 201
    data = res.json()
    assert "_id" in data
    assert data["title"] == "Data Structures"
    assert data["code"] == "CS101"
    assert data["credits"] == 3


def test_create_course_requires_auth(client):
    res = client.post("/courses", json={"title": "Data Structures", "code": "CS101", "credits": 3})

    assert res.status_code == 401


def test_create_course_duplicate_code(client, admin_headers, make_course):
    make_course(code="CS101")

    res = client.post("/courses", json={"title": "Another", "code": "CS101", "credits": 2},
                      headers=admin_headers)

    assert res.status_code == 400
    assert "Error creating course" in res.json()["message"]


def test_list_courses_public(client, make_course):
    make_course()

    res = client.get("/courses")

    assert res.status_code == 200
    assert isinstance(res.json(), list)
    assert len(res.json()) == 1


def test_list_courses_empty(client):
    res = client.get("/courses")

    assert res.status_code == 200
    assert res.json() == []


def test_get_course_public(client, make_course):
    course = make_course(title="Data Structures")

    res = client.get(f"/courses/{course['_id']}")

    assert res.status_code == 200
    assert res.json()["_id"] == course["_id"]
    assert res.json()["title"] == "Data Structures"


def test_get_course_not_found(client):
    res = client.get(f"/courses/{ObjectId()}")

    assert res.status_code == 404
    assert res.json()["message"] == "Course not found"


def test_get_course_malformed_id(client):
    res = client.get("/courses/invalid-id")

    assert res.status_code == 500
    assert res.json()["message"] == "Internal Server Error"


# ============================================================
# UPDATE
# ============================================================

def test_update_course_title_keeps_code(client, user_headers, make_course):
    course = make_course(title="Data Structures", code="CS101")

    res = client.put(f"/courses/{course['_id']}", json={"title": "Advanced Data Structures"},
                     headers=user_headers)

    assert res.status_code == 200
    assert res.json()["title"] == "Advanced Data Structures"
    assert res.json()["code"] == "CS101"


def test_update_course_multiple_fields(client, admin_headers, make_course):
    course = make_course()

    res = client.put(f"/courses/{course['_id']}",
                     json={"title": "Data Structures & Algorithms", "credits": 5},
                     headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["title"] == "Data Structures & Algorithms"
    assert res.json()["credits"] == 5


def test_update_course_requires_auth(client, make_course):
    course = make_course()

    res = client.put(f"/courses/{course['_id']}", json={"title": "Nope"})

    assert res.status_code == 401


def test_update_course_not_found(client, admin_headers):
    res = client.put(f"/courses/{ObjectId()}", json={"title": "Ghost"}, headers=admin_headers)

    assert res.status_code == 404
    assert res.json()["message"] == "Course not found"


def test_update_course_to_taken_code(client, admin_headers, make_course):
    make_course(title="First", code="FIRST1")
    second = make_course(title="Second", code="SECOND1")

    res = client.put(f"/courses/{second['_id']}", json={"code": "FIRST1"}, headers=admin_headers)

    assert res.status_code == 409
    assert res.json()["message"] == "Course code is already in use"


def test_update_course_keeping_own_code(client, admin_headers, make_course):
    course = make_course(title="Same Code Course", code="SAME1")

    res = client.put(f"/courses/{course['_id']}",
                     json={"title": "Same Code Course Updated", "code": "SAME1"},
                     headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["title"] == "Same Code Course Updated"


def test_update_course_empty_body_is_noop(client, admin_headers, make_course):
    course = make_course(title="Untouched")

    res = client.put(f"/courses/{course['_id']}", json={}, headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["title"] == "Untouched"


# ============================================================
# DELETE
# ============================================================

def test_delete_course(client, admin_headers, make_course):
    course = make_course()

    res = client.delete(f"/courses/{course['_id']}", headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["message"] == "Course deleted successfully"
    assert client.get(f"/courses/{course['_id']}").status_code == 404


def test_user_cannot_delete_course(client, user_headers, make_course):
    course = make_course()

    res = client.delete(f"/courses/{course['_id']}", headers=user_headers)

    assert res.status_code == 403
    assert "permission" in res.json()["message"]


def test_delete_course_not_found(client, admin_headers):
    res = client.delete(f"/courses/{ObjectId()}", headers=admin_headers)

    assert res.status_code == 404
    assert res.json()["message"] == "Course not found"


def test_delete_course_with_enrolled_student(client, db, admin_headers, make_course, make_student):
    course = make_course()
    student = make_student()
    client.put(f"/students/{student['_id']}/enroll-course",
               json={"courseId": course["_id"]}, headers=admin_headers)

    res = client.delete(f"/courses/{course['_id']}", headers=admin_headers)
    assert res.status_code == 200

    # Student survives, the populated list no longer shows the course,
    # but the stored reference is not cleaned up.
    get_res = client.get(f"/students/{student['_id']}")
    assert get_res.status_code == 200
    assert get_res.json()["courses"] == []
    stored = db.students.find_one({"_id": ObjectId(student["_id"])})
    assert stored["courses"] == [ObjectId(course["_id"])]


def test_delete_course_with_assigned_teacher(client, admin_headers, make_course, make_teacher):
    course = make_course()
    teacher = make_teacher()
    client.put(f"/teachers/{teacher['_id']}/enroll-course",
               json={"courseId": course["_id"]}, headers=admin_headers)

    client.delete(f"/courses/{course['_id']}", headers=admin_headers)

    assert client.get(f"/teachers/{teacher['_id']}").status_code == 200
    assert client.get(f"/courses/{course['_id']}").status_code == 404


def test_delete_course_cascade_enabled(client, db, admin_headers, make_course, make_student, monkeypatch):
    from app.api.routes import course_routes
    monkeypatch.setattr(course_routes.settings, "cascade_course_delete", True)

    course = make_course()
    student = make_student()
    client.put(f"/students/{student['_id']}/enroll-course",
               json={"courseId": course["_id"]}, headers=admin_headers)

    client.delete(f"/courses/{course['_id']}", headers=admin_headers)

    stored = db.students.find_one({"_id": ObjectId(student["_id"])})
    assert stored["courses"] == []
