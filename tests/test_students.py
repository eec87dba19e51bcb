def test_create_student(client, auth_headers, class_id):
    resp = client.post(f"/api/classes/{class_id}/students", json={"name": "Minji"}, headers=auth_headers)

    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["name"] == "Minji"
    assert body["class_id"] == class_id
    assert body["id"]


def test_list_students_alphabetical(client, auth_headers, class_id):
    url = f"/api/classes/{class_id}/students"
    for name in ("Charlie", "Alice", "Bob"):
        client.post(url, json={"name": name}, headers=auth_headers)

    items = client.get(url, headers=auth_headers).json()
    assert [s["name"] for s in items] == ["Alice", "Bob", "Charlie"]
    assert set(items[0]) == {"id", "name"}


def test_create_student_blank_name(client, auth_headers, class_id):
    resp = client.post(f"/api/classes/{class_id}/students", json={"name": "  "}, headers=auth_headers)

    assert resp.status_code == 400, resp.text
    assert resp.json()["message"] == "Student name is required"


def test_create_student_unknown_class_is_storage_error(client, auth_headers):
    resp = client.post("/api/classes/404/students", json={"name": "Ghost"}, headers=auth_headers)

    assert resp.status_code == 500, resp.text
    assert resp.json() == {"message": "Server error adding student"}


def test_list_students_unknown_class_is_empty(client, auth_headers):
    resp = client.get("/api/classes/404/students", headers=auth_headers)

    assert resp.status_code == 200, resp.text
    assert resp.json() == []


def test_students_expired_token(client, class_id):
    from datetime import timedelta
    from utils.security import create_access_token

    expired = create_access_token(1, "teacher", expires_delta=timedelta(minutes=-5))
    resp = client.get(f"/api/classes/{class_id}/students", headers={"Authorization": f"Bearer {expired}"})
    assert resp.status_code == 403


def test_out_of_range_class_id_on_create_is_400(client, auth_headers):
    resp = client.post(
        "/api/classes/99999999999999999999/students", json={"name": "Ghost"}, headers=auth_headers
    )

    assert resp.status_code == 400, resp.text
    assert resp.json()["message"].startswith("Invalid request: class_id")
