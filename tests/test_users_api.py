from tests.conftest import write_users


def test_list_users_normalizes_fixture(client):
    response = client.get("/api/users")

    assert response.status_code == 200
    users = response.json()
    assert [user["id"] for user in users] == [1, 2, 3, 4]
    assert [user["status"] for user in users] == ["active", "inactive", "active", "inactive"]
    assert users[0]["avatar"] == "https://i.pravatar.cc/150?img=1"
    assert users[3]["avatar"] == "https://cdn.example.com/carl.png"


def test_id_string_is_coerced_to_int(client):
    users = client.get("/api/users").json()

    assert users[3]["id"] == 4
    assert isinstance(users[3]["id"], int)


def test_non_array_payload_returns_invalid_data_format(client, users_file):
    write_users(users_file, {"users": []})

    response = client.get("/api/users", headers={"X-Trace-ID": "trace-users-1"})

    assert response.status_code == 500
    payload = response.json()
    assert payload["code"] == "INVALID_DATA_FORMAT"
    assert payload["error"] == "Invalid data format"
    assert payload["message"] == "Data is not an array"
    assert payload["trace_id"] == "trace-users-1"


def test_missing_required_field_fails_whole_batch(client, users_file):
    write_users(
        users_file,
        [
            {"id": 1, "name": "Anna", "email": "anna@example.com", "mobile": "100", "status": "active"},
            {"id": 2, "name": "Bob", "email": "bob@example.com", "status": "active"},
        ],
    )

    response = client.get("/api/users")

    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == "Missing required fields"
    assert payload["details"] == {"index": 1, "fields": ["mobile"]}


def test_unknown_status_is_rejected(client, users_file):
    write_users(users_file, [{"id": 1, "name": "Anna", "email": "a@x.com", "mobile": "1", "status": "pending"}])

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["message"] == "Unknown status value"


def test_duplicate_ids_are_rejected(client, users_file):
    record = {"id": 1, "name": "Anna", "email": "a@x.com", "mobile": "1", "status": "active"}
    write_users(users_file, [record, {**record, "id": "1"}])

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["details"] == {"index": 1, "id": 1}


def test_invalid_json_returns_invalid_data_format(client, users_file):
    users_file.write_text("[{", encoding="utf-8")

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["code"] == "INVALID_DATA_FORMAT"


def test_missing_fixture_returns_fixture_unavailable(client, users_file):
    users_file.unlink()

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["code"] == "FIXTURE_UNAVAILABLE"


def test_write_methods_are_not_allowed(client):
    response = client.post("/api/users", json={})

    assert response.status_code == 405
    assert response.json()["code"] == "METHOD_NOT_ALLOWED"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/unknown")

    assert response.status_code == 404
    payload = response.json()
    assert payload["code"] == "NOT_FOUND"
    assert payload["trace_id"]


def test_fractional_and_boolean_ids_are_rejected(client, users_file):
    record = {"name": "Anna", "email": "a@x.com", "mobile": "1", "status": "active"}
    for raw_id in (5.7, True):
        write_users(users_file, [{**record, "id": raw_id}])

        response = client.get("/api/users")

        assert response.status_code == 500
        payload = response.json()
        assert payload["code"] == "INVALID_DATA_FORMAT"
        assert payload["message"] == "Record id is not an integer"
        assert payload["details"] == {"index": 0, "id": str(raw_id)}


def test_overflowing_id_is_rejected(client, users_file):
    users_file.write_text(
        '[{"id": 1e999, "name": "Anna", "email": "a@x.com", "mobile": "1", "status": "active"}]',
        encoding="utf-8",
    )

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["code"] == "INVALID_DATA_FORMAT"
    assert response.json()["details"] == {"index": 0, "id": "inf"}
