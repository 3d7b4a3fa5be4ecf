"""
Tests for the user endpoints

Users are keyed by a client-supplied id and are removed for good on delete.
A missing user on lookup is reported as a 500 "record not found", which is
what existing clients expect; an update of an unknown id matches no rows and
still succeeds.
"""


class TestCreateUser:
    """Tests for POST /create-user."""

    def test_create_returns_stored_user(self, client):
        payload = {
            "id": "uid-42",
            "displayName": "Hanako",
            "photoURL": "https://example.com/h.png",
            "class": "B",
            "faculty": "Science",
            "department": "Physics",
            "grade": "2",
            "can": "C++",
            "did": "Lab work",
            "will": "Graduate",
            "isPublic": True,
        }

        response = client.post("/create-user", json=payload)

        assert response.status_code == 200
        assert response.json() == {"data": payload}

    def test_optional_profile_fields_default_to_empty(self, client):
        response = client.post("/create-user", json={"id": "bare"})

        user = response.json()["data"]
        assert user["displayName"] == ""
        assert user["class"] == ""
        assert user["isPublic"] is False

    def test_duplicate_id_is_a_server_error(self, client, make_user):
        make_user("dup")

        response = client.post("/create-user", json={"id": "dup", "displayName": "Other"})

        assert response.status_code == 500
        assert "error" in response.json()

    def test_id_is_required(self, client):
        response = client.post("/create-user", json={"displayName": "No id"})

        assert response.status_code == 400

    def test_boolean_type_mismatch_is_rejected(self, client):
        response = client.post("/create-user", json={"id": "x", "isPublic": "perhaps"})

        assert response.status_code == 400
        assert "isPublic" in response.json()["error"]


class TestReadUser:
    """Tests for GET /user/{id}."""

    def test_fetch_existing_user(self, client, make_user):
        created = make_user("user-7", displayName="Jiro")

        response = client.get("/user/user-7")

        assert response.status_code == 200
        assert response.json() == {"user": created}

    def test_missing_user_is_a_server_error(self, client):
        response = client.get("/user/ghost")

        assert response.status_code == 500
        assert response.json() == {"error": "record not found"}


class TestUpdateUser:
    """Tests for PUT /update-user/{id}."""

    def test_only_submitted_fields_change(self, client, make_user):
        make_user("u1", displayName="Before", faculty="Law")

        response = client.put("/update-user/u1", json={"displayName": "After"})

        assert response.status_code == 200
        user = response.json()["data"]
        assert user["displayName"] == "After"
        assert user["faculty"] == "Law"
        assert client.get("/user/u1").json()["user"]["displayName"] == "After"

    def test_explicit_false_is_written(self, client, make_user):
        make_user("u2", isPublic=True)

        response = client.put("/update-user/u2", json={"isPublic": False})

        assert response.json()["data"]["isPublic"] is False

    def test_id_in_body_is_ignored(self, client, make_user):
        make_user("u3")

        response = client.put("/update-user/u3", json={"id": "hijack", "grade": "4"})

        assert response.json()["data"]["id"] == "u3"
        assert client.get("/user/hijack").status_code == 500

    def test_update_missing_user_succeeds_without_creating_it(self, client):
        """
        Updating an unknown id changes no rows and echoes the decoded body.
        """
        response = client.put("/update-user/ghost", json={"displayName": "x", "isPublic": True})

        assert response.status_code == 200
        echoed = response.json()["data"]
        assert echoed["id"] == "ghost"
        assert echoed["displayName"] == "x"
        assert echoed["isPublic"] is True
        assert echoed["faculty"] == ""
        assert client.get("/user/ghost").status_code == 500

    def test_empty_update_returns_stored_user(self, client, make_user):
        created = make_user("u5", grade="1")

        response = client.put("/update-user/u5", json={})

        assert response.status_code == 200
        assert response.json() == {"data": created}

    def test_malformed_body(self, client, make_user):
        make_user("u4")

        response = client.put(
            "/update-user/u4",
            content="[",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400


class TestDeleteUser:
    """Tests for DELETE /delete-user/{id}."""

    def test_delete_removes_user(self, client, make_user):
        make_user("gone")

        response = client.delete("/delete-user/gone")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully!"}
        assert client.get("/user/gone").status_code == 500

    def test_id_can_be_reused_after_delete(self, client, make_user):
        make_user("again")
        client.delete("/delete-user/again")

        response = client.post("/create-user", json={"id": "again"})

        assert response.status_code == 200

    def test_delete_missing_user_returns_404(self, client):
        response = client.delete("/delete-user/ghost")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
