USERS = "/api/v1/users"


def test_register_and_login(client) -> None:
    created = client.post(
        USERS, json={"name": "Alice", "email": "alice@example.com", "password": "password123"}
    )

    assert created.status_code == 201
    user = created.json()
    assert user["name"] == "Alice"
    assert "password" not in user

    login = client.post(f"{USERS}/login", json={"email": "alice@example.com", "password": "password123"})
    assert login.status_code == 200
    assert login.json()["token_type"] == "bearer"

    me = client.get(f"{USERS}/me", headers={"Authorization": f"Bearer {login.json()['access_token']}"})
    assert me.json() == user


def test_duplicate_email_is_rejected(client, alice) -> None:
    response = client.post(
        USERS, json={"name": "Other", "email": "alice@example.com", "password": "password123"}
    )

    assert response.status_code == 422
    assert response.json()["errors"] == {"email": ["The email has already been taken."]}


def test_invalid_registration_uses_envelope(client) -> None:
    response = client.post(USERS, json={"email": "x@example.com", "password": "short"})

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["errors"]["name"] == ["The name field is required."]
    assert body["errors"]["password"] == ["The password field must be at least 8 characters."]


def test_wrong_password_is_unauthorized(client, alice) -> None:
    response = client.post(f"{USERS}/login", json={"email": "alice@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_me_requires_token(client) -> None:
    assert client.get(f"{USERS}/me").status_code == 401


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}
