from conftest import auth_headers


def _register(client, **overrides):
    body = {
        "email": "hr@acme.io",
        "name": "Harper Reyes",
        "role": "hr",
        "password": "s3cret-pass",
        "companyName": "Acme",
    }
    body.update(overrides)
    return client.post("/users", json=body)


def test_register_hr_gets_default_package(client, services):
    response = _register(client)

    assert response.status_code == 200
    assert response.json()["message"] == "User registered successfully"
    user = services.users.get("hr@acme.io")
    assert user["package_limit"] == 5
    assert user["current_employees"] == 0
    assert user["subscription"] == "basic"
    assert user["hashed_password"] != "s3cret-pass"


def test_register_validation(client):
    assert _register(client, name="").status_code == 400
    assert _register(client, companyName=None).status_code == 400
    assert _register(client).status_code == 200
    duplicate = _register(client)
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == "User already exists"


def test_login_and_me(client):
    _register(client)

    bad = client.post("/auth/token", data={"username": "hr@acme.io", "password": "wrong-pass"})
    good = client.post("/auth/token", data={"username": "hr@acme.io", "password": "s3cret-pass"})

    assert bad.status_code == 401
    assert good.status_code == 200
    token = good.json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "hr@acme.io"
    assert me.json()["packageLimit"] == 5


def test_invalid_token_is_rejected(client):
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


def test_token_for_unknown_user_is_rejected(client):
    response = client.get("/auth/me", headers=auth_headers("ghost@acme.io", "hr"))

    assert response.status_code == 401


def test_update_own_profile_only(client, services):
    client.post("/users", json={"email": "e1@mail.io", "name": "Eli", "role": "employee"})
    headers = auth_headers("e1@mail.io", "employee")

    updated = client.put("/users/e1@mail.io", json={"displayName": "Eli Park", "photoUrl": "https://img.example/eli.png"}, headers=headers)
    nameless = client.put("/users/e1@mail.io", json={}, headers=headers)
    other = client.put("/users/hr@acme.io", json={"displayName": "X"}, headers=headers)

    assert updated.status_code == 200
    assert services.users.get("e1@mail.io")["name"] == "Eli Park"
    assert nameless.status_code == 400
    assert other.status_code == 403
