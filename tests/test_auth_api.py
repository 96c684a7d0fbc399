def test_register_login_and_me(anonymous_client):
    response = anonymous_client.post(
        "/api/auth/register",
        json={"name": "Ana", "email": "Ana@Example.com", "password": "s3cret-pass"},
    )
    assert response.status_code == 201
    assert response.json()["email"] == "ana@example.com"

    response = anonymous_client.post(
        "/api/auth/login",
        json={"email": "ana@example.com", "password": "s3cret-pass"},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    response = anonymous_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["name"] == "Ana"


def test_register_rejects_duplicate_email(anonymous_client, user):
    response = anonymous_client.post(
        "/api/auth/register",
        json={"name": "Dup", "email": user.email, "password": "whatever"},
    )

    assert response.status_code == 400


def test_login_rejects_wrong_password(anonymous_client, user):
    response = anonymous_client.post(
        "/api/auth/login",
        json={"email": user.email, "password": "wrong"},
    )

    assert response.status_code == 401


def test_protected_route_rejects_invalid_token(anonymous_client):
    response = anonymous_client.get("/api/business", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_health(anonymous_client):
    assert anonymous_client.get("/health").json() == {"status": "healthy"}
