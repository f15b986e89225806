def test_register_and_login(client):
    res = client.post("/api/register", json={
        "username": "Lena", "email": "lena@example.com", "password": "s3cret",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "Lena"
    assert "password_hash" not in body

    res = client.post("/api/login", data={"username": "Lena", "password": "s3cret"})
    assert res.status_code == 200
    token = res.json()["access_token"]

    me = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["username"] == "Lena"


def test_register_duplicate_username(client):
    res = client.post("/api/register", json={
        "username": "Charles", "email": "other@example.com", "password": "x",
    })
    assert res.status_code == 400
    assert res.json()["status"] == "fail"


def test_login_wrong_password(client):
    res = client.post("/api/login", data={"username": "Charles", "password": "nope"})
    assert res.status_code == 401


def test_login_blank_password(client):
    res = client.post("/api/login", data={"username": "Charles", "password": " "})
    assert res.status_code == 400


def test_requires_token(client):
    assert client.get("/api/users/me").status_code == 401
    assert client.get("/api/messages/inbox").status_code == 401


def test_token_for_unknown_user_rejected(client, auth_headers):
    assert client.get("/api/users/me", headers=auth_headers("James")).status_code == 401


def test_friends_endpoints(client, auth_headers):
    res = client.get("/api/friends", headers=auth_headers("Rick"))
    assert sorted(res.json()["friends"]) == ["Charles", "Steph"]

    res = client.post("/api/friends/Michelle", headers=auth_headers("Charles"))
    assert res.status_code == 201

    assert client.post("/api/friends/Michelle", headers=auth_headers("Charles")).status_code == 400
    assert client.post("/api/friends/James", headers=auth_headers("Charles")).status_code == 404


def test_logout(client, auth_headers):
    res = client.post("/api/logout", headers=auth_headers("Charles"))
    assert res.status_code == 200
    assert res.json() == {"status": "logged out", "username": "Charles"}

    assert client.post("/api/logout").status_code == 401
