from datetime import datetime, timezone

from messagely.domain.models.message import Message
from messagely.infrastructure.database import SessionLocal
from messagely.interfaces.deps import get_session_issuer

ALICE = {
    "username": "alice",
    "password": "secret1",
    "first_name": "Alice",
    "last_name": "Liddell",
    "phone": "+14155550000",
}


def register(client, **overrides):
    payload = {**ALICE, **overrides}
    return client.post("/auth/register", json=payload)


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_register_returns_token(client):
    resp = register(client)

    assert resp.status_code == 201
    claims = get_session_issuer().decode(resp.json()["token"])
    assert claims["username"] == "alice"


def test_register_duplicate_is_bad_request(client):
    register(client)

    resp = register(client, password="different", first_name="Other")

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "DuplicateIdentityError"
    assert error["path"] == "/auth/register"
    assert "alice" in error["message"]


def test_register_missing_fields(client):
    resp = client.post("/auth/register", json={"username": "alice"})

    assert resp.status_code == 422


def test_login(client):
    register(client)

    resp = client.post("/auth/login", json={"username": "alice", "password": "secret1"})

    assert resp.status_code == 200
    assert get_session_issuer().decode(resp.json()["token"])["username"] == "alice"


def test_login_updates_last_login(client):
    token = register(client).json()["token"]
    before = client.get("/users/alice", headers=auth_header(token)).json()

    client.post("/auth/login", json={"username": "alice", "password": "secret1"})
    after = client.get("/users/alice", headers=auth_header(token)).json()

    assert after["join_at"] == before["join_at"]
    assert datetime.fromisoformat(after["last_login_at"]) >= datetime.fromisoformat(before["last_login_at"])


def test_login_wrong_password(client):
    register(client)

    resp = client.post("/auth/login", json={"username": "alice", "password": "nope"})

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "AuthenticationFailedError"


def test_login_unknown_user_looks_like_wrong_password(client):
    register(client)

    unknown = client.post("/auth/login", json={"username": "nobody", "password": "secret1"})
    wrong = client.post("/auth/login", json={"username": "alice", "password": "nope"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json()["error"]["message"] == wrong.json()["error"]["message"]


def test_list_users_requires_token(client):
    resp = client.get("/users")

    assert resp.status_code == 401


def test_list_users_rejects_bad_token(client):
    resp = client.get("/users", headers=auth_header("not-a-token"))

    assert resp.status_code == 401


def test_list_users(client):
    register(client, username="carol", first_name="Carol")
    token = register(client).json()["token"]

    resp = client.get("/users", headers=auth_header(token))

    assert resp.status_code == 200
    assert resp.json() == [
        {"username": "alice", "first_name": "Alice", "last_name": "Liddell"},
        {"username": "carol", "first_name": "Carol", "last_name": "Liddell"},
    ]


def test_get_own_profile(client):
    token = register(client).json()["token"]

    resp = client.get("/users/alice", headers=auth_header(token))

    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "alice"
    assert body["phone"] == "+14155550000"
    assert body["join_at"] == body["last_login_at"]
    assert "password" not in body


def test_get_other_profile_forbidden(client):
    register(client, username="bob")
    token = register(client).json()["token"]

    resp = client.get("/users/bob", headers=auth_header(token))

    assert resp.status_code == 403
    assert resp.json()["error"]["code"] == "ForbiddenError"


def test_profile_of_vanished_user_not_found(client):
    token = get_session_issuer().issue("ghost")

    resp = client.get("/users/ghost", headers=auth_header(token))

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NotFoundError"


def test_message_listings(client):
    token = register(client).json()["token"]
    register(client, username="bob", first_name="Bob", phone="222")
    sent_at = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    with SessionLocal() as db:
        db.add_all([
            Message(from_username="alice", to_username="bob", body="hi bob", sent_at=sent_at),
            Message(from_username="bob", to_username="alice", body="hi alice", sent_at=sent_at),
        ])
        db.commit()

    sent = client.get("/users/alice/from", headers=auth_header(token))
    received = client.get("/users/alice/to", headers=auth_header(token))

    assert sent.status_code == received.status_code == 200
    [out] = sent.json()
    assert out["body"] == "hi bob"
    assert out["read_at"] is None
    assert out["to_user"] == {"username": "bob", "first_name": "Bob", "last_name": "Liddell", "phone": "222"}
    [inbound] = received.json()
    assert inbound["body"] == "hi alice"
    assert inbound["from_user"]["username"] == "bob"


def test_message_listings_empty(client):
    token = register(client).json()["token"]

    assert client.get("/users/alice/from", headers=auth_header(token)).json() == []
    assert client.get("/users/alice/to", headers=auth_header(token)).json() == []


def test_request_id_echoed(client):
    resp = client.get("/", headers={"X-Request-ID": "a7d4b1c8-3f2e-4b6a-9c1d-2e8f7a6b5c4d"})

    assert resp.headers["X-Request-ID"] == "a7d4b1c8-3f2e-4b6a-9c1d-2e8f7a6b5c4d"


def test_register_password_with_nul_is_unprocessable(client):
    resp = register(client, password="sec\x00ret1")

    assert resp.status_code == 422


def test_login_password_with_nul_is_unauthorized(client):
    register(client)

    resp = client.post("/auth/login", json={"username": "alice", "password": "sec\x00ret1"})

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "AuthenticationFailedError"
