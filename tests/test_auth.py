import jwt

from tests.conftest import JWT_SECRET, session_token


def test_protected_route_without_cookie(client):
    res = client.get("/chat/conversations")
    assert res.status_code == 401
    assert res.json() == {"message": "Unauthorized - No Token Provided"}


def test_expired_token(client, bob):
    _, body = bob
    client.cookies.set("jwt", session_token(body["_id"], expires_in=-60))
    res = client.get("/user/all")
    assert res.status_code == 401
    assert res.json() == {"message": "Unauthorized - Invalid Token"}


def test_token_signed_with_other_secret(client, bob):
    _, body = bob
    client.cookies.set("jwt", session_token(body["_id"], secret="x" * 48))
    res = client.get("/user/all")
    assert res.status_code == 401
    assert res.json() == {"message": "Unauthorized - Invalid Token"}


def test_token_without_id_claim(client):
    token = jwt.encode({"iat": 0, "exp": 9999999999}, JWT_SECRET, algorithm="HS256")
    client.cookies.set("jwt", token)
    res = client.get("/user/all")
    assert res.status_code == 401


def test_garbage_token(client):
    client.cookies.set("jwt", "not-a-jwt")
    assert client.get("/user/all").status_code == 401


def test_token_for_deleted_user(client, unknown_id):
    client.cookies.set("jwt", session_token(unknown_id))
    res = client.get("/user/all")
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}


def test_forged_token_for_existing_user_is_accepted(client, bob):
    _, body = bob
    client.cookies.set("jwt", session_token(body["_id"]))
    assert client.get("/user/all").status_code == 200


def test_public_routes_need_no_session(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.post("/user/logout").status_code == 200


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"
