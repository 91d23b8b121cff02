import asyncio

import pytest

from chat_backend.application.commands.users import LoginUserCommand, LoginUserHandler
from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.infrastructure.security import (
    JwtSessionTokenService,
    Pbkdf2PasswordHasher,
)
from tests.conftest import JWT_SECRET
from tests.fakes import InMemoryUserRepository


def _register_body(username="dave", password="pw123456", confirm=None, gender="male"):
    return {
        "fullName": "Dave Doe",
        "username": username,
        "password": password,
        "confirmPassword": confirm if confirm is not None else password,
        "gender": gender,
    }


def test_register_returns_public_projection_and_sets_cookie(client):
    res = client.post("/user/register", json=_register_body())
    assert res.status_code == 201, res.text

    body = res.json()
    assert set(body) == {"_id", "fullName", "username", "profilePic", "gender"}
    assert body["username"] == "dave"
    assert body["fullName"] == "Dave Doe"
    assert body["profilePic"].endswith("/boy?username=dave")
    assert "password" not in res.text

    set_cookie = res.headers["set-cookie"]
    assert set_cookie.startswith("jwt=")
    assert "HttpOnly" in set_cookie
    assert "samesite=strict" in set_cookie.lower()
    assert "Max-Age=2592000" in set_cookie


def test_register_female_avatar(client):
    res = client.post("/user/register", json=_register_body(username="erin", gender="female"))
    assert res.status_code == 201
    assert res.json()["profilePic"] == "https://avatar.iran.liara.run/public/girl?username=erin"


def test_register_missing_field(client):
    body = _register_body()
    del body["gender"]
    res = client.post("/user/register", json=body)
    assert res.status_code == 400
    assert res.json() == {"message": "Please fill in all fields"}


def test_register_password_mismatch(client, store):
    res = client.post("/user/register", json=_register_body(confirm="other"))
    assert res.status_code == 400
    assert res.json() == {"message": "Passwords do not match"}
    assert store.users.users == {}


def test_register_existing_username_persists_nothing(client, store, bob):
    res = client.post("/user/register", json=_register_body(username="bob"))
    assert res.status_code == 400
    assert res.json() == {"message": "User already exists"}
    assert len(store.users.users) == 1
    assert "set-cookie" not in res.headers


def test_password_is_stored_hashed(store, bob):
    _, body = bob
    stored = store.users.users[body["_id"]]
    assert stored.password_hash != "secret123"
    # TestingConfig is what the test container is built from
    assert stored.password_hash.startswith("pbkdf2_sha256$1000$")


def test_login_returns_same_shape_as_register(client, bob):
    _, registered = bob
    res = client.post("/user/login", json={"username": "bob", "password": "secret123"})
    assert res.status_code == 200, res.text
    assert res.json() == registered
    assert res.headers["set-cookie"].startswith("jwt=")


def test_login_errors_do_not_reveal_which_part_failed(client, bob):
    wrong_password = client.post("/user/login", json={"username": "bob", "password": "nope"})
    unknown_user = client.post("/user/login", json={"username": "zed", "password": "nope"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json() == {
        "message": "Invalid username or password"
    }


def test_login_missing_fields(client):
    res = client.post("/user/login", json={"username": "bob"})
    assert res.status_code == 400
    assert res.json() == {"message": "Please fill in all fields"}


def test_logout_clears_cookie(bob):
    bob_client, _ = bob
    res = bob_client.post("/user/logout")
    assert res.status_code == 200
    assert res.json() == {"message": "Logged out successfully"}
    set_cookie = res.headers["set-cookie"]
    assert set_cookie.startswith("jwt=")
    assert "Max-Age=0" in set_cookie

    assert bob_client.get("/user/all").status_code == 401


def test_logout_without_session(client):
    res = client.post("/user/logout")
    assert res.status_code == 200


def test_list_users_excludes_caller(alice, bob, carol):
    alice_client, _ = alice
    res = alice_client.get("/user/all")
    assert res.status_code == 200

    usernames = sorted(user["username"] for user in res.json())
    assert usernames == ["bob", "carol"]
    assert all("password" not in user and "passwordHash" not in user for user in res.json())
    assert all({"_id", "fullName", "profilePic", "gender"} <= set(user) for user in res.json())


def test_login_blank_username_gets_generic_error(client, bob):
    res = client.post("/user/login", json={"username": "   ", "password": "secret123"})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid username or password"}


class RecordingHasher(Pbkdf2PasswordHasher):
    def __init__(self):
        super().__init__(iterations=1000)
        self.checked: list[str] = []

    def verify(self, password: str, stored_hash: str) -> bool:
        self.checked.append(stored_hash)
        return super().verify(password, stored_hash)


def test_login_unknown_username_still_checks_a_hash():
    hasher = RecordingHasher()
    handler = LoginUserHandler(
        InMemoryUserRepository(), hasher, JwtSessionTokenService(JWT_SECRET)
    )

    with pytest.raises(DomainValidationError, match="Invalid username or password"):
        asyncio.run(handler.execute(LoginUserCommand(username="ghost", password="pw")))

    assert hasher.checked == [hasher.dummy_hash()]
    assert hasher.checked[0].startswith("pbkdf2_sha256$1000$")
