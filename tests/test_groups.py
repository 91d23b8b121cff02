import json


def _create(client, name, member_ids):
    return client.post("/group/create", json={"chatName": name, "users": member_ids})


def _team(alice, bob, carol):
    alice_client, _ = alice
    _, bob_body = bob
    _, carol_body = carol
    res = _create(alice_client, "Team", [bob_body["_id"], carol_body["_id"]])
    assert res.status_code == 201, res.text
    return res.json()


def test_alice_creates_team(alice, bob, carol):
    group = _team(alice, bob, carol)

    assert group["chatName"] == "Team"
    assert group["isGroupChat"] is True
    assert len(group["users"]) == 3
    assert sorted(u["username"] for u in group["users"]) == ["alice", "bob", "carol"]
    assert group["groupAdmin"]["username"] == "alice"


def test_create_accepts_json_encoded_user_list(alice, bob, carol):
    alice_client, _ = alice
    _, bob_body = bob
    _, carol_body = carol
    res = alice_client.post(
        "/group/create",
        json={"chatName": "Team", "users": json.dumps([bob_body["_id"], carol_body["_id"]])},
    )
    assert res.status_code == 201, res.text
    assert len(res.json()["users"]) == 3


def test_create_with_unparsable_users(alice):
    alice_client, _ = alice
    res = alice_client.post("/group/create", json={"chatName": "Team", "users": "[oops"})
    assert res.status_code == 400


def test_create_too_small_persists_nothing(alice, bob, store):
    alice_client, _ = alice
    _, bob_body = bob
    res = _create(alice_client, "Team", [bob_body["_id"]])
    assert res.status_code == 400
    assert res.json() == {"message": "A group chat must have at least 3 members"}
    assert store.conversations.conversations == {}


def test_create_duplicates_do_not_count(alice, bob, store):
    alice_client, alice_body = alice
    _, bob_body = bob
    res = _create(alice_client, "Team", [bob_body["_id"], bob_body["_id"], alice_body["_id"]])
    assert res.status_code == 400
    assert store.conversations.conversations == {}


def test_create_missing_fields(alice, bob):
    alice_client, _ = alice
    res = alice_client.post("/group/create", json={"users": []})
    assert res.status_code == 400
    assert res.json() == {"message": "Please provide group name and users"}

    res = alice_client.post("/group/create", json={"chatName": "Team"})
    assert res.status_code == 400
    assert res.json() == {"message": "Please provide group name and users"}


def test_rename(alice, bob, carol):
    group = _team(alice, bob, carol)
    bob_client, _ = bob

    # Any caller may rename; only membership changes are admin-only
    res = bob_client.put("/group/rename", json={"groupId": group["_id"], "chatName": "Crew"})
    assert res.status_code == 200
    assert res.json()["chatName"] == "Crew"


def test_rename_errors(alice, unknown_id):
    alice_client, _ = alice
    res = alice_client.put("/group/rename", json={"groupId": unknown_id})
    assert res.status_code == 400
    assert res.json() == {"message": "Please provide group ID and new name"}

    res = alice_client.put("/group/rename", json={"groupId": unknown_id, "chatName": "X"})
    assert res.status_code == 404
    assert res.json() == {"message": "Group not found"}


def test_admin_adds_and_removes_members(alice, bob, carol, register):
    group = _team(alice, bob, carol)
    alice_client, _ = alice
    _, dave_body = register("dave")
    _, bob_body = bob

    res = alice_client.put("/group/add", json={"groupId": group["_id"], "userId": dave_body["_id"]})
    assert res.status_code == 200, res.text
    assert "dave" in [u["username"] for u in res.json()["users"]]

    res = alice_client.put("/group/remove", json={"groupId": group["_id"], "userId": bob_body["_id"]})
    assert res.status_code == 200
    assert sorted(u["username"] for u in res.json()["users"]) == ["alice", "carol", "dave"]


def test_adding_existing_member_twice_lists_them_twice(alice, bob, carol, store):
    group = _team(alice, bob, carol)
    alice_client, _ = alice
    _, bob_body = bob

    res = alice_client.put("/group/add", json={"groupId": group["_id"], "userId": bob_body["_id"]})
    assert res.status_code == 200
    assert [u["username"] for u in res.json()["users"]].count("bob") == 2

    res = alice_client.put("/group/remove", json={"groupId": group["_id"], "userId": bob_body["_id"]})
    assert "bob" not in [u["username"] for u in res.json()["users"]]


def test_non_admin_cannot_change_membership(alice, bob, carol, store):
    group = _team(alice, bob, carol)
    bob_client, _ = bob
    _, carol_body = carol
    before = list(store.conversations.conversations[group["_id"]].users)

    res = bob_client.put("/group/remove", json={"groupId": group["_id"], "userId": carol_body["_id"]})
    assert res.status_code == 403
    assert res.json() == {"message": "Only the group admin can remove members"}

    res = bob_client.put("/group/add", json={"groupId": group["_id"], "userId": carol_body["_id"]})
    assert res.status_code == 403
    assert res.json() == {"message": "Only the group admin can add members"}

    assert store.conversations.conversations[group["_id"]].users == before


def test_membership_errors(alice, bob, carol, unknown_id):
    group = _team(alice, bob, carol)
    alice_client, _ = alice

    res = alice_client.put("/group/add", json={"groupId": group["_id"]})
    assert res.status_code == 400
    assert res.json() == {"message": "Please provide group ID and user ID"}

    res = alice_client.put("/group/add", json={"groupId": unknown_id, "userId": unknown_id})
    assert res.status_code == 404
    assert res.json() == {"message": "Group not found"}

    res = alice_client.put("/group/add", json={"groupId": group["_id"], "userId": unknown_id})
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}


def test_direct_conversation_is_not_a_group(alice, bob):
    alice_client, _ = alice
    _, bob_body = bob
    sent = alice_client.post(f"/chat/send/{bob_body['_id']}", json={"message": "hi"}).json()

    res = alice_client.get(f"/group/messages/{sent['group']}")
    assert res.status_code == 404
    assert res.json() == {"message": "Group not found"}


def test_group_messaging(alice, bob, carol):
    group = _team(alice, bob, carol)
    alice_client, _ = alice
    bob_client, _ = bob

    res = alice_client.post(f"/group/message/{group['_id']}", json={"message": "hello team"})
    assert res.status_code == 201, res.text
    assert res.json()["sender"]["username"] == "alice"
    assert res.json()["group"] == group["_id"]

    bob_client.post(f"/group/message/{group['_id']}", json={"message": "hi alice"})

    res = bob_client.get(f"/group/messages/{group['_id']}")
    assert res.status_code == 200
    messages = res.json()
    assert [m["content"] for m in messages] == ["hello team", "hi alice"]
    assert [m["sender"]["username"] for m in messages] == ["alice", "bob"]

    listed = alice_client.get("/chat/conversations").json()
    assert listed[0]["_id"] == group["_id"]
    assert listed[0]["latestMessage"]["content"] == "hi alice"


def test_outsider_cannot_read_or_post(alice, bob, carol, register):
    group = _team(alice, bob, carol)
    dave_client, _ = register("dave")

    res = dave_client.post(f"/group/message/{group['_id']}", json={"message": "let me in"})
    assert res.status_code == 403
    assert res.json() == {"message": "You are not a member of this group"}

    res = dave_client.get(f"/group/messages/{group['_id']}")
    assert res.status_code == 403


def test_removed_member_loses_access(alice, bob, carol):
    group = _team(alice, bob, carol)
    alice_client, _ = alice
    bob_client, bob_body = bob

    alice_client.put("/group/remove", json={"groupId": group["_id"], "userId": bob_body["_id"]})
    assert bob_client.get(f"/group/messages/{group['_id']}").status_code == 403


def test_group_message_to_unknown_group(alice, unknown_id):
    alice_client, _ = alice
    res = alice_client.post(f"/group/message/{unknown_id}", json={"message": "hi"})
    assert res.status_code == 404


def test_admin_cannot_be_removed(alice, bob, carol, store):
    group = _team(alice, bob, carol)
    alice_client, alice_body = alice

    res = alice_client.put("/group/remove", json={"groupId": group["_id"], "userId": alice_body["_id"]})
    assert res.status_code == 400
    assert res.json() == {"message": "The group admin cannot be removed"}

    stored = store.conversations.conversations[group["_id"]]
    assert stored.group_admin_id in stored.users
    assert alice_client.get(f"/group/messages/{group['_id']}").status_code == 200
