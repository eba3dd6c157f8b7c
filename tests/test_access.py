"""Unit tests for hypot.services.access — ownership-gated access list updates."""

from hypot.core.errors import ErrorCode
from hypot.models.property import Property
from hypot.services import access, properties


def test_owner_replaces_access_list(db, make_user):
    bob_id, bob_token = make_user("bob")
    owner_id, owner_token = make_user("alice")
    prop_id = properties.register_property(db, owner_id, owner_token, "file1", "files/file1", False, ["OLD"]).data["id"]

    result = access.update_access_list(db, owner_id, owner_token, prop_id, [bob_id])
    assert result.status is True
    assert result.data["shared"] == [bob_id]
    assert db.get(Property, prop_id).shared == [bob_id]

    # the new list grants read access
    assert properties.get_property(db, bob_id, bob_token, prop_id).status is True


def test_revoking_access(db, make_user):
    bob_id, bob_token = make_user("bob")
    owner_id, owner_token = make_user("alice")
    prop_id = properties.register_property(db, owner_id, owner_token, "file1", "files/file1", False, [bob_id]).data["id"]

    access.update_access_list(db, owner_id, owner_token, prop_id, [])
    result = properties.get_property(db, bob_id, bob_token, prop_id)
    assert result.code == ErrorCode.PROPERTY_NOT_FOUND


def test_shared_user_cannot_update(db, make_user):
    bob_id, bob_token = make_user("bob")
    owner_id, owner_token = make_user("alice")
    prop_id = properties.register_property(db, owner_id, owner_token, "file1", "files/file1", False, [bob_id]).data["id"]

    result = access.update_access_list(db, bob_id, bob_token, prop_id, [bob_id, "EVE"])
    assert result.code == ErrorCode.NOT_OWNER
    assert db.get(Property, prop_id).shared == [bob_id]


def test_public_property_needs_ownership(db, make_user):
    owner_id, owner_token = make_user("alice")
    prop_id = properties.register_property(db, owner_id, owner_token, "file1", "files/file1", True, []).data["id"]
    other_id, other_token = make_user("bob")

    result = access.update_access_list(db, other_id, other_token, prop_id, [other_id])
    assert result.code == ErrorCode.NOT_OWNER


def test_stranger_sees_not_found(db, make_user):
    owner_id, owner_token = make_user("alice")
    prop_id = properties.register_property(db, owner_id, owner_token, "file1", "files/file1", False, []).data["id"]
    other_id, other_token = make_user("bob")

    result = access.update_access_list(db, other_id, other_token, prop_id, [other_id])
    assert result.code == ErrorCode.PROPERTY_NOT_FOUND


def test_missing_property(db, make_user):
    user_id, token = make_user("alice")
    result = access.update_access_list(db, user_id, token, "ABCDEF012345", [])
    assert result.code == ErrorCode.PROPERTY_NOT_FOUND


def test_requires_session(db, make_user):
    user_id, _ = make_user("alice")
    result = access.update_access_list(db, user_id, "bogus", "ABCDEF012345", [])
    assert result.code == ErrorCode.SESSION_NOT_FOUND
