import pytest

from core.domain.models import TeacherUser, UserRecord, UserRole
from core.errors import MissingIdentityError
from core.services.auth_headers import (
    CallerIdentity,
    as_user_record,
    build_auth_headers,
    caller_identity,
)


def test_headers_use_id_and_role_when_present() -> None:
    user = {"id": "u1", "role": "admin", "email": "a@b.com"}

    assert build_auth_headers(user, "teacher") == {"x-user-id": "u1", "x-user-type": "admin"}


def test_headers_fall_back_to_email_and_resource_default_role() -> None:
    headers = build_auth_headers({"email": "a@b.com"}, "organization")

    assert headers == {"x-user-id": "a@b.com", "x-user-type": "organization"}


def test_backend_style_mapping_with_underscore_id() -> None:
    record = as_user_record({"_id": "abc", "email": "a@b.com", "emailVerified": True})

    assert record.id == "abc"
    assert record.email == "a@b.com"


def test_empty_id_counts_as_missing() -> None:
    identity = caller_identity(UserRecord(id="", email="a@b.com"), "parent")

    assert identity == CallerIdentity(id="a@b.com", role="parent")


@pytest.mark.parametrize("user", [{}, {"role": "admin"}, {"email": "", "name": "Nobody"}])
def test_missing_identity_is_rejected(user: dict) -> None:
    with pytest.raises(MissingIdentityError):
        build_auth_headers(user, "teacher")


@pytest.mark.parametrize(
    "user",
    [
        {"email": "a@b.com", "emailVerified": None},
        {"email": "a@b.com", "createdAt": ""},
        {"email": "a@b.com", "updatedAt": "not a date", "image": 3},
    ],
)
def test_unused_caller_fields_are_not_validated(user: dict) -> None:
    assert build_auth_headers(user, "teacher") == {"x-user-id": "a@b.com", "x-user-type": "teacher"}


class _ObjectId:
    def __init__(self, value: str) -> None:
        self._value = value

    def __str__(self) -> str:
        return self._value


@pytest.mark.parametrize(
    ("raw_id", "expected"),
    [(42, "42"), (_ObjectId("665f1c2e9b1e8a3d4c5b6a79"), "665f1c2e9b1e8a3d4c5b6a79")],
)
def test_non_string_ids_are_coerced(raw_id: object, expected: str) -> None:
    headers = build_auth_headers({"_id": raw_id, "email": "a@b.com"}, "student")

    assert headers["x-user-id"] == expected


def test_typed_account_and_enum_role() -> None:
    account = TeacherUser(id="t1", email="t@x.com", name="Tigist")

    assert build_auth_headers(account, "admin") == {"x-user-id": "t1", "x-user-type": "teacher"}
    assert caller_identity({"email": "p@x.com", "role": UserRole.PARENT}, "admin").role == "parent"
