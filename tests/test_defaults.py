from datetime import timezone

import pytest

from core.domain.defaults import (
    MOCK_CLASS_ID,
    FallbackContext,
    ResourceType,
    get_descriptor,
    synthesize,
    synthesize_class,
)
from core.domain.models import CreateClassRequest, Gender, UserRecord


@pytest.mark.parametrize("resource_type", list(ResourceType))
def test_fallback_is_deterministic(resource_type: ResourceType) -> None:
    caller = UserRecord(id="u1", email="a@b.com", name="Ada", role="teacher")
    ctx = FallbackContext(requested_id="x-1", caller_user=caller)

    first = synthesize(resource_type, ctx)
    second = synthesize(resource_type, ctx)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.parametrize("resource_type", list(ResourceType))
def test_fallback_has_the_same_keys_as_a_parsed_payload(resource_type: ResourceType) -> None:
    ctx = FallbackContext(requested_id="a@b.com", caller_user=UserRecord(email="a@b.com"))
    fallback = synthesize(resource_type, ctx)
    model = get_descriptor(resource_type).model

    parsed = model.model_validate(fallback.to_payload())

    assert set(fallback.to_payload()) == set(parsed.to_payload())


def test_organization_default_matches_dashboard_placeholder() -> None:
    ctx = FallbackContext(requested_id="org-42", caller_user=UserRecord(email="t@x.com", role="teacher"))

    payload = synthesize(ResourceType.ORGANIZATION, ctx).to_payload()

    assert payload["_id"] == "org-42"
    assert payload["name"] == "Default Organization"
    assert payload["type"] == "school"
    assert payload["status"] == "active"
    for key in ("teachers", "students", "courses", "classes"):
        assert payload[key] == []
    assert payload["contactInfo"] == {"email": "t@x.com", "contactPerson": None, "phone": ""}
    assert payload["address"]["zipCode"] == ""


def test_student_default_enumerations() -> None:
    ctx = FallbackContext(requested_id="s1", caller_user=UserRecord(email="s@x.com"))

    student = synthesize(ResourceType.STUDENT, ctx)

    assert student.gender is Gender.OTHER
    assert student.subscription == "free"
    assert student.grade == 1
    assert student.section == "A"
    assert student.created_at.tzinfo == timezone.utc


def test_current_context_uses_default_id_and_email_owner() -> None:
    ctx = FallbackContext.for_current(UserRecord(email="p@x.com"))

    parent = synthesize(ResourceType.PARENT, ctx)

    assert parent.id == "default"
    assert parent.user_id == "p@x.com"
    assert parent.notification_preferences.model_dump() == {"email": True, "sms": False, "push": True}


def test_admin_default_permissions() -> None:
    admin = synthesize("admin", FallbackContext(requested_id="u9", caller_user=UserRecord(id="u9")))

    assert admin.permissions == ["read", "write", "delete"]
    assert admin.user_id == "u9"


def test_user_default_uses_email_local_part() -> None:
    user = synthesize(ResourceType.USER, FallbackContext(requested_id="jane@x.com", caller_user=UserRecord()))

    assert user.role == "teacher"
    assert user.name == "jane"
    assert user.email_verified is True


def test_class_fallback_copies_the_request() -> None:
    request = CreateClassRequest(class_name="Robotics", courses=["c1"], max_students=20)

    created = synthesize_class(request, UserRecord(email="t@x.com"))

    assert created.id == MOCK_CLASS_ID
    assert created.class_name == "Robotics"
    assert created.courses == ["c1"]
    assert created.created_by.user_id == "t@x.com"
    assert created.settings is not None and created.settings.allow_student_enrollment is True
