"""Aggregate validator tests — every request shape, valid and invalid.

Tests cover:
    Field independence: every failing field reported, not just the first
    Optional-field gates: NON_EMPTY, DEFINED, TRUTHY behave differently
    Enumeration rejection mentions the allowed set
    Idempotence: same input, same outcome
    Registry: validate(), ensure_valid(), get_schema()
"""

import pytest

from contextkit.core.errors import SchemaNotFoundError, ValidationError
from contextkit.core.validators import (
    SCHEMAS,
    ensure_valid,
    get_schema,
    validate,
    validate_ai_generation_request,
    validate_layer_data,
    validate_login_data,
    validate_relationship_data,
    validate_signup_data,
    validate_team_data,
    validate_team_invitation_data,
    validate_template_data,
)

VALID_UUID = "550e8400-e29b-41d4-a716-446655440000"
OTHER_UUID = "6fa459ea-ee8a-3ca4-894e-db77e160355e"


def _errors(outcome) -> tuple[str, ...]:
    assert not outcome
    return outcome.error.errors


# --- Signup / login -----------------------------------------------------------

def test_signup_valid():
    assert validate_signup_data(
        {"email": "ada@example.com", "username": "ada", "password": "correcthorse"},
    )


def test_signup_reports_every_failing_field():
    outcome = validate_signup_data({"email": "bad", "username": "ab", "password": "short"})
    assert outcome.error.field == "signup"
    assert outcome.error.message == "Validation failed"
    assert _errors(outcome) == (
        "Invalid email format for email",
        "username must be between 3 and 30 characters",
        "password must be at least 8 characters",
    )


def test_signup_empty_record_reports_required_once_per_field():
    assert _errors(validate_signup_data({})) == (
        "email is required",
        "username is required",
        "password is required",
    )


def test_login_valid_and_password_only_required():
    assert validate_login_data({"email": "a@b.com", "password": "x"})
    assert _errors(validate_login_data({"email": "a@b.com", "password": ""})) == (
        "password is required",
    )


# --- Templates ----------------------------------------------------------------

def test_template_without_optional_fields_passes():
    assert validate_template_data({"name": "abc", "content": "0123456789"})


def test_template_empty_description_is_skipped():
    assert validate_template_data(
        {"name": "abc", "content": "0123456789", "description": ""},
    )


def test_template_long_description_fails():
    outcome = validate_template_data(
        {"name": "abc", "content": "0123456789", "description": "d" * 501},
    )
    assert _errors(outcome) == ("description must be at most 500 characters",)


def test_template_null_tags_are_checked():
    outcome = validate_template_data(
        {"name": "abc", "content": "0123456789", "tags": None, "variables": {}},
    )
    assert _errors(outcome) == (
        "tags must be an array",
        "variables must be an array",
    )


def test_template_content_bounds():
    assert validate_template_data({"name": "abc", "content": "c" * 50_000})
    assert not validate_template_data({"name": "abc", "content": "c" * 50_001})
    assert not validate_template_data({"name": "abc", "content": "c" * 9})


# --- Context layers -----------------------------------------------------------

def test_layer_valid_with_all_optionals():
    assert validate_layer_data({
        "name": "me",
        "content": "x",
        "layer_type": "profile",
        "visibility": "shared",
        "priority": 5,
    })


def test_layer_truthy_gated_fields_skip_empty_values():
    assert validate_layer_data(
        {"name": "me", "content": "x", "layer_type": "", "visibility": None},
    )
    assert validate_layer_data(
        {"name": "me", "content": "x", "layer_type": 0, "visibility": False},
    )


def test_layer_truthy_gated_fields_check_empty_containers():
    outcome = validate_layer_data(
        {"name": "me", "content": "x", "layer_type": [], "visibility": {}},
    )
    assert _errors(outcome) == (
        "layer_type must be one of: profile, project, task, snippet, session, adhoc",
        "visibility must be one of: private, shared, public",
    )


def test_layer_rejects_unknown_type_and_visibility():
    outcome = validate_layer_data(
        {"name": "me", "content": "x", "layer_type": "global", "visibility": "secret"},
    )
    assert _errors(outcome) == (
        "layer_type must be one of: profile, project, task, snippet, session, adhoc",
        "visibility must be one of: private, shared, public",
    )


def test_layer_priority_checked_whenever_defined():
    base = {"name": "me", "content": "x"}
    assert not validate_layer_data({**base, "priority": 0})
    assert not validate_layer_data({**base, "priority": None})
    assert not validate_layer_data({**base, "priority": "5"})
    assert validate_layer_data({**base, "priority": 10})


# --- Relationships ------------------------------------------------------------

def test_relationship_valid():
    assert validate_relationship_data({
        "sourceLayerId": VALID_UUID,
        "targetLayerId": OTHER_UUID,
        "relationshipType": "requires",
    })


def test_relationship_reports_each_bad_field():
    outcome = validate_relationship_data({
        "sourceLayerId": "not-a-uuid",
        "relationshipType": "depends",
    })
    assert outcome.error.field == "relationship"
    assert _errors(outcome) == (
        "Invalid UUID format for sourceLayerId",
        "targetLayerId is required",
        "relationshipType must be one of: requires, enhances, conflicts, replaces",
    )


def test_relationship_rejects_uuid_with_trailing_newline():
    outcome = validate_relationship_data({
        "sourceLayerId": VALID_UUID + "\n",
        "targetLayerId": VALID_UUID + "\n",
        "relationshipType": "requires",
    })
    assert _errors(outcome) == (
        "Invalid UUID format for sourceLayerId",
        "Invalid UUID format for targetLayerId",
    )


# --- Teams --------------------------------------------------------------------

def test_team_valid_and_description_limit():
    assert validate_team_data({"name": "Core team"})
    assert _errors(validate_team_data({"name": "Core", "description": "d" * 501})) == (
        "description must be at most 500 characters",
    )


def test_invitation_rejects_unknown_role():
    outcome = validate_team_invitation_data({"email": "x@y.com", "role": "superadmin"})
    assert outcome.error.field == "invitation"
    (message,) = _errors(outcome)
    assert "owner, admin, member, viewer" in message


def test_invitation_role_optional():
    assert validate_team_invitation_data({"email": "x@y.com"})
    assert validate_team_invitation_data({"email": "x@y.com", "role": ""})
    assert validate_team_invitation_data({"email": "x@y.com", "role": "viewer"})


def test_invitation_role_skipped_for_zero_and_false():
    assert validate_team_invitation_data({"email": "x@y.com", "role": 0})
    assert validate_team_invitation_data({"email": "x@y.com", "role": False})


def test_invitation_empty_container_role_is_checked():
    for role in ([], {}):
        outcome = validate_team_invitation_data({"email": "x@y.com", "role": role})
        (message,) = _errors(outcome)
        assert message.startswith("role must be one of:")


# --- AI generation ------------------------------------------------------------

def test_ai_generation_valid():
    assert validate_ai_generation_request(
        {"prompt": "hi", "provider": "anthropic", "temperature": 0},
    )


def test_ai_generation_temperature_zero_is_checked_and_passes():
    assert validate_ai_generation_request({"prompt": "p", "temperature": 0.0})


def test_ai_generation_provider_gate():
    assert validate_ai_generation_request({"prompt": "p", "provider": 0})
    assert validate_ai_generation_request({"prompt": "p", "provider": False})
    assert not validate_ai_generation_request({"prompt": "p", "provider": {}})
    assert not validate_ai_generation_request({"prompt": "p", "provider": []})


def test_ai_generation_failures():
    outcome = validate_ai_generation_request(
        {"prompt": "", "provider": "ollama", "temperature": 2.5},
    )
    assert outcome.error.field == "ai_generation"
    assert _errors(outcome) == (
        "prompt is required",
        "provider must be one of: openai, anthropic, google, huggingface",
        "temperature must be between 0 and 2",
    )


# --- Properties ---------------------------------------------------------------

def test_validators_are_idempotent():
    data = {"email": "bad", "username": "ab", "password": "short"}
    first = validate_signup_data(data)
    second = validate_signup_data(data)
    assert bool(first) == bool(second)
    assert first.error.errors == second.error.errors
    assert first.error.field == second.error.field


def test_valid_input_never_raises_and_invalid_has_errors():
    for subject, schema in SCHEMAS.items():
        outcome = validate(subject, {})
        assert len(outcome.error.errors) >= 1
        assert outcome.error.field == schema.subject


# --- Registry -----------------------------------------------------------------

def test_registry_lists_all_subjects():
    assert set(SCHEMAS) == {
        "signup", "login", "template", "layer",
        "relationship", "team", "invitation", "ai_generation",
    }


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SCHEMAS["extra"] = SCHEMAS["login"]  # type: ignore[index]


def test_get_schema_unknown_subject():
    with pytest.raises(SchemaNotFoundError) as exc_info:
        get_schema("billing")
    assert exc_info.value.http_status == 404
    assert exc_info.value.subject == "billing"


def test_ensure_valid_returns_true_or_raises():
    assert ensure_valid("login", {"email": "a@b.com", "password": "pw"}) is True
    with pytest.raises(ValidationError) as exc_info:
        ensure_valid("login", {"email": "a@b.com"})
    assert exc_info.value.errors == ("password is required",)
