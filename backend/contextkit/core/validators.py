"""Aggregate Validators — one schema and one entry point per request shape.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Each validate_* returns PASSED for valid input and a single aggregated
      failure Outcome otherwise; bad data never raises
    - SCHEMAS is read-only; subject names match ValidationError.field on failure

Design Decisions:
    - Field tables live in module-level Schema constants; the validate_* functions
      are thin named entry points so callers keep a stable per-shape API
    - ensure_valid() is the raising form for the HTTP boundary
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from contextkit.core.domain_types import (
    AI_PROVIDERS,
    LAYER_TYPES,
    RELATIONSHIP_TYPES,
    TEAM_ROLES,
    VISIBILITY_TYPES,
)
from contextkit.core.errors import SchemaNotFoundError
from contextkit.core.field_rules import (
    Gate,
    Schema,
    check,
    optional_field,
    required_field,
    validate_record,
)
from contextkit.core.outcome import Outcome
from contextkit.core.predicates import (
    is_array,
    is_email,
    is_one_of,
    is_uuid,
    length_between,
    max_length,
    min_length,
    number_between,
)


# --- Auth ---------------------------------------------------------------------

SIGNUP_SCHEMA = Schema("signup", (
    required_field("email", check(is_email)),
    required_field("username", check(length_between, 3, 30)),
    required_field("password", check(min_length, 8)),
))

LOGIN_SCHEMA = Schema("login", (
    required_field("email", check(is_email)),
    required_field("password"),
))


# --- Templates ----------------------------------------------------------------

TEMPLATE_SCHEMA = Schema("template", (
    required_field("name", check(length_between, 3, 100)),
    required_field("content", check(length_between, 10, 50_000)),
    optional_field("description", Gate.NON_EMPTY, check(max_length, 500)),
    optional_field("tags", Gate.DEFINED, check(is_array)),
    optional_field("variables", Gate.DEFINED, check(is_array)),
))


# --- Context layers -----------------------------------------------------------

LAYER_SCHEMA = Schema("layer", (
    required_field("name", check(length_between, 2, 100)),
    required_field("content", check(length_between, 1, 100_000)),
    optional_field("layer_type", Gate.TRUTHY, check(is_one_of, LAYER_TYPES)),
    optional_field("visibility", Gate.TRUTHY, check(is_one_of, VISIBILITY_TYPES)),
    optional_field("priority", Gate.DEFINED, check(number_between, 1, 10)),
))

RELATIONSHIP_SCHEMA = Schema("relationship", (
    required_field("sourceLayerId", check(is_uuid)),
    required_field("targetLayerId", check(is_uuid)),
    required_field("relationshipType", check(is_one_of, RELATIONSHIP_TYPES)),
))


# --- Teams --------------------------------------------------------------------

TEAM_SCHEMA = Schema("team", (
    required_field("name", check(length_between, 3, 100)),
    optional_field("description", Gate.NON_EMPTY, check(max_length, 500)),
))

INVITATION_SCHEMA = Schema("invitation", (
    required_field("email", check(is_email)),
    optional_field("role", Gate.TRUTHY, check(is_one_of, TEAM_ROLES)),
))


# --- AI generation ------------------------------------------------------------

AI_GENERATION_SCHEMA = Schema("ai_generation", (
    required_field("prompt", check(min_length, 1)),
    optional_field("provider", Gate.TRUTHY, check(is_one_of, AI_PROVIDERS)),
    optional_field("temperature", Gate.DEFINED, check(number_between, 0, 2)),
))


SCHEMAS: Mapping[str, Schema] = MappingProxyType({
    schema.subject: schema
    for schema in (
        SIGNUP_SCHEMA,
        LOGIN_SCHEMA,
        TEMPLATE_SCHEMA,
        LAYER_SCHEMA,
        RELATIONSHIP_SCHEMA,
        TEAM_SCHEMA,
        INVITATION_SCHEMA,
        AI_GENERATION_SCHEMA,
    )
})


# --- Entry points -------------------------------------------------------------

def validate_signup_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(SIGNUP_SCHEMA, data)


def validate_login_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(LOGIN_SCHEMA, data)


def validate_template_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(TEMPLATE_SCHEMA, data)


def validate_layer_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(LAYER_SCHEMA, data)


def validate_relationship_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(RELATIONSHIP_SCHEMA, data)


def validate_team_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(TEAM_SCHEMA, data)


def validate_team_invitation_data(data: Mapping[str, Any]) -> Outcome:
    return validate_record(INVITATION_SCHEMA, data)


def validate_ai_generation_request(data: Mapping[str, Any]) -> Outcome:
    return validate_record(AI_GENERATION_SCHEMA, data)


def get_schema(subject: str) -> Schema:
    """Look up a registered schema; unknown subjects raise SchemaNotFoundError."""
    try:
        return SCHEMAS[subject]
    except KeyError:
        raise SchemaNotFoundError(subject) from None


def validate(subject: str, data: Any) -> Outcome:
    """Validate `data` against the schema registered under `subject`."""
    return validate_record(get_schema(subject), data)


def ensure_valid(subject: str, data: Any) -> bool:
    """Raising form of validate(): True or ValidationError."""
    return validate(subject, data).unwrap()
