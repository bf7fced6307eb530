"""Validation Schemas — Pydantic response models for the validation endpoints.

Invariants:
    - ValidationResult is only returned for payloads that passed every check
    - SubjectDescription.rules preserves schema declaration order
"""

from pydantic import BaseModel, Field

from contextkit.core.field_rules import Schema


class ValidationResult(BaseModel):
    """Successful validation of one payload."""
    valid: bool = True
    subject: str


class FieldDescription(BaseModel):
    name: str
    optional: bool
    gate: str
    checks: list[str]


class SubjectDescription(BaseModel):
    """Public description of one registered request shape."""
    subject: str
    rules: list[FieldDescription] = Field(default_factory=list)

    @classmethod
    def from_schema(cls, schema: Schema) -> "SubjectDescription":
        return cls(
            subject=schema.subject,
            rules=[
                FieldDescription(
                    name=rule.name,
                    optional=rule.optional,
                    gate=rule.gate.value,
                    checks=[c.describe() for c in rule.checks],
                )
                for rule in schema.fields
            ],
        )


class EnumCatalog(BaseModel):
    """Closed value sets accepted by the validators."""
    layer_types: list[str]
    visibility_types: list[str]
    relationship_types: list[str]
    team_roles: list[str]
    ai_providers: list[str]
