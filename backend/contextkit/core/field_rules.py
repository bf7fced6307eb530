"""Field Rules — declarative per-field check chains and the collect-and-fail evaluator.

Invariants:
    - All functions are PURE: the input record is read, never mutated
    - Within a FieldRule the first failing Check stops that chain
    - Every FieldRule is evaluated regardless of earlier failures
    - The failure list holds one message per failed Check, in declaration order
    - Aggregate failure: field == schema.subject, message == "Validation failed"

Design Decisions:
    - Schemas are data (frozen dataclasses + tuples): adding a request shape is
      a new Schema, not a new copy of the collect-and-fail loop
    - Gate decides whether an optional field runs at all; required fields use
      Gate.ALWAYS with `required` first in the chain
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from contextkit.core.errors import ValidationError
from contextkit.core.outcome import PASSED, Outcome
from contextkit.core.predicates import MISSING, is_absent, is_falsy_scalar, required

AGGREGATE_MESSAGE = "Validation failed"


class Gate(str, Enum):
    """When an optional field group is evaluated."""
    ALWAYS = "always"        # required fields
    NON_EMPTY = "non_empty"  # present, not None, not ""
    DEFINED = "defined"      # key present, any value (None included)
    TRUTHY = "truthy"        # not MISSING/None/""/0/False/NaN; [] and {} run

    def admits(self, value: Any) -> bool:
        if self is Gate.ALWAYS:
            return True
        if self is Gate.NON_EMPTY:
            return not is_absent(value)
        if self is Gate.DEFINED:
            return value is not MISSING
        return not is_falsy_scalar(value)


@dataclass(frozen=True)
class Check:
    """One predicate bound to its constraint parameters."""
    predicate: Callable[..., Outcome]
    args: tuple = ()

    def run(self, value: Any, field_name: str) -> Outcome:
        return self.predicate(value, *self.args, field_name)

    def describe(self) -> str:
        name = self.predicate.__name__
        if not self.args:
            return name
        shown = ", ".join(
            "|".join(a) if isinstance(a, tuple) else str(a) for a in self.args
        )
        return f"{name}({shown})"


@dataclass(frozen=True)
class FieldRule:
    name: str
    checks: tuple[Check, ...]
    gate: Gate = Gate.ALWAYS

    @property
    def optional(self) -> bool:
        return self.gate is not Gate.ALWAYS

    def evaluate(self, data: Mapping[str, Any]) -> Outcome:
        value = data.get(self.name, MISSING)
        if not self.gate.admits(value):
            return PASSED
        for step in self.checks:
            outcome = step.run(value, self.name)
            if not outcome:
                return outcome
        return PASSED


@dataclass(frozen=True)
class Schema:
    """Named request shape: subject + ordered field groups."""
    subject: str
    fields: tuple[FieldRule, ...] = field(default_factory=tuple)

    def field_names(self) -> list[str]:
        return [rule.name for rule in self.fields]


def collect_errors(schema: Schema, data: Mapping[str, Any]) -> list[str]:
    """Run every field group and return the ordered failure messages."""
    errors: list[str] = []
    for rule in schema.fields:
        outcome = rule.evaluate(data)
        if not outcome:
            errors.append(outcome.error.message)
    return errors


def validate_record(schema: Schema, data: Any) -> Outcome:
    """Validate one input record against `schema`, aggregating all failures."""
    if not isinstance(data, Mapping):
        errors = [f"{schema.subject} must be an object"]
    else:
        errors = collect_errors(schema, data)
    if errors:
        return Outcome(ValidationError(AGGREGATE_MESSAGE, schema.subject, errors))
    return PASSED


# --- Rule builders ------------------------------------------------------------

def check(predicate: Callable[..., Outcome], *args: Any) -> Check:
    return Check(predicate, tuple(args))


def required_field(name: str, *checks: Check) -> FieldRule:
    return FieldRule(name, (Check(required),) + checks, Gate.ALWAYS)


def optional_field(name: str, gate: Gate, *checks: Check) -> FieldRule:
    return FieldRule(name, checks, gate)
