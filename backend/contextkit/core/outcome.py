"""Outcome — explicit success/failure value returned by every check.

Invariants:
    - Success: error is None and the Outcome is truthy
    - Failure: error is a ValidationError and the Outcome is falsy
    - Outcomes are frozen; PASSED is shared by every successful check

Design Decisions:
    - Return values (not exceptions) inside the core: a failing field check is a
      normal result the aggregator folds into its message list
    - unwrap() is the single place that turns a failure into a raise, used at
      the HTTP boundary where the global handler renders it
"""

from dataclasses import dataclass

from contextkit.core.errors import ValidationError


@dataclass(frozen=True)
class Outcome:
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.error is None

    def unwrap(self) -> bool:
        """Return True on success, raise the carried ValidationError otherwise."""
        if self.error is not None:
            raise self.error
        return True


PASSED = Outcome()


def failed(message: str, field: str) -> Outcome:
    """Single-field failure."""
    return Outcome(ValidationError(message, field))
