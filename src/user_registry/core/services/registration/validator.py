"""Registration payload validation."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from src.user_registry.entities.user import RegistrationRequest


@dataclass(frozen=True)
class Violation:
    field: str
    reason: str


@dataclass(frozen=True)
class Accepted:
    request: RegistrationRequest


@dataclass(frozen=True)
class Rejected:
    violations: tuple[Violation, ...]

    @property
    def fields(self) -> list[str]:
        return [violation.field for violation in self.violations]


def _violations_from(error: ValidationError) -> tuple[Violation, ...]:
    violations = []
    for item in error.errors():
        loc = item.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        violations.append(Violation(field=field, reason=item["msg"]))
    return tuple(violations)


def validate_registration(payload: Any) -> Accepted | Rejected:
    """Check a raw registration payload.

    Every field is checked; the result lists one violation per failing
    field, in declaration order. The payload is never mutated.
    """
    if not isinstance(payload, Mapping):
        return Rejected((Violation("body", "Expected an object with username, email and password"),))

    try:
        request = RegistrationRequest.model_validate(dict(payload))
    except ValidationError as e:
        return Rejected(_violations_from(e))

    return Accepted(request)
