"""Record-level validation rules.

A :class:`Validator` holds an ordered list of independent rules. Each rule
looks at one attribute of a candidate object and returns an error message or
``None``. Every rule runs, so a candidate with several problems reports all
of them, in rule order.

Messages read ``"<Attribute> <problem>"``, e.g. ``"Email can't be blank"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from roster.db.models import Person

BLANK = "can't be blank"
TAKEN = "has already been taken"
WRONG_LENGTH = "is the wrong length (should be {count} characters)"

Rule = Callable[[Session, Any], Optional[str]]


class RecordInvalid(Exception):
    """Raised when a candidate record fails validation."""

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("Validation failed: " + ", ".join(self.errors))


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def humanize(attribute: str) -> str:
    return attribute.replace("_", " ").capitalize()


def full_message(attribute: str, message: str) -> str:
    return f"{humanize(attribute)} {message}"


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def presence(attribute: str) -> Rule:
    def rule(session: Session, candidate: Any) -> Optional[str]:
        if is_blank(getattr(candidate, attribute, None)):
            return full_message(attribute, BLANK)
        return None

    return rule


def uniqueness(attribute: str) -> Rule:
    """Reject values already stored for ``attribute`` in the candidate's table.

    Matching is exact (case-sensitive). The candidate's own row is excluded
    when it already has a primary key.
    """

    def rule(session: Session, candidate: Any) -> Optional[str]:
        value = getattr(candidate, attribute, None)
        if value is None:
            return None
        model = type(candidate)
        stmt = select(model.id).where(getattr(model, attribute) == value)
        if getattr(candidate, "id", None) is not None:
            stmt = stmt.where(model.id != candidate.id)
        with session.no_autoflush:
            taken = session.execute(stmt.limit(1)).first() is not None
        if taken:
            return full_message(attribute, TAKEN)
        return None

    return rule


def length(attribute: str, *, is_: int) -> Rule:
    """Require exactly ``is_`` characters. A missing value counts as empty."""

    def rule(session: Session, candidate: Any) -> Optional[str]:
        value = getattr(candidate, attribute, None)
        size = 0 if value is None else len(str(value))
        if size != is_:
            return full_message(attribute, WRONG_LENGTH.format(count=is_))
        return None

    return rule


class Validator:
    def __init__(self, rules: Iterable[Rule]):
        self.rules = list(rules)

    def validate(self, session: Session, candidate: Any) -> ValidationResult:
        if session is None:
            raise ValueError("A database session is required for validation.")
        result = ValidationResult()
        for rule in self.rules:
            message = rule(session, candidate)
            if message is not None:
                result.errors.append(message)
        return result


person_validator = Validator(
    [
        presence("username"),
        presence("email"),
        uniqueness("email"),
        length("phone", is_=10),
    ]
)


def validate(session: Session, candidate: Person) -> ValidationResult:
    """Run the Person rules against ``candidate``."""

    return person_validator.validate(session, candidate)
