# crud.py
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster.db.models import Person
from roster.db.validation import (
    RecordInvalid,
    TAKEN,
    Validator,
    full_message,
    person_validator,
)
from roster.logging import get_logger


logger = get_logger(__file__)


class CRUDBase:

    validator: Optional[Validator] = None

    def __init__(self, model):
        self.model = model

    def get_columns(self):
        return [col.name for col in self.model.__table__.columns]

    def validate_input(self, session: Session, record: dict) -> dict:
        """Drop keys that are not columns of the model."""
        if session is None:
            raise ValueError("A database session is required for validation.")

        columns = self.get_columns()
        for key in record.keys() - set(columns):
            logger.warning("Key '%s' not in model columns, removing from record.", key)
        return {k: v for k, v in record.items() if k in columns}

    def build(self, session: Session, record: dict):
        """Return an unsaved model instance; raise ``RecordInvalid`` if it fails validation."""
        obj = self.model(**self.validate_input(session, record))
        if self.validator is not None:
            result = self.validator.validate(session, obj)
            if not result.is_valid:
                logger.info(
                    "Rejected %s record: %s", self.model.__tablename__, result.errors
                )
                raise RecordInvalid(result.errors)
        return obj

    def create(self, session: Session, record: dict):
        obj = self.build(session, record)
        session.add(obj)
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            translated = self.translate_integrity_error(exc)
            if translated is exc:
                raise
            raise translated from exc
        session.refresh(obj)
        logger.info("Inserted into %s: id=%s", self.model.__tablename__, obj.id)
        return obj

    def translate_integrity_error(self, exc: IntegrityError) -> Exception:
        """Map a store-level constraint failure onto a validation error when possible."""
        return exc


class PersonCRUD(CRUDBase):

    validator = person_validator

    def __init__(self):
        super().__init__(Person)

    def translate_integrity_error(self, exc: IntegrityError) -> Exception:
        # sqlite reports "UNIQUE constraint failed: person.email"
        if "person.email" in str(exc.orig):
            logger.info("Email uniqueness enforced by the store on insert")
            return RecordInvalid([full_message("email", TAKEN)])
        return exc
