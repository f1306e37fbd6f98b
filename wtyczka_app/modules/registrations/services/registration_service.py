from datetime import date
from typing import Any, Dict, Optional

from flask import current_app
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wtyczka_app.core.error_handlers import ConflictError, PersistenceError, ValidationError
from wtyczka_app.core.signals import registration_created
from wtyczka_app.models import AppSettings, Payment, Registration, db
from ..logics.status import application_status
from ..schemas import RegistrationSchema, RegistrationUserSchema


class RegistrationService:
    """Create and look up participant registrations."""

    @staticmethod
    def event_date() -> date:
        raw = AppSettings.get(AppSettings.EVENT_DATE)
        return date.fromisoformat(str(raw)[:10])

    @classmethod
    def build_schema(cls) -> RegistrationSchema:
        return RegistrationSchema(
            event_date=cls.event_date(),
            min_age=int(AppSettings.get('REGISTRATION_MIN_AGE', 18)),
            max_age=int(AppSettings.get('REGISTRATION_MAX_AGE', 70)),
        )

    @staticmethod
    def get_for_user(user_id: str) -> Optional[Registration]:
        return Registration.query.filter_by(user_id=user_id).first()

    @classmethod
    def serialize(cls, registration: Optional[Registration]) -> Optional[Dict[str, Any]]:
        if registration is None:
            return None
        return RegistrationSchema().dump(registration)

    @classmethod
    def create(cls, user_payload: Any, registration_payload: Any) -> Registration:
        """
        Validate and insert a registration.

        Raises:
            ValidationError: missing user or invalid form fields.
            ConflictError: the user already registered.
            PersistenceError: the insert failed.
        """
        try:
            user = RegistrationUserSchema().load(user_payload or {})
        except SchemaValidationError as exc:
            raise ValidationError('Missing user', errors=exc.messages) from exc

        if not isinstance(registration_payload, dict):
            raise ValidationError('Missing registration')

        try:
            fields = cls.build_schema().load(registration_payload)
        except SchemaValidationError as exc:
            raise ValidationError('Validation failed', errors=exc.messages) from exc

        if cls.get_for_user(user['id']) is not None:
            raise ConflictError('Registration already exists')

        registration = Registration(user_id=user['id'], email=user['email'], over18=True, **fields)
        db.session.add(registration)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise ConflictError('Registration already exists') from exc
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.exception("Insert registration error")
            raise PersistenceError('Failed to create registration') from exc

        registration_created.send(
            current_app._get_current_object(),
            registration_id=registration.id,
            user_id=registration.user_id,
            email=registration.email,
        )
        return registration

    @staticmethod
    def email_exists(email: str) -> bool:
        """Whether a registration already uses ``email`` (case-insensitive)."""
        normalized = email.strip().lower()
        return (
            Registration.query.filter(db.func.lower(Registration.email) == normalized).first()
            is not None
        )

    @classmethod
    def status_for_user(cls, user_id: str) -> Dict[str, Any]:
        registration = cls.get_for_user(user_id)
        payment = Payment.query.filter_by(user_id=user_id).first()
        qualified = payment.qualified if payment is not None else False
        return {
            'ok': True,
            'registration': registration is not None,
            'payment': payment is not None,
            'qualified': bool(qualified),
            'status': application_status(registration is not None, payment is not None, qualified),
        }
