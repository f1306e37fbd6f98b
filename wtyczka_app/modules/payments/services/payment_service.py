from typing import Any, Dict, Optional

from flask import current_app
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wtyczka_app.core.error_handlers import ConflictError, PersistenceError, ValidationError
from wtyczka_app.core.signals import payment_created
from wtyczka_app.models import Payment, Registration, db
from wtyczka_app.utils.time_utils import utcnow
from ..schemas import PaymentSchema, PaymentUserSchema


class PaymentService:
    """Create and look up payment declarations."""

    @staticmethod
    def get_for_user(user_id: str) -> Optional[Payment]:
        return Payment.query.filter_by(user_id=user_id).first()

    @staticmethod
    def serialize(payment: Optional[Payment]) -> Optional[Dict[str, Any]]:
        if payment is None:
            return None
        return PaymentSchema().dump(payment)

    @classmethod
    def create(cls, user_payload: Any, payment_payload: Any) -> Payment:
        """
        Validate and insert a payment for a registered user.

        Raises:
            ValidationError: missing user, invalid fields or no registration yet.
            ConflictError: the user already sent the payment form.
            PersistenceError: the insert failed.
        """
        try:
            user = PaymentUserSchema().load(user_payload or {})
        except SchemaValidationError as exc:
            raise ValidationError('Missing user', errors=exc.messages) from exc

        if not isinstance(payment_payload, dict):
            raise ValidationError('Missing payment')

        try:
            fields = PaymentSchema().load(payment_payload)
        except SchemaValidationError as exc:
            raise ValidationError('Validation failed', errors=exc.messages) from exc

        registration = Registration.query.filter_by(user_id=user['id']).first()
        if registration is None:
            raise ValidationError('Registration required before payment')

        if cls.get_for_user(user['id']) is not None:
            raise ConflictError('Payment already exists')

        confirmation = fields.get('payment_confirmation_file')
        if confirmation is not None and not confirmation.get('uploaded_at'):
            confirmation['uploaded_at'] = utcnow().isoformat()

        payment = Payment(user_id=user['id'], registration_id=registration.id, **fields)
        db.session.add(payment)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise ConflictError('Payment already exists') from exc
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.exception("Insert payment error")
            raise PersistenceError('Failed to create payment') from exc

        payment_created.send(
            current_app._get_current_object(),
            payment_id=payment.id,
            user_id=payment.user_id,
            has_confirmation_file=confirmation is not None,
        )
        return payment
