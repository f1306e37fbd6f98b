from flask import current_app, jsonify, request
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError

from wtyczka_app.core.error_handlers import ValidationError
from ..schemas import ApplicationStatusSchema, EmailCheckSchema
from ..services.registration_service import RegistrationService
from . import blueprint


def _required_user_id() -> str:
    user_id = request.args.get('userId', '').strip()
    if not user_id:
        raise ValidationError('Missing userId')
    return user_id


@blueprint.route('/registrations', methods=['GET'])
def get_registration():
    """Registration of ``?userId=``, or ``{"data": null}`` when there is none."""
    registration = RegistrationService.get_for_user(_required_user_id())
    return jsonify({'data': RegistrationService.serialize(registration)}), 200


@blueprint.route('/registrations', methods=['POST'])
def create_registration():
    """Body: ``{"user": {"id", "email"}, "registration": {...form fields}}``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Invalid JSON body')

    registration = RegistrationService.create(data.get('user'), data.get('registration'))
    return jsonify({'id': registration.id}), 201


@blueprint.route('/check-email', methods=['POST'])
def check_email():
    data = request.get_json(silent=True)
    try:
        payload = EmailCheckSchema().load(data if isinstance(data, dict) else {})
    except SchemaValidationError as exc:
        raise ValidationError('Email is required', errors=exc.messages) from exc

    try:
        exists = RegistrationService.email_exists(payload['email'])
    except SQLAlchemyError:
        # A failed lookup must not block the sign-up attempt.
        current_app.logger.exception("Email check error")
        exists = False
    return jsonify({'exists': exists})


@blueprint.route('/status', methods=['GET'])
def application_status():
    status = RegistrationService.status_for_user(_required_user_id())
    return jsonify(ApplicationStatusSchema().dump(status))
