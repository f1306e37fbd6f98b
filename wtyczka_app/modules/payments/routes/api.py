from flask import jsonify, request

from wtyczka_app.core.error_handlers import ValidationError
from wtyczka_app.modules.access_gate.interface import AccessGateInterface
from wtyczka_app.modules.access_gate.logics.gates import PAYMENT_GATE
from ..services.payment_service import PaymentService
from . import blueprint

# Every view re-checks the PAYMENT_OPEN_DATE gate (admin cookie bypasses it).


def _required_user_id() -> str:
    user_id = request.args.get('userId', '').strip()
    if not user_id:
        raise ValidationError('Missing userId')
    return user_id


@blueprint.route('/payments', methods=['GET'])
@blueprint.route('/data/payment', methods=['GET'])
def get_payment():
    """Payment of ``?userId=``, or ``{"data": null}`` when there is none."""
    AccessGateInterface.ensure(PAYMENT_GATE)
    payment = PaymentService.get_for_user(_required_user_id())
    return jsonify({'data': PaymentService.serialize(payment)}), 200


@blueprint.route('/payments', methods=['POST'])
def create_payment():
    """Body: ``{"user": {"id"}, "payment": {...form fields}}``."""
    AccessGateInterface.ensure(PAYMENT_GATE)
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Invalid JSON body')

    payment = PaymentService.create(data.get('user'), data.get('payment'))
    return jsonify({'id': payment.id}), 201
