from flask import jsonify

from ..logics.gates import CONTACTS_GATE, PAYMENT_FORM_GATE, PAYMENT_GATE, decision_status
from ..schemas import AccessDecisionSchema
from ..services.gate_service import GateService
from . import blueprint


def _decision_response(gate):
    decision = GateService.check_request(gate)
    return jsonify(AccessDecisionSchema().dump(decision)), decision_status(gate, decision)


@blueprint.route('/contacts', methods=['GET'])
def check_contacts_access():
    """
    Is the staff list revealed yet? Open by default when CONTACT_DATE is unset.
    A closed gate still answers 200 so the page can show its countdown.
    """
    return _decision_response(CONTACTS_GATE)


@blueprint.route('/payment-form', methods=['GET'])
def check_payment_form_access():
    """
    Is the payment form open? Closed by default when PAYMENT_OPEN_DATE is unset.
    A configured-but-future date answers 403 with the full decision body.
    """
    return _decision_response(PAYMENT_FORM_GATE)


@blueprint.route('/payment', methods=['GET'])
def check_payment_access():
    """
    Payment data access, with the admin cookie as a bypass.
    ``isOpen`` always reflects the date alone.
    """
    return _decision_response(PAYMENT_GATE)
