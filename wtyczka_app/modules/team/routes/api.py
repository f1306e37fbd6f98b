from flask import jsonify

from wtyczka_app.modules.access_gate.interface import AccessGateInterface
from wtyczka_app.modules.access_gate.logics.gates import CONTACTS_GATE
from ..services.team_service import TeamService
from . import blueprint


@blueprint.route('/team-members', methods=['GET'])
@blueprint.route('/data/team', methods=['GET'])
def list_team_members():
    """Staff roster. Hidden until CONTACT_DATE."""
    AccessGateInterface.ensure(CONTACTS_GATE)
    return jsonify({'teamMembers': TeamService.list_members()})
