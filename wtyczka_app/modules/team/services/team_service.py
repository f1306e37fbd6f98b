from typing import Dict, List

from wtyczka_app.models import TeamMember
from ..schemas import TeamMemberSchema


class TeamService:
    @staticmethod
    def list_members() -> List[Dict[str, object]]:
        members = TeamMember.query.order_by(TeamMember.display_order, TeamMember.id).all()
        return TeamMemberSchema(many=True).dump(members)
