from datetime import datetime
from typing import Optional

from .logics.gates import AccessDecision, GateDefinition
from .services.gate_service import GateService


class AccessGateInterface:
    """
    Public Gateway for the Access Gate Module.
    Pattern: Facade
    """

    @staticmethod
    def check(gate: GateDefinition, now: Optional[datetime] = None, is_admin: bool = False) -> AccessDecision:
        """Evaluate a gate outside a request (CLI, other modules)."""
        return GateService.check(gate, now=now, is_admin=is_admin)

    @staticmethod
    def ensure(gate: GateDefinition) -> AccessDecision:
        """Enforce a gate inside a view; raises GateClosedError on denial."""
        return GateService.ensure_access(gate)
