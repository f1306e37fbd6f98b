from flask import request

from .config import AccessGateConfig
from .services.gate_service import GateService


def match_gate(path: str, rules=AccessGateConfig.GATED_PATH_RULES):
    """Return the gate guarding ``path``, or None."""
    for prefixes, gate in rules:
        if path.startswith(prefixes):
            return gate
    return None


def init_gate_middleware(app):
    """Register the date-gate check before each request to a gated data endpoint."""

    @app.before_request
    def enforce_date_gates():
        # 1. Only data endpoints are guarded; pages render and ask /api/check-access themselves
        gate = match_gate(request.path)
        if gate is None:
            return None

        # 2. Re-evaluated on every request. Raises GateClosedError (403) or
        #    GateUnavailableError (500); both have registered handlers.
        GateService.ensure_access(gate)
        return None
