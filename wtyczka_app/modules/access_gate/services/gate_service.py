from datetime import datetime
from typing import Optional

from flask import current_app, request
from sqlalchemy.exc import SQLAlchemyError

from wtyczka_app.models import AppSettings
from wtyczka_app.utils import time_utils
from ..exceptions import GateClosedError, GateUnavailableError
from ..logics.gates import AccessDecision, GateDefinition, evaluate_gate
from ..signals import access_denied, admin_bypass_used


class GateService:
    """Reads gate thresholds from AppSettings and evaluates them.

    Every call goes to the database; nothing is cached between requests so a
    date changed by an operator takes effect on the next request.
    """

    @staticmethod
    def read_threshold(setting_key: str) -> Optional[str]:
        """Stored threshold for ``setting_key``, or None when unconfigured."""
        try:
            return AppSettings.get_raw(setting_key)
        except SQLAlchemyError as exc:
            raise GateUnavailableError(setting_key) from exc

    @staticmethod
    def has_admin_claim() -> bool:
        """True when the request carries the admin cookie (presence only)."""
        return current_app.config.get('ADMIN_COOKIE_NAME', 'admin-auth') in request.cookies

    @classmethod
    def check(
        cls,
        gate: GateDefinition,
        now: Optional[datetime] = None,
        is_admin: bool = False,
    ) -> AccessDecision:
        """
        Evaluate ``gate`` against the stored threshold.
        Raises GateUnavailableError when the threshold cannot be read or parsed.
        """
        raw = cls.read_threshold(gate.setting_key)
        try:
            decision = evaluate_gate(
                gate,
                raw,
                now or time_utils.utcnow(),
                is_admin=is_admin,
                naive_tz=current_app.config.get('GATE_NAIVE_TIMEZONE'),
            )
        except ValueError as exc:
            raise GateUnavailableError(gate.setting_key, 'Malformed date') from exc

        if decision.naive_threshold:
            current_app.logger.warning(
                "%s=%r has no UTC offset; compared in %s time",
                gate.setting_key, raw,
                current_app.config.get('GATE_NAIVE_TIMEZONE') or 'server local',
            )
        return decision

    @classmethod
    def check_request(cls, gate: GateDefinition, now: Optional[datetime] = None) -> AccessDecision:
        """Evaluate ``gate`` for the current request and emit the matching signals."""
        is_admin = gate.admin_bypass and cls.has_admin_claim()
        decision = cls.check(gate, now=now, is_admin=is_admin)

        app = current_app._get_current_object()
        if not decision.access:
            access_denied.send(
                app,
                gate=gate.name,
                path=request.path,
                days_remaining=decision.days_remaining,
            )
        elif decision.is_admin and decision.is_open is not True:
            admin_bypass_used.send(app, gate=gate.name, path=request.path)
        return decision

    @classmethod
    def ensure_access(cls, gate: GateDefinition, now: Optional[datetime] = None) -> AccessDecision:
        """
        Enforce ``gate`` for the current request.
        Raises GateClosedError on denial.
        """
        decision = cls.check_request(gate, now=now)
        if not decision.access:
            raise GateClosedError(gate.name)
        return decision
