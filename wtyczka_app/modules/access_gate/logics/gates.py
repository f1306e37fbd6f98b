"""Pure evaluation of date gates.

Nothing in here touches the database or the request: a decision is a
function of the gate definition, the raw stored threshold, the current time
and the admin claim.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from wtyczka_app.utils.time_utils import parse_iso_datetime

# --- Constants: Setting Keys ---
CONTACT_DATE = 'CONTACT_DATE'
PAYMENT_OPEN_DATE = 'PAYMENT_OPEN_DATE'

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class GateDefinition:
    """Static description of one date gate."""

    name: str
    setting_key: str
    default_open: bool
    open_message: str
    closed_message: str
    unconfigured_message: str
    admin_bypass: bool = False
    # HTTP status for a configured-but-closed decision on the check endpoint
    closed_status: int = 200


@dataclass
class AccessDecision:
    """Result of a gate check, serialised by ``AccessDecisionSchema``."""

    access: bool
    message: str
    ok: bool = True
    date: Optional[str] = None
    is_open: Optional[bool] = None
    days_remaining: Optional[int] = None
    is_admin: Optional[bool] = None
    # Naive stored value; set so callers can log it.
    naive_threshold: bool = False


# --- Gate Matrix ---
# Contacts fail open and payments fail closed; both defaults are product decisions.
CONTACTS_GATE = GateDefinition(
    name='contacts',
    setting_key=CONTACT_DATE,
    default_open=True,
    open_message='Contact page is available',
    closed_message='Kadra zostanie ujawniona wkrótce',
    unconfigured_message='Contact page is available',
)

PAYMENT_FORM_GATE = GateDefinition(
    name='payment-form',
    setting_key=PAYMENT_OPEN_DATE,
    default_open=False,
    open_message='Payment form is available',
    closed_message='Formularz płatności niedostępny',
    unconfigured_message='Formularz płatności niedostępny - data otwarcia nie została określona',
    closed_status=403,
)

PAYMENT_GATE = GateDefinition(
    name='payment',
    setting_key=PAYMENT_OPEN_DATE,
    default_open=False,
    open_message='Payment is available',
    closed_message='Formularz płatności niedostępny',
    unconfigured_message='Formularz płatności niedostępny - data otwarcia nie została określona',
    admin_bypass=True,
)

ADMIN_ACCESS_MESSAGE = 'Admin access granted'


def days_remaining(threshold: datetime, now: datetime) -> int:
    """Whole days until ``threshold``, rounded up."""
    return math.ceil((threshold - now) / ONE_DAY)


def evaluate_gate(
    gate: GateDefinition,
    raw_threshold: Optional[str],
    now: datetime,
    is_admin: bool = False,
    naive_tz: Optional[str] = None,
) -> AccessDecision:
    """
    Decide access for ``gate`` at ``now``.

    Raises:
        ValueError: ``raw_threshold`` is present but not a timestamp.
    """
    admin_claim = is_admin if gate.admin_bypass else None

    # The admin cookie only lifts a configured date; it never opens an unset one.
    if raw_threshold is None:
        return AccessDecision(
            access=gate.default_open,
            message=gate.unconfigured_message,
            is_admin=admin_claim,
        )

    threshold, was_naive = parse_iso_datetime(raw_threshold, naive_tz)
    is_open = now >= threshold

    if is_open:
        return AccessDecision(
            access=True,
            message=gate.open_message,
            date=raw_threshold,
            is_open=True,
            is_admin=admin_claim,
            naive_threshold=was_naive,
        )

    if gate.admin_bypass and is_admin:
        return AccessDecision(
            access=True,
            message=ADMIN_ACCESS_MESSAGE,
            date=raw_threshold,
            is_open=False,
            is_admin=True,
            naive_threshold=was_naive,
        )

    return AccessDecision(
        access=False,
        message=gate.closed_message,
        date=raw_threshold,
        is_open=False,
        days_remaining=days_remaining(threshold, now),
        is_admin=admin_claim,
        naive_threshold=was_naive,
    )


def decision_status(gate: GateDefinition, decision: AccessDecision) -> int:
    """HTTP status for a decision returned by a check endpoint."""
    if not decision.access and decision.date is not None:
        return gate.closed_status
    return 200
