from typing import Optional

# --- Constants: Application Status ---
STATUS_NONE = 'none'                  # nothing submitted
STATUS_REGISTRATION = 'registration'  # registered, payment form not sent
STATUS_PENDING = 'pending'            # payment sent, awaiting verification
STATUS_QUALIFIED = 'qualified'        # organisers confirmed the payment


def application_status(has_registration: bool, has_payment: bool, qualified: Optional[bool]) -> str:
    """Collapse the participant's records into one status label."""
    if not has_registration:
        return STATUS_NONE
    if not has_payment:
        return STATUS_REGISTRATION
    if qualified is True:
        return STATUS_QUALIFIED
    return STATUS_PENDING
