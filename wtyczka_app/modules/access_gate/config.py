from .logics.gates import CONTACTS_GATE, PAYMENT_GATE


class AccessGateConfig:
    """Default configuration for the Access Gate Module."""
    # Data endpoints guarded before their views run. Page routes and
    # /api/check-access/* are never listed here. The views re-check their
    # own gate as well.
    GATED_PATH_RULES = (
        (('/api/team-members', '/api/data/team'), CONTACTS_GATE),
        (('/api/payments', '/api/data/payment'), PAYMENT_GATE),
    )
