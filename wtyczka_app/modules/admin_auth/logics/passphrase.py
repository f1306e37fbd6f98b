import hmac
import secrets
from typing import Optional

from wtyczka_app.core.error_handlers import AuthorizationError, ConfigurationError, ValidationError


def verify_passphrase(submitted: Optional[str], expected: Optional[str]) -> None:
    """
    Compare a submitted passphrase with the server secret.

    Raises:
        ConfigurationError: no secret is configured (nobody can pass).
        ValidationError: nothing was submitted.
        AuthorizationError: the passphrase does not match.
    """
    if not expected:
        raise ConfigurationError('Server misconfiguration: PAYMENT_FORM_PASSWORD is not set.')

    if not isinstance(submitted, str) or not submitted:
        raise ValidationError('Missing password')

    if not hmac.compare_digest(submitted.encode('utf-8'), expected.encode('utf-8')):
        raise AuthorizationError('Unauthorized')


def new_admin_token() -> str:
    return secrets.token_hex(32)
