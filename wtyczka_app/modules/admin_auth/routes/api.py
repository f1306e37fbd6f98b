from flask import current_app, jsonify, request

from ..logics.passphrase import new_admin_token, verify_passphrase
from . import blueprint


@blueprint.route('/verify-admin', methods=['POST'])
def verify_admin():
    """
    Exchange the shared payment-form passphrase for the admin bypass cookie.
    500 when no secret is configured, 400 when no password, 401 on mismatch.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    verify_passphrase(data.get('password'), current_app.config.get('PAYMENT_FORM_PASSWORD'))

    response = jsonify({'ok': True})
    response.set_cookie(
        current_app.config.get('ADMIN_COOKIE_NAME', 'admin-auth'),
        new_admin_token(),
        max_age=current_app.config.get('ADMIN_COOKIE_MAX_AGE', 30 * 60),
        path='/',
        httponly=True,
        secure=bool(current_app.config.get('ADMIN_COOKIE_SECURE')),
        samesite='Strict',
    )
    current_app.logger.info("Admin passphrase accepted from %s", request.remote_addr)
    return response, 200
