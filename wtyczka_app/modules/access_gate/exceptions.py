from flask import current_app, jsonify


class AccessGateError(Exception):
    """Base exception for the access gate module."""
    pass

class GateUnavailableError(AccessGateError):
    """Raised when a gate cannot be evaluated (storage failure or bad stored date).

    This is "unknown", never "closed": callers answer 500 and must not
    present it as a countdown.
    """
    def __init__(self, setting_key: str, message: str = "Server error"):
        self.setting_key = setting_key
        self.message = message
        super().__init__(message)

class GateClosedError(AccessGateError):
    """Raised by code paths that enforce a gate instead of reporting it."""
    def __init__(self, gate_name: str, message: str = "Access denied"):
        self.gate_name = gate_name
        self.message = message
        super().__init__(message)


def handle_gate_unavailable(error: GateUnavailableError):
    """Infrastructure failure: 500 with ``ok: false``, logged with traceback."""
    current_app.logger.error(
        "Gate %s could not be evaluated: %s", error.setting_key, error.message,
        exc_info=error.__cause__ or error,
    )
    return jsonify({"ok": False, "error": "Server error"}), 500


def handle_gate_closed(error: GateClosedError):
    """Gate denial: bare error body with 403, not an error in the logs."""
    return jsonify({"error": error.message}), 403
