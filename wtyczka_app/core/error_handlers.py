"""
Error Handlers for Wtyczka

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any


class WtyczkaError(Exception):
    """Base exception class for Wtyczka."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        response = {
            'ok': False,
            'error': self.message,
            'code': self.code,
        }
        if self.details:
            response['details'] = self.details
        return response


class NotFoundError(WtyczkaError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(WtyczkaError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class ConflictError(WtyczkaError):
    """Resource already exists."""

    def __init__(self, message: str = 'Resource already exists'):
        super().__init__(
            message=message,
            code='CONFLICT',
            status_code=409
        )


class AuthorizationError(WtyczkaError):
    """Credentials rejected."""

    def __init__(self, message: str = 'Unauthorized'):
        super().__init__(
            message=message,
            code='UNAUTHORIZED',
            status_code=401
        )


class ConfigurationError(WtyczkaError):
    """Server is missing required configuration."""

    def __init__(self, message: str = 'Server misconfiguration'):
        super().__init__(
            message=message,
            code='MISCONFIGURED',
            status_code=500
        )


class PersistenceError(WtyczkaError):
    """A write to the data store failed."""

    def __init__(self, message: str = 'Unexpected server error'):
        super().__init__(
            message=message,
            code='SERVER_ERROR',
            status_code=500
        )


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'ok': False,
        'error': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(WtyczkaError)
    def handle_wtyczka_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message}")
        else:
            current_app.logger.info(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(413)
    def handle_too_large(error):
        return error_response('Request body too large', 'PAYLOAD_TOO_LARGE', 413)

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Unexpected server error', 'SERVER_ERROR', 500)
        return error
