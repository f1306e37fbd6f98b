# File: wtyczka_app/core/config.py
# Infrastructure Layer: environment-driven configuration

import os
from dotenv import load_dotenv

load_dotenv()

# core/ -> wtyczka_app/ -> project root
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "wtyczka.db")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration for the Wtyczka backend."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(BASE_DIR, 'uploads')
    PAYMENT_UPLOAD_SUBDIR = 'payment-confirmations'
    MAX_UPLOAD_SIZE = 5 * 1024 * 1024
    # Hard ceiling for the whole request body; anything between this and
    # MAX_UPLOAD_SIZE gets a validation message instead of a bare 413.
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    # Admin passphrase gate
    PAYMENT_FORM_PASSWORD = os.environ.get('PAYMENT_FORM_PASSWORD')
    ADMIN_COOKIE_NAME = 'admin-auth'
    ADMIN_COOKIE_MAX_AGE = 30 * 60
    ADMIN_COOKIE_SECURE = os.environ.get('FLASK_ENV') == 'production' or _env_flag('ADMIN_COOKIE_SECURE')

    # Date gates
    # tz database name used for stored dates without an offset; None = server local time
    GATE_NAIVE_TIMEZONE = os.environ.get('GATE_NAIVE_TIMEZONE') or None

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON')

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes into."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
