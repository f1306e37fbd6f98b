"""Unified application settings model for runtime configuration."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.sql import func

from wtyczka_app.core.extensions import db


class AppSettings(db.Model):
    """Key-value store for settings operators change without a deploy.

    Holds the gate dates (``CONTACT_DATE``, ``PAYMENT_OPEN_DATE``) as ISO-8601
    strings, plus event metadata used by validation.
    """

    __tablename__ = 'app_settings'

    EVENT_DATE = 'EVENT_DATE'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=True)
    description = db.Column(db.Text)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # --- Helper Methods ---

    @classmethod
    def get_raw(cls, key: str) -> Optional[str]:
        """Return the stored value for ``key`` without any fallback.

        Empty strings count as "not set".
        """
        setting = db.session.get(cls, key)
        if setting is None or setting.value in (None, ''):
            return None
        return setting.value

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a setting value by key with code-level default fallback.

        Args:
            key: The setting key
            default: Manual fallback if not found in DB AND not found in core/defaults.py

        Returns:
            The setting value or default
        """
        value = cls.get_raw(key)

        # 1. Check Database
        if value is not None:
            return value

        # 2. Check Code-Level Defaults
        from wtyczka_app.core.defaults import DEFAULT_APP_CONFIGS
        if key in DEFAULT_APP_CONFIGS:
            return DEFAULT_APP_CONFIGS[key]

        # 3. Fallback to manual default
        return default

    @classmethod
    def set(cls, key: str, value: Any, description: str = None) -> 'AppSettings':
        """Set or update a setting. The caller commits."""
        setting = db.session.get(cls, key)
        if setting is None:
            setting = cls(key=key, value=str(value), description=description)
            db.session.add(setting)
        else:
            setting.value = str(value)
            if description is not None:
                setting.description = description
        return setting

    @classmethod
    def unset(cls, key: str) -> bool:
        """Delete a setting. Returns False when it did not exist."""
        setting = db.session.get(cls, key)
        if setting is None:
            return False
        db.session.delete(setting)
        return True

    def __repr__(self) -> str:
        return f'<AppSettings {self.key}={self.value!r}>'
