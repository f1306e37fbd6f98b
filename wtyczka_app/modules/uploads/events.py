from flask import current_app

from wtyczka_app.core.signals import confirmation_file_changed


def on_confirmation_file_changed(sender, user_id, file_name, action, **kwargs):
    current_app.logger.info("Payment confirmation %s %s for user %s", file_name, action, user_id)


def register_events():
    """Connect signals."""
    confirmation_file_changed.connect(on_confirmation_file_changed)
