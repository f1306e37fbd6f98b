from flask import current_app

from wtyczka_app.core.signals import registration_created


def on_registration_created(sender, registration_id, user_id, email, **kwargs):
    current_app.logger.info("Registration %s stored for user %s <%s>", registration_id, user_id, email)


def register_events():
    """Connect signals."""
    registration_created.connect(on_registration_created)
