from flask import current_app

from wtyczka_app.core.signals import payment_created


def on_payment_created(sender, payment_id, user_id, has_confirmation_file, **kwargs):
    current_app.logger.info(
        "Payment %s stored for user %s (confirmation file: %s)",
        payment_id, user_id, "yes" if has_confirmation_file else "no",
    )


def register_events():
    """Connect signals."""
    payment_created.connect(on_payment_created)
