from flask import current_app
from .signals import access_denied, admin_bypass_used


def on_access_denied(sender, gate, path, days_remaining=None, **kwargs):
    """
    Event listener: record gate denials. They are expected traffic, so they
    go to INFO and never to ERROR.
    """
    current_app.logger.info(
        "Gate '%s' denied %s (days remaining: %s)", gate, path,
        days_remaining if days_remaining is not None else "n/a",
    )

def on_admin_bypass_used(sender, gate, path, **kwargs):
    current_app.logger.info("Admin cookie opened gate '%s' for %s", gate, path)

def register_events():
    """Connect signals."""
    access_denied.connect(on_access_denied)
    admin_bypass_used.connect(on_admin_bypass_used)
