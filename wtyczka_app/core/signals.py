"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker (Flask's signalling backend) to let modules react to each
other without importing one another.

Usage:
    # Publisher (sender)
    from wtyczka_app.core.signals import registration_created
    registration_created.send(None, registration_id=1, user_id='abc')

    # Subscriber (receiver) - in module's events.py
    @registration_created.connect
    def on_registration_created(sender, **kwargs):
        ...
"""
from blinker import Namespace

enrolment_signals = Namespace()

# Signal: Fired after a registration row is committed
# Payload: registration_id, user_id, email
registration_created = enrolment_signals.signal('registration_created')

# Signal: Fired after a payment row is committed
# Payload: payment_id, user_id, has_confirmation_file
payment_created = enrolment_signals.signal('payment_created')

# Signal: Fired after a payment confirmation file is written or removed
# Payload: user_id, file_name, action ('stored' | 'deleted')
confirmation_file_changed = enrolment_signals.signal('confirmation_file_changed')
