from blinker import Namespace

_signals = Namespace()

# Signal fired when a gate denies access (check endpoint or middleware)
# Arguments: app, gate, path, days_remaining
access_denied = _signals.signal('access-denied')

# Signal fired when the admin cookie opens a gate that is still closed
# Arguments: app, gate, path
admin_bypass_used = _signals.signal('admin-bypass-used')
