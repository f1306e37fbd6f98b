from .routes import blueprint
from .events import register_events
from .exceptions import (
    GateClosedError,
    GateUnavailableError,
    handle_gate_closed,
    handle_gate_unavailable,
)
from .middleware import init_gate_middleware
from .commands import gates_cli


def setup_module(app):
    """
    Initialize the Access Gate module.
    1. Register Error Handlers.
    2. Install the request gate.
    3. Connect Signals/Events.
    4. Add the `flask gates` command.
    The blueprint itself is registered by the module registry.
    """
    app.register_error_handler(GateUnavailableError, handle_gate_unavailable)
    app.register_error_handler(GateClosedError, handle_gate_closed)

    init_gate_middleware(app)

    register_events()

    app.cli.add_command(gates_cli)

    app.logger.info("Access Gate Module Initialized.")
