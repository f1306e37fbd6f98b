"""``flask gates`` command: show how each date gate answers right now."""

import click
from flask.cli import AppGroup

from .exceptions import GateUnavailableError
from .interface import AccessGateInterface
from .logics.gates import CONTACTS_GATE, PAYMENT_FORM_GATE, PAYMENT_GATE

gates_cli = AppGroup("gates", help="Inspect the date gates.")


@gates_cli.command("status")
@click.option("--admin", is_flag=True, help="Evaluate as a holder of the admin cookie.")
def gate_status_command(admin: bool) -> None:
    for gate in (CONTACTS_GATE, PAYMENT_FORM_GATE, PAYMENT_GATE):
        try:
            decision = AccessGateInterface.check(gate, is_admin=admin)
        except GateUnavailableError as exc:
            click.echo(f"{gate.name:<13} ERROR   {gate.setting_key}: {exc.message}")
            continue

        state = "open" if decision.access else "closed"
        detail = decision.date or "not configured"
        if decision.days_remaining is not None:
            detail += f" ({decision.days_remaining} days left)"
        click.echo(f"{gate.name:<13} {state:<7} {detail}")
