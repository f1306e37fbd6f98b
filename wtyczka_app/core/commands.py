"""Operator CLI for runtime settings.

The gate dates are changed out-of-band, never through the HTTP API:

    flask --app start_wtyczka_app settings set PAYMENT_OPEN_DATE 2025-09-15T10:00:00+02:00
    flask --app start_wtyczka_app settings get PAYMENT_OPEN_DATE
    flask --app start_wtyczka_app settings unset CONTACT_DATE
"""

from __future__ import annotations

import click
from flask import Flask
from flask.cli import AppGroup

from ..extensions import db

settings_cli = AppGroup("settings", help="Inspect and change AppSettings entries.")


@settings_cli.command("get")
@click.argument("key")
def get_setting_command(key: str) -> None:
    """Print the stored value of KEY."""
    from ..models import AppSettings

    setting = db.session.get(AppSettings, key)
    if setting is None:
        click.echo(f"{key} is not set")
        return
    click.echo(f"{key}={setting.value}")


@settings_cli.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--description", default=None, help="Optional human-readable note.")
def set_setting_command(key: str, value: str, description: str | None) -> None:
    """Store VALUE under KEY."""
    from ..models import AppSettings

    AppSettings.set(key, value, description=description)
    db.session.commit()
    click.echo(f"{key}={value}")


@settings_cli.command("unset")
@click.argument("key")
def unset_setting_command(key: str) -> None:
    """Delete KEY so its default applies again."""
    from ..models import AppSettings

    if AppSettings.unset(key):
        db.session.commit()
        click.echo(f"{key} removed")
    else:
        click.echo(f"{key} was not set")


def register_commands(app: Flask) -> None:
    app.cli.add_command(settings_cli)
