"""``flask team`` commands for maintaining the staff roster."""

import json

import click
from flask.cli import AppGroup

from wtyczka_app.models import TeamMember, db

team_cli = AppGroup("team", help="Maintain the staff roster shown on the contacts page.")


@team_cli.command("import")
@click.argument("roster", type=click.File("r", encoding="utf-8"))
@click.option("--replace", is_flag=True, help="Delete the current roster first.")
def import_roster_command(roster, replace: bool) -> None:
    """Load members from a JSON list of {name, role, photoUrl, email, facebookUrl}."""
    entries = json.load(roster)
    if not isinstance(entries, list):
        raise click.BadParameter("expected a JSON list", param_hint="ROSTER")

    if replace:
        TeamMember.query.delete()

    start = 0 if replace else (db.session.query(db.func.max(TeamMember.display_order)).scalar() or 0)
    for offset, entry in enumerate(entries, start=1):
        db.session.add(TeamMember(
            name=entry["name"],
            role=entry.get("role"),
            photo_url=entry.get("photoUrl", ""),
            email=entry["email"],
            facebook_url=entry.get("facebookUrl", ""),
            display_order=start + offset,
        ))
    db.session.commit()
    click.echo(f"Imported {len(entries)} team members")


@team_cli.command("list")
def list_roster_command() -> None:
    for member in TeamMember.query.order_by(TeamMember.display_order).all():
        click.echo(f"{member.display_order:>3}  {member.name}  <{member.email}>  {member.role or ''}")
