from .routes import blueprint
from .commands import team_cli


def setup_module(app):
    app.cli.add_command(team_cli)
