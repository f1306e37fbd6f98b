from .routes import blueprint
from .events import register_events


def setup_module(app):
    register_events()
