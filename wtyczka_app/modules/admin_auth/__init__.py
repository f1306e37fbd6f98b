from .routes import blueprint
