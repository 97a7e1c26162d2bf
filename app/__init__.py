import logging

from flask import Flask
from app.config import Config
from app.logging_config import configure_app_logging
from app.services.greeting import GreetingSettings

log = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Application factory function"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_app_logging(app)

    # Settings are read once here and never mutated afterwards
    settings = GreetingSettings.from_config(app.config)
    app.extensions["greeting"] = settings

    # Register blueprints
    from app.routes import greeting_bp
    app.register_blueprint(greeting_bp)

    # Fail at startup, not on the first request, if the view is missing
    app.jinja_env.get_template("hola.html")

    log.info("Greeting background: %s", settings.background_style)
    return app
