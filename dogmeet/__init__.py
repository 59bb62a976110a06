import logging

from flask import Flask

from dogmeet.config import Config, validate_config

logger = logging.getLogger(__name__)


def create_app(config_overrides=None, store=None):
    app = Flask(__name__, static_folder="public", static_url_path="")

    # Configuration
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for key in validate_config(app.config):
        logger.warning("%s is not set; sheet requests will fail", key)

    # Appointment store: Google Sheets unless one is injected
    if store is None:
        from dogmeet.sheets import store_from_config
        store = store_from_config(app.config)
    app.extensions["appointment_store"] = store

    # Blueprints
    from dogmeet.appointments import bp as appointments_bp
    from dogmeet.errors import bp as errors_bp

    app.register_blueprint(appointments_bp)
    app.register_blueprint(errors_bp)

    return app
