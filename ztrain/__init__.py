import logging

from flask import Flask

from ztrain import config


def configure_logging(level=None):
    logging.basicConfig(
        level=level or config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app():
    configure_logging()

    app = Flask(__name__)

    from ztrain.routes import bp

    app.register_blueprint(bp)
    return app
