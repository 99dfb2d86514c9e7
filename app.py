import logging
import os
import sys

from flask import Flask

from movies_core.api import api_bp
from movies_core.errors import install_json_error_handlers
from movies_core.logging_config import setup_logging
from movies_core.metrics import metrics_bp
from movies_core.store import MovieStore, get_store
from seed import seed_store

logger = logging.getLogger("movies_http")

DEFAULT_CONFIG = {
    "HOST": "127.0.0.1",
    "PORT": 8000,
    "SEED_MOVIES": True,
    "LOG_LEVEL": "INFO",
}


def create_app(test_config=None):
    app = Flask(__name__)

    app.config.from_mapping(DEFAULT_CONFIG)
    if test_config:
        app.config.from_mapping(test_config)

    setup_logging(app.config["LOG_LEVEL"])

    # Installing JSON error handlers & the movie store
    install_json_error_handlers(app)
    store = MovieStore()
    store.init_app(app)
    if app.config["SEED_MOVIES"]:
        seeded = seed_store(store)
        logger.info("Seeded store with %d movies", len(seeded))

    # HEALTH CHECK ENDPOINT
    @app.route("/health")
    def health():
        """
        Basic health endpoint for monitoring.
        Reports how many movies the store currently holds.
        """
        return {"status": "ok", "movies": len(get_store())}

    # Register blueprints
    app.register_blueprint(metrics_bp)
    app.register_blueprint(api_bp)

    return app


def run(app):
    host, port = app.config["HOST"], app.config["PORT"]
    logger.info("Listening at %s:%s", host, port)
    try:
        app.run(host=host, port=port)
    except OSError:
        # the only fatal condition: nothing can be served
        logger.critical("Can't start the server on %s:%s", host, port, exc_info=True)
        sys.exit(1)
    except SystemExit as e:
        # werkzeug exits on its own when the port can't be bound
        if e.code:
            logger.critical("Can't start the server on %s:%s", host, port)
        raise


app = create_app()

# Development only
if __name__ == "__main__":
    app.config["PORT"] = int(os.getenv("PORT", app.config["PORT"]))
    run(app)
