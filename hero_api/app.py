# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit
import sys

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from hero_api.container import Container
from hero_api.shared.config import AppConfig, load_config
from hero_api.shared.errors import ConfigurationError
from hero_api.shared.logging import logger, setup_logging
from hero_api.shared.middleware.cors import configure_cors
from hero_api.shared.middleware.error_handler import configure_error_handling
from hero_api.shared.middleware.request_logger import configure_request_logging

ROUTES = (
    ("POST", "/api/login", "Login"),
    ("POST", "/api/logout", "Logout (Auth Required)"),
    ("GET", "/api/heroes", "Get all heroes"),
    ("GET", "/api/heroes/<id>", "Get hero by ID"),
    ("POST", "/api/heroes", "Create new hero (Auth Required)"),
    ("PUT", "/api/heroes/<id>", "Update hero (Auth Required)"),
    ("DELETE", "/api/heroes/<id>", "Delete hero (Auth Required)"),
)


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
    start_sweeper: bool = True,
) -> Flask:
    """Build the Flask app; raises ConfigurationError if credentials cannot be loaded."""

    config = config or (container.config if container else load_config())
    container = container or Container(config)

    container.bootstrap()

    app = Flask(__name__)
    app.extensions["hero_api"] = container

    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_cors(app, allowed_origins=config.security.allowed_origins)
    configure_error_handling(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.heroes_controller.as_blueprint())

    if start_sweeper:
        container.token_sweeper.start()

    logger.info(f"Flask app initialized (store={config.hero_store})")
    return app


def main() -> None:
    config = load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    try:
        app = create_app(config, container=container)
    except ConfigurationError as exc:
        logger.critical(f"Error loading config: {exc}")
        sys.exit(1)
    except SQLAlchemyError as exc:
        logger.critical(f"Error preparing database: {type(exc).__name__}: {exc}")
        sys.exit(1)
    atexit.register(container.shutdown)

    logger.info(f"Server starting on port {config.port} (env={config.app_env})...")
    for method, path, description in ROUTES:
        logger.info(f"  {method:<6} {path:<18} - {description}")

    try:
        app.run(host=config.host, port=config.port, threaded=True)
    finally:
        container.shutdown()


if __name__ == "__main__":
    main()
