# app/__init__.py

"""
Flask Application Factory

This module provides the create_app function to initialize and configure the Flask
application. Initialization is split across the app/init/ package.
"""

import logging
from flask import Flask

logger = logging.getLogger(__name__)


def create_app(config_object='web_config.Config'):
    """
    Application factory function for creating a Flask app instance.

    Loads configuration from the specified config object, sets up logging,
    the profile store, blueprints and CLI commands.

    Args:
        config_object: The configuration object to load (default is 'web_config.Config').

    Returns:
        A configured Flask application instance.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    from app.init import (
        init_logging,
        init_services,
        init_blueprints,
        install_error_handlers,
        init_cli_commands,
    )

    # Phase 1: Core setup
    init_logging(app)

    # Phase 2: Services
    init_services(app)

    # Phase 3: Blueprints and routes
    init_blueprints(app)
    install_error_handlers(app)

    # Phase 4: CLI
    init_cli_commands(app)

    return app
