# app/init/cli.py

"""
CLI Commands Registration

Register CLI commands for Flask application management.
"""

import logging

logger = logging.getLogger(__name__)


def init_cli_commands(app):
    """
    Register CLI commands with the Flask application.

    Args:
        app: The Flask application instance.
    """
    from app.contact_card.cli import register_cli
    register_cli(app)
