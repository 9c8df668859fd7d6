# app/init/__init__.py

"""
Application Initialization Package

This package contains modular initialization functions for the Flask application.
Each module handles a specific aspect of application setup.
"""

from app.init.logging import init_logging
from app.init.services import init_services
from app.init.blueprints import init_blueprints
from app.init.error_handlers import install_error_handlers
from app.init.cli import init_cli_commands

__all__ = [
    'init_logging',
    'init_services',
    'init_blueprints',
    'install_error_handlers',
    'init_cli_commands',
]
