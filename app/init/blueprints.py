# app/init/blueprints.py

"""
Blueprint Registration

Register all Flask blueprints for modular functionality.
"""

import logging

logger = logging.getLogger(__name__)


def init_blueprints(app):
    """
    Register blueprints with the Flask application.

    Args:
        app: The Flask application instance.
    """
    from app.contact_card.routes import public_contact_bp

    app.register_blueprint(public_contact_bp)
    logger.debug("Registered contact card blueprints")
