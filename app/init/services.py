# app/init/services.py

"""
Services Initialization

Attach the profile store used by the download routes and CLI commands.
"""

import logging

from app.contact_card.profiles import JsonProfileStore

logger = logging.getLogger(__name__)


def init_services(app):
    """
    Initialize application services.

    A store already present in app.extensions (e.g. injected by tests) is
    left untouched.

    Args:
        app: The Flask application instance.
    """
    if 'profile_store' not in app.extensions:
        app.extensions['profile_store'] = JsonProfileStore(app.config['PROFILES_PATH'])
        logger.info(f"Profile store initialized from {app.config['PROFILES_PATH']}")
