"""
Logging Configuration

Console logging while testing, the dictConfig in app.log_config otherwise.
"""

import logging
import logging.config
import os


def _ensure_log_dirs(config):
    """Create the directories the file handlers write into."""
    for handler in config.get('handlers', {}).values():
        filename = handler.get('filename')
        if filename:
            os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)


def init_logging(app):
    """
    Initialize logging for the Flask application.

    Args:
        app: The Flask application instance.
    """
    if app.config.get('TESTING'):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
        ))
        logging.getLogger().handlers = [handler]
        logging.getLogger().setLevel(app.config.get('TEST_LOG_LEVEL', logging.WARNING))
        return

    from app.log_config.logging_config import LOGGING_CONFIG
    _ensure_log_dirs(LOGGING_CONFIG)
    logging.config.dictConfig(LOGGING_CONFIG)
    app.logger.setLevel(logging.INFO if app.debug else logging.WARNING)
