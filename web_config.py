"""
Web Configuration Module

This module defines the configuration settings for the Flask application.
Values are loaded primarily from environment variables. Settings for the
generated artifacts themselves (pass identifiers, certificates, base URL)
are read by app.contact_card.config.ContactCardConfig.
"""

import os


class Config:
    """Application configuration settings."""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    # Profile data source for the download routes and CLI
    PROFILES_PATH = os.getenv('PROFILES_PATH', 'profiles.json')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    PROFILES_PATH = os.getenv('TEST_PROFILES_PATH', 'tests/data/profiles.json')
