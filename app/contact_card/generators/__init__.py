# app/contact_card/generators/__init__.py

"""
Wallet Pass Builders

Builders assemble pass content from a ContactRecord. Only Apple Wallet is
supported; signing and packaging live in app.contact_card.packaging.
"""

from .base import BasePassBuilder
from .apple import ApplePassBuilder, generate_auth_token, validate_pass_configuration

__all__ = [
    'BasePassBuilder',
    'ApplePassBuilder',
    'generate_auth_token',
    'validate_pass_configuration',
]
