# app/contact_card/routes/__init__.py

"""
Contact Card Routes

- Public download endpoints for vCard and Apple Wallet pass files
"""

from .public import public_contact_bp

__all__ = ['public_contact_bp']
