# app/contact_card/services/__init__.py

"""
Contact Card Services

- ContactCardService: vCard and wallet pass generation
"""

from .pass_service import ContactCardService, contact_card_service

__all__ = ['ContactCardService', 'contact_card_service']
