"""
Contact Card Module

Generates shareable artifacts for a digital business card profile: a vCard
contact file and an Apple Wallet pass (signed, or an unsigned development
diagnostic when no signing certificates are installed).
"""

from .models import ContactRecord, SocialLink
from .packaging import SignedPass, UnsignedPass
from .services import ContactCardService, contact_card_service
from .vcard import encode_vcard

__all__ = [
    'ContactRecord',
    'SocialLink',
    'SignedPass',
    'UnsignedPass',
    'ContactCardService',
    'contact_card_service',
    'encode_vcard',
]
