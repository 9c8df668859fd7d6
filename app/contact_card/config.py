# app/contact_card/config.py

"""
Contact Card Configuration

Every setting is optional. Missing identifiers fall back to placeholder
values so that development environments can still produce artifacts; the
fallbacks are reported by ``validate_pass_configuration``.
"""

import os
from typing import Optional

# Branding is fixed per deployment, not per contact
ORGANIZATION_NAME = 'Viszy'
VCARD_ORGANIZATION = 'Viszy Digital Business Card'
BACKGROUND_COLOR = 'rgb(79, 70, 229)'
FOREGROUND_COLOR = 'rgb(255, 255, 255)'
LABEL_COLOR = 'rgb(255, 255, 255)'

DEFAULT_PASS_TYPE_IDENTIFIER = 'pass.com.viszy.contact'
DEFAULT_TEAM_IDENTIFIER = 'YOUR_TEAM_ID'
DEFAULT_BASE_URL = 'https://viszyai.vercel.app'
DEFAULT_CERTIFICATES_DIR = 'certificates'


class ContactCardConfig:
    """Configuration for vCard and Apple Wallet pass generation"""

    def __init__(
        self,
        pass_type_identifier: Optional[str] = None,
        team_identifier: Optional[str] = None,
        certificate_passphrase: Optional[str] = None,
        base_url: Optional[str] = None,
        certificates_dir: Optional[str] = None,
        assets_dir: Optional[str] = None,
    ):
        pass_type_identifier = pass_type_identifier or os.getenv('APPLE_PASS_TYPE_IDENTIFIER')
        self.pass_type_identifier_is_fallback = not pass_type_identifier
        self.pass_type_identifier = pass_type_identifier or DEFAULT_PASS_TYPE_IDENTIFIER

        team_identifier = team_identifier or os.getenv('APPLE_TEAM_IDENTIFIER')
        self.team_identifier_is_fallback = not team_identifier
        self.team_identifier = team_identifier or DEFAULT_TEAM_IDENTIFIER

        if certificate_passphrase is None:
            certificate_passphrase = os.getenv('APPLE_CERT_PASSPHRASE', '')
        self.certificate_passphrase = certificate_passphrase
        self.base_url = (
            base_url or os.getenv('APP_BASE_URL') or DEFAULT_BASE_URL
        ).rstrip('/')
        self.certificates_dir = str(
            certificates_dir
            or os.getenv('WALLET_CERTIFICATES_DIR')
            or DEFAULT_CERTIFICATES_DIR
        )
        assets_dir = assets_dir or os.getenv('WALLET_ASSETS_DIR')
        self.assets_dir = str(assets_dir) if assets_dir else None

    @property
    def uses_fallback_identifiers(self) -> bool:
        return (
            self.pass_type_identifier_is_fallback or self.team_identifier_is_fallback
        )

    def __repr__(self):
        return (
            f"ContactCardConfig(pass_type_identifier={self.pass_type_identifier!r}, "
            f"team_identifier={self.team_identifier!r}, base_url={self.base_url!r}, "
            f"certificates_dir={self.certificates_dir!r})"
        )
