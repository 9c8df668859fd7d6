# app/contact_card/generators/apple.py

"""
Apple Wallet Pass Builder

Assembles the logical content of a generic-style Apple Wallet pass for a
contact using the wallet library's object model. The result is not yet
serialized or signed; see app.contact_card.packaging for that step.
"""

import html
import logging
import secrets
from datetime import datetime
from typing import Any, Dict, Optional

from wallet.models import Pass, Barcode, BarcodeFormat, Generic, Field, Alignment

from app.contact_card.certificates import CertificateLoader
from app.contact_card.config import (
    ContactCardConfig, BACKGROUND_COLOR, FOREGROUND_COLOR, LABEL_COLOR
)
from app.contact_card.models import ContactRecord

from .base import BasePassBuilder

logger = logging.getLogger(__name__)

BARCODE_ALT_TEXT = 'Scan to view profile'


def generate_auth_token() -> str:
    """Unguessable token for the pass web service callback."""
    return secrets.token_urlsafe(32)


def _link(href: str, text: str) -> str:
    return f'<a href="{html.escape(href, quote=True)}">{html.escape(text)}</a>'


class ApplePassBuilder(BasePassBuilder):
    """
    Builds Apple Wallet pass content for a contact.

    Layout (generic style):
    - primary: contact name
    - secondary: title, when present
    - auxiliary: empty
    - back: profile link, email, phone, bio, then one field per social link
    """

    def get_platform_name(self) -> str:
        return 'apple'

    def build(self, contact: ContactRecord, now: Optional[datetime] = None,
              auth_token: Optional[str] = None) -> Pass:
        """
        Assemble an unsigned wallet.models.Pass for the contact.

        Args:
            contact: ContactRecord instance
            now: Generation time override, used for the serial number and
                relevant date
            auth_token: Persisted web service token; a fresh random token is
                generated when omitted

        Returns:
            wallet.models.Pass object
        """
        template_data = self.get_template_data(contact, now)

        if self.config.uses_fallback_identifiers:
            if self.config.pass_type_identifier_is_fallback:
                logger.warning("APPLE_PASS_TYPE_IDENTIFIER not set, using placeholder pass type identifier")
            if self.config.team_identifier_is_fallback:
                logger.warning("APPLE_TEAM_IDENTIFIER not set, using placeholder team identifier")

        card_info = self._create_card_info(contact, template_data)

        pass_obj = Pass(
            card_info,
            passTypeIdentifier=self.config.pass_type_identifier,
            organizationName=template_data['organization_name'],
            teamIdentifier=self.config.team_identifier
        )

        pass_obj.serialNumber = template_data['serial_number']
        pass_obj.description = template_data['description']

        pass_obj.backgroundColor = BACKGROUND_COLOR
        pass_obj.foregroundColor = FOREGROUND_COLOR
        pass_obj.labelColor = LABEL_COLOR

        barcode = Barcode(message=template_data['profile_url'], format=BarcodeFormat.QR)
        barcode.altText = BARCODE_ALT_TEXT
        pass_obj.barcode = barcode

        pass_obj.relevantDate = template_data['relevant_date']

        pass_obj.webServiceURL = self.config.base_url
        pass_obj.authenticationToken = auth_token or generate_auth_token()

        logger.debug(
            f"Built pass content for {contact.handle}: serial={pass_obj.serialNumber}, "
            f"back fields={len(card_info.backFields)}"
        )
        return pass_obj

    def _create_card_info(self, contact: ContactRecord, template_data: Dict[str, Any]) -> Generic:
        card_info = Generic()

        name_field = Field('name', contact.name, 'Contact')
        name_field.textAlignment = Alignment.LEFT
        card_info.primaryFields.append(name_field)

        if contact.title:
            title_field = Field('title', contact.title, 'Title')
            title_field.textAlignment = Alignment.LEFT
            card_info.secondaryFields.append(title_field)

        url = template_data['profile_url']
        card_info.backFields.append(self._back_field(
            'profile_url', url, 'View Full Profile', _link(url, 'View Profile')
        ))

        if contact.email:
            card_info.backFields.append(self._back_field(
                'email', contact.email, 'Email', _link(f"mailto:{contact.email}", contact.email)
            ))

        if contact.phone:
            card_info.backFields.append(self._back_field(
                'phone', contact.phone, 'Phone', _link(f"tel:{contact.phone}", contact.phone)
            ))

        if contact.bio:
            card_info.backFields.append(self._back_field('bio', contact.bio, 'About'))

        for index, link in enumerate(contact.social_links):
            if not link.url or not link.platform:
                logger.debug(f"Skipping incomplete social link #{index} for {contact.handle}")
                continue
            card_info.backFields.append(self._back_field(
                f"social_{index}", link.url, link.platform, _link(link.url, link.platform)
            ))

        return card_info

    def _back_field(self, key: str, value: str, label: str,
                    attributed_value: Optional[str] = None) -> Field:
        field = Field(key, value, label)
        if attributed_value:
            field.attributedValue = attributed_value
        return field


def validate_pass_configuration(config: Optional[ContactCardConfig] = None) -> Dict[str, Any]:
    """
    Validate Apple Wallet configuration.

    Missing certificates do not make the configuration invalid for
    development use, but they are reported so operators know passes will be
    produced as unsigned diagnostics.

    Returns:
        dict with 'configured' and 'signing_available' booleans and an
        'issues' list
    """
    config = config or ContactCardConfig()
    issues = []

    if config.pass_type_identifier_is_fallback:
        issues.append("APPLE_PASS_TYPE_IDENTIFIER not set, using placeholder")
    elif not config.pass_type_identifier.startswith('pass.'):
        issues.append("Pass type identifier must start with 'pass.'")

    if config.team_identifier_is_fallback:
        issues.append("APPLE_TEAM_IDENTIFIER not set, using placeholder")
    elif len(config.team_identifier) != 10:
        issues.append(
            f"Team identifier must be 10 characters, got {len(config.team_identifier)}"
        )

    loader = CertificateLoader(config.certificates_dir)
    missing = loader.missing_files()
    for path in missing:
        issues.append(f"Certificate not found at {path}")

    return {
        'configured': len(issues) == 0,
        'signing_available': not missing,
        'issues': issues,
    }
