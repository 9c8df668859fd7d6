# app/contact_card/services/pass_service.py

"""
Contact Card Service

High-level interface used by routes and CLI commands to turn a contact
record into a downloadable vCard or Apple Wallet pass.
"""

import logging
from io import BytesIO
from typing import Optional, Tuple, Union

from app.contact_card.certificates import CertificateLoader
from app.contact_card.config import ContactCardConfig
from app.contact_card.exceptions import PassGenerationError
from app.contact_card.generators import ApplePassBuilder
from app.contact_card.models import ContactRecord
from app.contact_card.packaging import SignedPass, UnsignedPass, load_assets, pass_packager
from app.contact_card.vcard import VCARD_MIMETYPE, encode_vcard, vcard_filename

logger = logging.getLogger(__name__)

PassArtifact = Union[SignedPass, UnsignedPass]


class ContactCardService:
    """
    Unified service for contact card artifacts.

    Stateless: configuration is read from the environment on every call
    unless an explicit ContactCardConfig is injected, so one instance can be
    shared by all requests.
    """

    def __init__(self, config: Optional[ContactCardConfig] = None):
        self._config = config

    @property
    def config(self) -> ContactCardConfig:
        return self._config or ContactCardConfig()

    # =========================================================================
    # vCard
    # =========================================================================

    def generate_vcard(self, contact: ContactRecord) -> str:
        """Encode the contact as vCard 3.0 text."""
        return encode_vcard(contact, base_url=self.config.base_url)

    def get_vcard_download(self, contact: ContactRecord) -> Tuple[BytesIO, str, str]:
        """
        Get vCard file data for download.

        Returns:
            Tuple of (file_data, filename, mimetype)
        """
        vcard = self.generate_vcard(contact)
        return BytesIO(vcard.encode('utf-8')), vcard_filename(contact.handle), VCARD_MIMETYPE

    # =========================================================================
    # Apple Wallet
    # =========================================================================

    def generate_apple_wallet_pass(self, contact: ContactRecord,
                                   auth_token: Optional[str] = None) -> PassArtifact:
        """
        Generate an Apple Wallet pass for a contact.

        Signs the pass when signing material is available, otherwise returns
        a development-mode diagnostic.

        Args:
            contact: ContactRecord instance
            auth_token: Persisted web service token for this handle, if any

        Returns:
            SignedPass or UnsignedPass

        Raises:
            PassGenerationError: If certificates cannot be read or signing fails
        """
        config = self.config
        loader = CertificateLoader(config.certificates_dir, config.certificate_passphrase)

        try:
            material = loader.load()
            pass_obj = ApplePassBuilder(config).build(contact, auth_token=auth_token)

            if material is None:
                logger.warning(
                    f"Signing material missing, returning development pass for {contact.handle}"
                )
                return pass_packager.unsigned(contact, pass_obj, config.base_url)

            artifact = pass_packager.package(
                pass_obj, material, files=load_assets(config.assets_dir)
            )
        except PassGenerationError as e:
            logger.error(f"Error generating Apple Wallet pass for {contact.handle}: {e}")
            raise

        logger.info(f"Generated Apple Wallet pass for {contact.handle}")
        return artifact

    def get_pass_download(self, contact: ContactRecord) -> Tuple[PassArtifact, BytesIO, str, str]:
        """
        Get wallet pass data for download.

        Returns:
            Tuple of (artifact, file_data, filename, mimetype)
        """
        artifact = self.generate_apple_wallet_pass(contact)
        return (
            artifact,
            BytesIO(artifact.to_bytes()),
            artifact.filename(contact.handle),
            artifact.content_type,
        )


# Shared instance
contact_card_service = ContactCardService()
