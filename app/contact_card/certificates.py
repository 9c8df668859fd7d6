# app/contact_card/certificates.py

"""
Certificate Loader

Locates the Apple Wallet signing material in a single directory:

    wwdr.pem        Apple WWDR intermediate (trust chain)
    signerCert.pem  Pass Type ID certificate
    signerKey.pem   Private key for the Pass Type ID certificate

If any of the three is missing the loader reports absence, which callers
treat as development mode. Files that exist but cannot be read are a hard
failure.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from app.contact_card.exceptions import CertificateReadError

logger = logging.getLogger(__name__)

WWDR_FILENAME = 'wwdr.pem'
SIGNER_CERT_FILENAME = 'signerCert.pem'
SIGNER_KEY_FILENAME = 'signerKey.pem'


@dataclass(frozen=True)
class SigningMaterial:
    """PEM encoded certificates and key used to sign a pass manifest."""
    wwdr: bytes = field(repr=False)
    signer_cert: bytes = field(repr=False)
    signer_key: bytes = field(repr=False)
    passphrase: str = field(default='', repr=False)


class CertificateLoader:
    """Reads signing material from a fixed directory on every call."""

    def __init__(self, certificates_dir: Union[str, Path], passphrase: str = ''):
        self.certificates_dir = Path(certificates_dir)
        self.passphrase = passphrase or ''

    @property
    def wwdr_path(self) -> Path:
        return self.certificates_dir / WWDR_FILENAME

    @property
    def signer_cert_path(self) -> Path:
        return self.certificates_dir / SIGNER_CERT_FILENAME

    @property
    def signer_key_path(self) -> Path:
        return self.certificates_dir / SIGNER_KEY_FILENAME

    def missing_files(self):
        """Return the certificate paths that do not exist."""
        return [
            path for path in (self.wwdr_path, self.signer_cert_path, self.signer_key_path)
            if not path.is_file()
        ]

    def load(self) -> Optional[SigningMaterial]:
        """
        Load signing material.

        Returns:
            SigningMaterial when all three files are present, otherwise None

        Raises:
            CertificateReadError: If a present file cannot be read
        """
        missing = self.missing_files()
        if missing:
            logger.info(
                f"Wallet signing material not available in {self.certificates_dir} "
                f"(missing: {', '.join(p.name for p in missing)})"
            )
            return None

        return SigningMaterial(
            wwdr=self._read(self.wwdr_path),
            signer_cert=self._read(self.signer_cert_path),
            signer_key=self._read(self.signer_key_path),
            passphrase=self.passphrase,
        )

    def _read(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading certificate file {path}: {e}")
            raise CertificateReadError(path, e) from e
