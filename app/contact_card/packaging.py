# app/contact_card/packaging.py

"""
Pass Signer / Packager

Turns assembled pass content into the final distributable artifact:

- Signed: pass.json + manifest.json (SHA-1 of every bundled file) + a
  detached PKCS#7 signature of the manifest, zipped as a .pkpass archive.
- Unsigned: a JSON diagnostic document used when no signing material is
  available. It is never an installable pass.

The two outcomes are distinct types so callers have to branch on them.
"""

import hashlib
import json
import logging
import zipfile
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.serialization import pkcs7

from app.contact_card.certificates import SigningMaterial
from app.contact_card.exceptions import AssetReadError, PassSigningError
from app.contact_card.models import ContactRecord
from app.contact_card.urls import profile_url, qr_url
from app.contact_card.utils import iso_timestamp

logger = logging.getLogger(__name__)

PKPASS_MIMETYPE = 'application/vnd.apple.pkpass'
DIAGNOSTIC_MIMETYPE = 'application/json'
DEVELOPMENT_STATUS = 'development-mode'

# Optional brand imagery copied from the assets directory when present
ASSET_FILENAMES = ('icon.png', 'icon@2x.png', 'logo.png', 'logo@2x.png')

# Pass attributes that must reach pass.json whenever they are set
_OPTIONAL_PASS_KEYS = (
    'backgroundColor', 'foregroundColor', 'labelColor', 'logoText',
    'relevantDate', 'webServiceURL', 'authenticationToken',
)

PRODUCTION_INSTRUCTIONS = [
    "1. Obtain Apple Developer account ($99/year)",
    "2. Create Pass Type ID in Apple Developer Console",
    "3. Generate Pass Type ID Certificate",
    "4. Download WWDR Certificate",
    "5. Add wwdr.pem, signerCert.pem and signerKey.pem to the certificates folder",
    "6. Set environment variables for APPLE_PASS_TYPE_IDENTIFIER and APPLE_TEAM_IDENTIFIER",
]


@dataclass(frozen=True)
class SignedPass:
    """A signed .pkpass archive ready to hand to a wallet app."""
    data: bytes = field(repr=False)
    content_type: str = PKPASS_MIMETYPE
    is_signed: bool = True

    def to_bytes(self) -> bytes:
        return self.data

    def filename(self, handle: str) -> str:
        return f"{handle}-contact.pkpass"


@dataclass(frozen=True)
class UnsignedPass:
    """Development-mode diagnostic produced when no signing material exists."""
    payload: Dict[str, Any]
    content_type: str = DIAGNOSTIC_MIMETYPE
    is_signed: bool = False

    def to_bytes(self) -> bytes:
        return json.dumps(self.payload, indent=2).encode('utf-8')

    def filename(self, handle: str) -> str:
        return f"{handle}-contact-dev.json"


def pass_json_dict(pass_obj) -> Dict[str, Any]:
    """
    Serialize a wallet.models.Pass to the pass.json structure.

    Args:
        pass_obj: wallet.models.Pass object

    Returns:
        JSON-compatible dictionary
    """
    data = dict(pass_obj.json_dict())

    for key in _OPTIONAL_PASS_KEYS:
        value = getattr(pass_obj, key, None)
        if value:
            data.setdefault(key, value)

    barcode = getattr(pass_obj, 'barcode', None)
    if barcode is not None:
        barcode_dict = dict(barcode.json_dict())
        alt_text = getattr(barcode, 'altText', '')
        if alt_text:
            barcode_dict.setdefault('altText', alt_text)
        data['barcode'] = barcode_dict
        # iOS 9+ reads the barcodes array, older versions the single barcode
        if not data.get('barcodes'):
            data['barcodes'] = [barcode_dict]

    return data


def load_assets(assets_dir: Optional[str]) -> Dict[str, bytes]:
    """Read optional brand images from the assets directory."""
    if not assets_dir:
        return {}

    files = {}
    base = Path(assets_dir)
    for name in ASSET_FILENAMES:
        path = base / name
        if path.is_file():
            try:
                files[name] = path.read_bytes()
            except OSError as e:
                logger.error(f"Error reading pass asset {path}: {e}")
                raise AssetReadError(path, e) from e
            logger.debug(f"Added asset: {name}")

    if 'icon.png' not in files:
        logger.warning(f"Asset icon.png not found in {assets_dir}; wallet apps may reject the pass")
    return files


class PassPackager:
    """
    Serializes, signs and zips pass content.

    Holds no per-call state; a single instance can be shared.
    """

    def package(self, pass_obj, material: SigningMaterial,
                files: Optional[Mapping[str, bytes]] = None) -> SignedPass:
        """
        Build a signed .pkpass archive.

        Args:
            pass_obj: wallet.models.Pass object
            material: Signing certificates and key
            files: Extra bundle files (e.g. icon.png) keyed by archive name

        Returns:
            SignedPass

        Raises:
            PassSigningError: If serialization, signing or zipping fails
        """
        try:
            pass_json = json.dumps(pass_json_dict(pass_obj)).encode('utf-8')
            bundle = {'pass.json': pass_json}
            bundle.update(files or {})

            manifest = self._create_manifest(bundle)
            signature = self._create_signature(manifest, material)
            archive = self._create_zip(bundle, manifest, signature)
        except Exception as e:
            logger.error(f"Error signing pass: {e}")
            raise PassSigningError(f"Failed to sign wallet pass: {e}") from e

        return SignedPass(data=archive)

    def _create_manifest(self, bundle: Mapping[str, bytes]) -> bytes:
        hashes_by_name = {
            name: hashlib.sha1(data).hexdigest()
            for name, data in bundle.items()
        }
        return json.dumps(hashes_by_name, sort_keys=True).encode('utf-8')

    def _create_signature(self, manifest: bytes, material: SigningMaterial) -> bytes:
        """Detached DER PKCS#7 signature over the manifest bytes."""
        signer_cert = x509.load_pem_x509_certificate(material.signer_cert)
        wwdr_cert = x509.load_pem_x509_certificate(material.wwdr)

        password = material.passphrase.encode('utf-8') if material.passphrase else None
        private_key = serialization.load_pem_private_key(material.signer_key, password=password)

        return (
            pkcs7.PKCS7SignatureBuilder()
            .set_data(manifest)
            .add_signer(signer_cert, private_key, hashes.SHA256())
            .add_certificate(wwdr_cert)
            .sign(serialization.Encoding.DER, [pkcs7.PKCS7Options.DetachedSignature])
        )

    def _create_zip(self, bundle: Mapping[str, bytes], manifest: bytes, signature: bytes) -> bytes:
        buffer = BytesIO()
        with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
            for name, data in bundle.items():
                zf.writestr(name, data)
            zf.writestr('manifest.json', manifest)
            zf.writestr('signature', signature)
        return buffer.getvalue()

    def unsigned(self, contact: ContactRecord, pass_obj, base_url: str) -> UnsignedPass:
        """
        Build the development-mode diagnostic for a contact.

        Args:
            contact: ContactRecord the pass was built from
            pass_obj: wallet.models.Pass object that would have been signed
            base_url: Public application URL

        Returns:
            UnsignedPass
        """
        contact_data = contact.to_dict()
        contact_data.update({
            'profileUrl': profile_url(base_url, contact.handle),
            'qrCodeUrl': qr_url(base_url, contact.handle),
        })

        payload = {
            'type': 'apple-wallet-pass',
            'status': DEVELOPMENT_STATUS,
            'message': (
                'This is a development version. For production, '
                'Apple Developer certificates are required.'
            ),
            'contact': contact_data,
            'pass': pass_json_dict(pass_obj),
            'instructions': {
                'forProduction': list(PRODUCTION_INSTRUCTIONS),
            },
            'timestamp': iso_timestamp(),
        }
        return UnsignedPass(payload=payload)


pass_packager = PassPackager()
