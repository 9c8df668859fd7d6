"""
Pytest configuration and shared fixtures for all tests.
"""
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from app.contact_card.config import ContactCardConfig
from app.contact_card.models import ContactRecord, SocialLink
from app.contact_card.profiles import InMemoryProfileStore

CONTACT_CARD_ENV_VARS = (
    'APPLE_PASS_TYPE_IDENTIFIER',
    'APPLE_TEAM_IDENTIFIER',
    'APPLE_CERT_PASSPHRASE',
    'APP_BASE_URL',
    'WALLET_CERTIFICATES_DIR',
    'WALLET_ASSETS_DIR',
)

TEST_PASSPHRASE = 'test-passphrase'


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's environment and any local certificates out of tests."""
    for name in CONTACT_CARD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('WALLET_CERTIFICATES_DIR', str(tmp_path / 'no-certificates'))


# =============================================================================
# Contact fixtures
# =============================================================================

@pytest.fixture
def contact():
    """The reference contact used throughout the suite."""
    return ContactRecord(
        handle='jdoe',
        name='Jane Doe',
        title='Engineer',
        email='jane@x.com',
        phone='+15551234567',
        bio='Loves Rust',
        social_links=(SocialLink('LinkedIn', 'https://linkedin.com/in/jdoe'),),
    )


@pytest.fixture
def minimal_contact():
    return ContactRecord(handle='min', name='Solo')


@pytest.fixture
def profile_row():
    """A profile as stored upstream."""
    return {
        'handle': 'jdoe',
        'name': 'Jane Doe',
        'title': 'Engineer',
        'email': 'jane@x.com',
        'phone': '+15551234567',
        'bio': 'Loves Rust',
        'photo_url': 'https://cdn.example.com/jdoe.png',
        'social_links': [
            {'platform': 'LinkedIn', 'url': 'https://linkedin.com/in/jdoe'},
            {'platform': 'GitHub', 'url': 'https://github.com/jdoe'},
        ],
    }


# =============================================================================
# Signing material
# =============================================================================

def _name(common_name):
    return x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])


@pytest.fixture(scope='session')
def pem_material():
    """Throwaway trust chain, signer certificate and encrypted signer key (PEM)."""
    now = datetime.now(timezone.utc)

    ca_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    ca_cert = (
        x509.CertificateBuilder()
        .subject_name(_name('Test WWDR CA'))
        .issuer_name(_name('Test WWDR CA'))
        .public_key(ca_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(ca_key, hashes.SHA256())
    )

    signer_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    signer_cert = (
        x509.CertificateBuilder()
        .subject_name(_name('Pass Type ID: pass.com.viszy.contact'))
        .issuer_name(ca_cert.subject)
        .public_key(signer_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(ca_key, hashes.SHA256())
    )

    return {
        'wwdr.pem': ca_cert.public_bytes(serialization.Encoding.PEM),
        'signerCert.pem': signer_cert.public_bytes(serialization.Encoding.PEM),
        'signerKey.pem': signer_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.BestAvailableEncryption(TEST_PASSPHRASE.encode('utf-8')),
        ),
    }


@pytest.fixture
def certificates_dir(tmp_path, pem_material):
    """A certificates directory holding all three signing files."""
    directory = tmp_path / 'certificates'
    directory.mkdir()
    for filename, data in pem_material.items():
        (directory / filename).write_bytes(data)
    return directory


@pytest.fixture
def signing_config(certificates_dir):
    return ContactCardConfig(
        pass_type_identifier='pass.com.viszy.contact',
        team_identifier='ABCDE12345',
        certificate_passphrase=TEST_PASSPHRASE,
        base_url='https://cards.example.com',
        certificates_dir=str(certificates_dir),
    )


@pytest.fixture
def unsigned_config(tmp_path):
    return ContactCardConfig(
        base_url='https://cards.example.com',
        certificates_dir=str(tmp_path / 'empty-certificates'),
    )


# =============================================================================
# Flask fixtures
# =============================================================================

@pytest.fixture
def app(profile_row):
    """Create application for testing."""
    app = create_app('web_config.TestingConfig')
    app.extensions['profile_store'] = InMemoryProfileStore([
        profile_row,
        {'handle': 'noname', 'name': None, 'title': None},
    ])

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create Flask CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def signing_env(monkeypatch, certificates_dir):
    """Environment pointing the shared service at valid signing material."""
    monkeypatch.setenv('WALLET_CERTIFICATES_DIR', str(certificates_dir))
    monkeypatch.setenv('APPLE_CERT_PASSPHRASE', TEST_PASSPHRASE)
    monkeypatch.setenv('APPLE_PASS_TYPE_IDENTIFIER', 'pass.com.example.card')
    monkeypatch.setenv('APPLE_TEAM_IDENTIFIER', 'ABCDE12345')
    monkeypatch.setenv('APP_BASE_URL', 'https://cards.example.com')


@pytest.fixture
def assets_dir(tmp_path):
    """An assets directory holding a pass icon."""
    directory = tmp_path / 'assets'
    directory.mkdir()
    (directory / 'icon.png').write_bytes(b'\x89PNG icon')
    return directory


@pytest.fixture
def unreadable_png():
    """Make .png files fail to read while certificates still load."""
    original = Path.read_bytes

    def read_bytes(path):
        if path.suffix == '.png':
            raise PermissionError(f'Permission denied: {path}')
        return original(path)

    with patch.object(Path, 'read_bytes', new=read_bytes):
        yield
