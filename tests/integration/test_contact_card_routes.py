"""
Integration tests for the contact card download endpoints.
"""
import json
import zipfile
from io import BytesIO
from unittest.mock import patch

import pytest

from app.contact_card.exceptions import PassSigningError


@pytest.mark.integration
class TestVcardEndpoint:
    """Test POST /api/contact/vcard."""

    def test_download(self, client):
        response = client.post('/api/contact/vcard', json={'handle': 'jdoe'})

        assert response.status_code == 200
        assert response.headers['Content-Type'].startswith('text/vcard')
        assert 'jdoe-contact.vcf' in response.headers['Content-Disposition']
        assert response.headers['Cache-Control'] == 'no-cache'
        body = response.get_data(as_text=True)
        assert body.startswith('BEGIN:VCARD\r\n')
        assert 'FN:Jane Doe' in body

    def test_null_name_profile(self, client):
        body = client.post('/api/contact/vcard', json={'handle': 'noname'}).get_data(as_text=True)
        assert 'FN:Digital Contact' in body

    def test_missing_handle(self, client):
        response = client.post('/api/contact/vcard', json={})

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Handle is required'}

    def test_no_body(self, client):
        assert client.post('/api/contact/vcard').status_code == 400

    def test_unknown_handle(self, client):
        response = client.post('/api/contact/vcard', json={'handle': 'nobody'})

        assert response.status_code == 404
        assert response.get_json() == {'error': 'Profile not found'}

    def test_encoder_failure(self, client):
        with patch('app.contact_card.routes.public.contact_card_service.get_vcard_download',
                   side_effect=RuntimeError('boom')):
            response = client.post('/api/contact/vcard', json={'handle': 'jdoe'})

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Failed to generate vCard'}


@pytest.mark.integration
class TestApplePassEndpoint:
    """Test POST /api/wallet/apple."""

    def test_development_mode(self, client):
        """Test the JSON diagnostic is served when no certificates exist."""
        response = client.post('/api/wallet/apple', json={'handle': 'jdoe'})

        assert response.status_code == 200
        assert response.headers['X-Wallet-Pass-Mode'] == 'development'
        assert response.mimetype == 'application/json'
        assert 'Content-Disposition' not in response.headers
        payload = response.get_json()
        assert payload['status'] == 'development-mode'
        assert payload['contact']['handle'] == 'jdoe'
        assert payload['contact']['name'] == 'Jane Doe'
        assert payload['contact']['email'] == 'jane@x.com'
        assert payload['contact']['socialLinks'] == [
            {'platform': 'LinkedIn', 'url': 'https://linkedin.com/in/jdoe'},
            {'platform': 'GitHub', 'url': 'https://github.com/jdoe'},
        ]

    def test_signed_pass(self, client, signing_env):
        response = client.post('/api/wallet/apple', json={'handle': 'jdoe'})

        assert response.status_code == 200
        assert response.headers['Content-Type'] == 'application/vnd.apple.pkpass'
        assert 'jdoe-contact.pkpass' in response.headers['Content-Disposition']
        assert 'no-store' in response.headers['Cache-Control']
        assert response.headers['Pragma'] == 'no-cache'
        assert 'X-Wallet-Pass-Mode' not in response.headers

        archive = zipfile.ZipFile(BytesIO(response.data))
        pass_json = json.loads(archive.read('pass.json'))
        assert pass_json['passTypeIdentifier'] == 'pass.com.example.card'
        assert pass_json['barcode']['message'] == 'https://cards.example.com/profile/jdoe'

    def test_signing_failure(self, client, signing_env):
        with patch('app.contact_card.services.pass_service.pass_packager.package',
                   side_effect=PassSigningError('bad key')):
            response = client.post('/api/wallet/apple', json={'handle': 'jdoe'})

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Failed to generate wallet pass'}

    def test_unreadable_asset(self, client, signing_env, monkeypatch, assets_dir, unreadable_png):
        monkeypatch.setenv('WALLET_ASSETS_DIR', str(assets_dir))
        response = client.post('/api/wallet/apple', json={'handle': 'jdoe'})

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Failed to generate wallet pass'}

    def test_missing_handle(self, client):
        response = client.post('/api/wallet/apple', json={'handle': ''})
        assert response.status_code == 400

    def test_unknown_handle(self, client):
        assert client.post('/api/wallet/apple', json={'handle': 'nobody'}).status_code == 404


@pytest.mark.integration
class TestErrorHandlers:

    def test_unknown_route_is_json(self, client):
        response = client.get('/api/does-not-exist')

        assert response.status_code == 404
        assert 'error' in response.get_json()

    def test_wrong_method(self, client):
        assert client.get('/api/contact/vcard').status_code == 405
