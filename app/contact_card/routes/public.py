# app/contact_card/routes/public.py

"""
Public Contact Card Download Routes

Both endpoints take a JSON body with the profile handle, look the profile up
and return the generated artifact as a download.
"""

import logging
from flask import Blueprint, current_app, jsonify, make_response, request, send_file

from app.contact_card.exceptions import PassGenerationError
from app.contact_card.models import ContactRecord
from app.contact_card.services import contact_card_service

logger = logging.getLogger(__name__)

public_contact_bp = Blueprint('public_contact', __name__, url_prefix='/api')


def _lookup_contact():
    """
    Resolve the request's handle to a ContactRecord.

    Returns:
        (contact, None) on success or (None, error_response) on failure
    """
    payload = request.get_json(silent=True) or {}
    handle = payload.get('handle')

    if not handle:
        return None, (jsonify({'error': 'Handle is required'}), 400)

    profile = current_app.extensions['profile_store'].get_by_handle(handle)
    if not profile:
        logger.info(f"Profile not found for handle: {handle}")
        return None, (jsonify({'error': 'Profile not found'}), 404)

    return ContactRecord.from_profile(profile), None


def _attachment(file_data, mimetype, filename):
    response = make_response(send_file(
        file_data,
        mimetype=mimetype,
        as_attachment=True,
        download_name=filename
    ))
    response.headers['Content-Type'] = mimetype
    response.headers['Cache-Control'] = 'no-cache'
    return response


@public_contact_bp.route('/contact/vcard', methods=['POST'])
def download_vcard():
    """
    Download a vCard for a profile.

    URL: POST /api/contact/vcard  {"handle": "jdoe"}
    """
    contact, error = _lookup_contact()
    if error:
        return error

    try:
        file_data, filename, mimetype = contact_card_service.get_vcard_download(contact)
    except Exception as e:
        logger.error(f"Error generating vCard for {contact.handle}: {e}")
        return jsonify({'error': 'Failed to generate vCard'}), 500

    return _attachment(file_data, mimetype, filename)


@public_contact_bp.route('/wallet/apple', methods=['POST'])
def download_apple_pass():
    """
    Download an Apple Wallet pass for a profile.

    URL: POST /api/wallet/apple  {"handle": "jdoe"}

    Without signing certificates the response is the JSON development
    diagnostic, served inline and marked with X-Wallet-Pass-Mode so it is
    never offered as an installable pass.
    """
    contact, error = _lookup_contact()
    if error:
        return error

    try:
        artifact, file_data, filename, mimetype = contact_card_service.get_pass_download(contact)
    except PassGenerationError as e:
        logger.error(f"Error generating Apple Wallet pass for {contact.handle}: {e}")
        return jsonify({'error': 'Failed to generate wallet pass'}), 500

    if not artifact.is_signed:
        response = jsonify(artifact.payload)
        response.headers['X-Wallet-Pass-Mode'] = 'development'
        response.headers['Cache-Control'] = 'no-cache'
        return response

    # Prevent caching issues that can cause pass installation failures
    response = _attachment(file_data, mimetype, filename)
    response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate, max-age=0'
    response.headers['Pragma'] = 'no-cache'
    return response
