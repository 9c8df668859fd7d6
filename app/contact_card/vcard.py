# app/contact_card/vcard.py

"""
vCard Encoder

Serializes a ContactRecord into a single vCard 3.0 record. Properties are
separated by CRLF, which strict vCard 3.0 consumers require, and the record
ends with ``END:VCARD`` without a trailing line break.

Free-text values are escaped RFC 6350 style so user supplied names and bios
cannot break the property structure.
"""

import re
from datetime import datetime
from typing import List, Optional

from app.contact_card.config import VCARD_ORGANIZATION
from app.contact_card.models import ContactRecord, DEFAULT_CONTACT_NAME
from app.contact_card.urls import profile_url
from app.contact_card.utils import iso_timestamp

VCARD_MIMETYPE = 'text/vcard'
CRLF = '\r\n'

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def escape_text(value: str) -> str:
    """Escape a TEXT property value (backslash, comma, semicolon, newlines)."""
    value = value.replace('\\', '\\\\')
    value = value.replace(',', '\\,').replace(';', '\\;')
    return _LINE_BREAK.sub('\\\\n', value)


def _uri(value: str) -> str:
    return _LINE_BREAK.sub('', value)


def _param(value: str) -> str:
    """Render a parameter value, quoting it when it contains separators."""
    value = _LINE_BREAK.sub(' ', value).replace('"', '')
    if any(ch in value for ch in ':;,'):
        return f'"{value}"'
    return value


def _structured_name(name: str) -> str:
    return ';'.join(escape_text(part) for part in reversed(name.split()))


def encode_vcard(contact: ContactRecord, base_url: Optional[str] = None,
                 now: Optional[datetime] = None) -> str:
    """
    Encode a contact as vCard 3.0 text.

    Args:
        contact: ContactRecord to serialize
        base_url: Public application URL; when given, a ``URL`` line pointing
            at the canonical profile page is emitted
        now: Revision timestamp override (defaults to the current UTC time)

    Returns:
        vCard document as a string
    """
    name = contact.name or DEFAULT_CONTACT_NAME

    lines: List[str] = ['BEGIN:VCARD', 'VERSION:3.0']
    lines.append(f"FN:{escape_text(name)}")
    lines.append(f"N:{_structured_name(name)}")

    if contact.title:
        lines.append(f"TITLE:{escape_text(contact.title)}")
    if contact.email:
        lines.append(f"EMAIL;TYPE=INTERNET:{escape_text(contact.email)}")
    if contact.phone:
        lines.append(f"TEL;TYPE=CELL:{escape_text(contact.phone)}")
    if contact.bio:
        lines.append(f"NOTE:{escape_text(contact.bio)}")
    if base_url:
        lines.append(f"URL:{profile_url(base_url, contact.handle)}")

    for link in contact.social_links:
        lines.append(f"URL;TYPE={_param(link.platform)}:{_uri(link.url)}")

    # ORG is only emitted alongside a title
    if contact.title:
        lines.append(f"ORG:{VCARD_ORGANIZATION}")

    lines.append('CATEGORIES:Business,Contact')
    lines.append(f"REV:{iso_timestamp(now)}")
    lines.append('END:VCARD')

    return CRLF.join(lines)


def vcard_filename(handle: str) -> str:
    return f"{handle}-contact.vcf"
