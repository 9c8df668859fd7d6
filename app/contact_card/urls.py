# app/contact_card/urls.py

"""Canonical public URLs for a profile handle."""


def _base(base_url: str) -> str:
    return (base_url or '').rstrip('/')


def profile_url(base_url: str, handle: str) -> str:
    return f"{_base(base_url)}/profile/{handle}"


def qr_url(base_url: str, handle: str) -> str:
    return f"{_base(base_url)}/qr/{handle}"
