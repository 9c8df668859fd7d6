# app/contact_card/exceptions.py

"""
Contact Card Exceptions

Missing signing material is not represented here: it is a recognized
degraded mode that produces an unsigned development artifact.
"""


class ContactCardError(Exception):
    """Base class for contact card generation errors."""
    pass


class PassGenerationError(ContactCardError):
    """Raised when a wallet pass cannot be produced for a contact."""
    pass


class PassSigningError(PassGenerationError):
    """Raised when serializing, signing or zipping a pass bundle fails."""
    pass


class CertificateReadError(PassGenerationError):
    """Raised when a certificate file exists but cannot be read."""

    def __init__(self, path, original):
        self.path = str(path)
        self.original = original
        super().__init__(f"Cannot read certificate file {self.path}: {original}")


class AssetReadError(PassGenerationError):
    """Raised when a pass image exists but cannot be read."""

    def __init__(self, path, original):
        self.path = str(path)
        self.original = original
        super().__init__(f"Cannot read pass asset {self.path}: {original}")
