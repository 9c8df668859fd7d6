# app/contact_card/generators/base.py

"""
Base Pass Builder

Abstract base class for wallet pass content builders. Collects the template
data shared by every platform so that platform builders only deal with their
own pass layout.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from app.contact_card.config import ContactCardConfig, ORGANIZATION_NAME
from app.contact_card.models import ContactRecord
from app.contact_card.urls import profile_url, qr_url
from app.contact_card.utils import epoch_millis, iso_timestamp, utcnow

logger = logging.getLogger(__name__)


class BasePassBuilder(ABC):
    """
    Abstract base class for wallet pass content assembly.

    Builders are stateless apart from their configuration and may be shared
    between concurrent requests.
    """

    def __init__(self, config: Optional[ContactCardConfig] = None):
        self.config = config or ContactCardConfig()

    @abstractmethod
    def build(self, contact: ContactRecord, now: Optional[datetime] = None,
              auth_token: Optional[str] = None) -> Any:
        """
        Assemble the pass content for a contact.

        Args:
            contact: ContactRecord instance
            now: Generation time override
            auth_token: Previously persisted web service token, if any

        Returns:
            Platform-specific pass object (not yet serialized or signed)
        """
        pass

    @abstractmethod
    def get_platform_name(self) -> str:
        """Return the platform name (e.g., 'apple')"""
        pass

    def get_template_data(self, contact: ContactRecord,
                          now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Get the template data shared across platforms.

        Args:
            contact: ContactRecord instance
            now: Generation time override

        Returns:
            Dictionary of template variables
        """
        now = now or utcnow()
        return {
            'handle': contact.handle,
            'name': contact.name,
            'serial_number': f"{contact.handle}-{epoch_millis(now)}",
            'description': f"{contact.name} - Digital Contact Card",
            'organization_name': ORGANIZATION_NAME,
            'profile_url': profile_url(self.config.base_url, contact.handle),
            'qr_url': qr_url(self.config.base_url, contact.handle),
            'relevant_date': iso_timestamp(now),
        }
