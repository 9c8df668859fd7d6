# app/contact_card/models.py

"""
Contact Record Model

Canonical representation of a person's shareable contact data. A record is
built fresh for every generation request from an upstream profile row and is
never persisted or mutated by this package.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_CONTACT_NAME = 'Digital Contact'


@dataclass(frozen=True)
class SocialLink:
    """A display label plus an opaque URL."""
    platform: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {'platform': self.platform, 'url': self.url}


@dataclass(frozen=True)
class ContactRecord:
    """
    Shareable contact data for a single profile.

    Only ``handle`` and ``name`` are required. Optional text fields treat
    ``None`` and the empty string the same way: the encoders omit them.
    ``profile_image`` is carried for completeness but is never embedded in
    generated artifacts.
    """
    handle: str
    name: str = DEFAULT_CONTACT_NAME
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    social_links: Tuple[SocialLink, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Upstream rows frequently carry NULL names
        if not self.name or not self.name.strip():
            object.__setattr__(self, 'name', DEFAULT_CONTACT_NAME)
        if not isinstance(self.social_links, tuple):
            object.__setattr__(self, 'social_links', tuple(self.social_links))

    @classmethod
    def from_profile(cls, profile: Mapping[str, Any]) -> 'ContactRecord':
        """
        Build a record from a profile row as returned by the profile store.

        Args:
            profile: Mapping with ``handle``, ``name``, ``title``, ``email``,
                ``phone``, ``bio``, ``photo_url`` and ``social_links`` keys.
                Missing keys are treated as absent.

        Returns:
            ContactRecord instance
        """
        links = []
        for link in profile.get('social_links') or []:
            if isinstance(link, SocialLink):
                links.append(link)
            else:
                links.append(SocialLink(
                    platform=link.get('platform') or '',
                    url=link.get('url') or ''
                ))

        return cls(
            handle=profile.get('handle') or '',
            name=profile.get('name') or DEFAULT_CONTACT_NAME,
            title=profile.get('title'),
            email=profile.get('email'),
            phone=profile.get('phone'),
            bio=profile.get('bio'),
            profile_image=profile.get('photo_url') or profile.get('profile_image'),
            social_links=tuple(links),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'handle': self.handle,
            'name': self.name,
            'title': self.title,
            'email': self.email,
            'phone': self.phone,
            'bio': self.bio,
            'socialLinks': [link.to_dict() for link in self.social_links],
        }
