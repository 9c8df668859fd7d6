# app/contact_card/profiles.py

"""
Profile Lookup

Stand-in for the hosted profile database: resolves a handle to a profile row
that ContactRecord.from_profile understands.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

logger = logging.getLogger(__name__)

Profile = Mapping[str, Any]


class ProfileStore:
    """Interface for handle-keyed profile lookup."""

    def get_by_handle(self, handle: str) -> Optional[Profile]:
        raise NotImplementedError


class InMemoryProfileStore(ProfileStore):

    def __init__(self, profiles: Iterable[Profile] = ()):
        self._profiles: Dict[str, Profile] = {p['handle']: p for p in profiles}

    def add(self, profile: Profile) -> None:
        self._profiles[profile['handle']] = profile

    def get_by_handle(self, handle: str) -> Optional[Profile]:
        return self._profiles.get(handle)


class JsonProfileStore(ProfileStore):
    """
    Profiles kept in a JSON file.

    The file holds either a list of profile objects or an object keyed by
    handle. It is re-read on every lookup so edits are picked up without a
    restart; a missing file behaves as an empty store.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, Profile]:
        if not self.path.is_file():
            logger.warning(f"Profile file not found: {self.path}")
            return {}

        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if isinstance(data, list):
            return {p['handle']: p for p in data if p.get('handle')}
        return {
            handle: dict(profile, handle=profile.get('handle') or handle)
            for handle, profile in data.items()
        }

    def get_by_handle(self, handle: str) -> Optional[Profile]:
        return self._load().get(handle)
