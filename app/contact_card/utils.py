# app/contact_card/utils.py

"""Timestamp helpers shared by the vCard encoder and the pass builders."""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. 2025-01-31T09:15:00.123Z"""
    moment = (moment or utcnow()).astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"
