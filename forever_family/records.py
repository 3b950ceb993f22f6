"""
Record types for the three collections.

Records are built once at creation time; after that they live on disk as
plain dicts and steps are updated by merging dicts.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

DEFAULT_URGENCY = "unspecified"
DEFAULT_STEP_STATUS = "upcoming"
DEFAULT_COORDINATOR = "SOS Team"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def now_ms() -> int:
    return int(time.time() * 1000)


def iso_timestamp(ms: int) -> str:
    """Millisecond-precision UTC timestamp, e.g. 2025-01-01T10:00:00.000Z."""
    stamp = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_count(value: Any) -> int:
    """
    Parse a leading integer the lenient way form inputs need: "12" and
    "12 people" give 12, 7.9 gives 7, anything unparsable gives 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


@dataclass
class Submission:
    name: str
    email: str
    city: str
    interest: str
    phone: str = ""
    message: str = ""
    id: int = field(default_factory=now_ms)
    timestamp: Optional[str] = None

    def __post_init__(self):
        self.phone = self.phone or ""
        self.message = self.message or ""
        if self.timestamp is None:
            self.timestamp = iso_timestamp(self.id)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "city": self.city,
            "interest": self.interest,
            "message": self.message,
        }


@dataclass
class Referral:
    name: str
    referral_name: str
    situation: str
    relationship: str = ""
    urgency: str = DEFAULT_URGENCY
    id: int = field(default_factory=now_ms)
    timestamp: Optional[str] = None

    def __post_init__(self):
        self.relationship = self.relationship or ""
        self.urgency = self.urgency or DEFAULT_URGENCY
        if self.timestamp is None:
            self.timestamp = iso_timestamp(self.id)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "name": self.name,
            "referralName": self.referral_name,
            "relationship": self.relationship,
            "urgency": self.urgency,
            "situation": self.situation,
        }


@dataclass
class Step:
    location: Any = None
    city: Any = None
    area: Any = None
    steppers: Any = 0
    status: Any = DEFAULT_STEP_STATUS
    start_time: Any = None
    end_time: Any = None
    purpose: Any = None
    outcome: Any = None
    coordinated_by: Any = DEFAULT_COORDINATOR
    id: int = field(default_factory=now_ms)

    def __post_init__(self):
        self.steppers = parse_count(self.steppers)
        self.status = self.status or DEFAULT_STEP_STATUS
        self.end_time = self.end_time or None
        self.outcome = self.outcome or None
        self.coordinated_by = self.coordinated_by or DEFAULT_COORDINATOR

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "location": self.location,
            "city": self.city,
            "area": self.area,
            "steppers": self.steppers,
            "status": self.status,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "purpose": self.purpose,
            "outcome": self.outcome,
            "coordinatedBy": self.coordinated_by,
        }


def merge_step(existing: dict, changes: dict) -> dict:
    """Shallow merge; any key in ``changes`` wins, ``id`` included."""
    return {**existing, **changes}
