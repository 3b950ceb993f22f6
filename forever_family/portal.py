"""
Member-portal access codes and demo tokens.

The token is the portal grant serialized as JSON and base64 encoded. It is
not signed or encrypted: anyone holding it can read or forge it, and no
endpoint checks it after it has been issued.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Optional

from forever_family.errors import AuthenticationError
from forever_family.records import now_ms

TOKEN_TTL_MS = 24 * 60 * 60 * 1000

# Demo codes for initial setup; real deployments would issue per-member codes.
TIER_CODES = {
    "FF-BRONZE-2025": "bronze",
    "FF-SILVER-2025": "silver",
    "FF-GOLD-2025": "gold",
    "FF-PLATINUM-2025": "platinum",
}


@dataclass(frozen=True)
class PortalGrant:
    email: str
    tier: str
    issued: int
    exp: int

    def as_dict(self) -> dict:
        return {
            "email": self.email,
            "tier": self.tier,
            "issued": self.issued,
            "exp": self.exp,
        }

    def encode(self) -> str:
        payload = json.dumps(self.as_dict(), separators=(",", ":"))
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def lookup_tier(code: str) -> Optional[str]:
    return TIER_CODES.get(code.strip().upper())


def issue_grant(email: str, code: str, issued: int | None = None) -> PortalGrant:
    tier = lookup_tier(code)
    if not tier:
        raise AuthenticationError()
    issued = now_ms() if issued is None else issued
    return PortalGrant(email=email, tier=tier, issued=issued, exp=issued + TOKEN_TTL_MS)


def decode_token(token: str) -> dict:
    """Reverse :meth:`PortalGrant.encode`. Performs no verification."""
    return json.loads(base64.b64decode(token).decode("utf-8"))
