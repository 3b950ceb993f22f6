"""
Admin guard: a single shared secret carried in the ``x-admin-key`` header.
"""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, Header

from forever_family.config import Settings, get_settings
from forever_family.errors import AuthorizationError

ADMIN_KEY_HEADER = "x-admin-key"


def is_admin(provided: Optional[str], settings: Settings) -> bool:
    if settings.permissive:
        return True
    expected = settings.admin_key
    if not expected or provided is None:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def require_admin(
    admin_key: Optional[str] = Header(default=None, alias=ADMIN_KEY_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    if not is_admin(admin_key, settings):
        raise AuthorizationError()
