"""Admin gate: a static shared access code sent as ``X-Admin-Code``."""

from __future__ import annotations

import secrets

from fastapi import Header

from schoolpulse.config import get_settings
from schoolpulse.errors import Unauthorized


def verify_admin_code(code: str | None) -> bool:
    """Constant-time comparison against the configured admin code."""
    if not code:
        return False
    return secrets.compare_digest(code.encode(), get_settings().admin_access_code.encode())


async def require_admin(x_admin_code: str | None = Header(None)) -> None:
    """FastAPI dependency rejecting requests without the admin code."""
    if not verify_admin_code(x_admin_code):
        raise Unauthorized("Invalid access code")
