from __future__ import annotations

import hmac
import logging

from fastapi import Header, HTTPException

from salon.core.config import settings


logger = logging.getLogger(__name__)


def verify_admin_key(provided: str | None, expected: str | None, env: str) -> bool:
    if not expected:
        if env.lower() in {"dev", "local"}:
            logger.warning("ADMIN_API_KEY not set; accepting admin request in dev mode")
            return True
        logger.error("ADMIN_API_KEY not set; refusing admin request")
        return False
    if not provided:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def require_admin(x_admin_key: str | None = Header(None, alias="X-Admin-Key")) -> None:
    if not verify_admin_key(x_admin_key, settings.ADMIN_API_KEY, settings.ENV):
        raise HTTPException(status_code=401, detail="Admin access required")


def require_user(x_user_id: str | None = Header(None, alias="X-User-Id")) -> str:
    """The caller id, already verified by the identity layer in front of this service."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="No user identity provided")
    return x_user_id.strip()


def optional_user(x_user_id: str | None = Header(None, alias="X-User-Id")) -> str | None:
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return None
