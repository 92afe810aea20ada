import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

import firebase_admin
from firebase_admin import auth

from interview_generator.core.firebase import get_firebase_app

logger = logging.getLogger(__name__)

_BEARER_PATTERN = re.compile(r'^Bearer (.+)$')


@dataclass(frozen=True)
class VerifiedIdentity:
    """A user id taken from a cryptographically verified ID token."""
    uid: str


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    match = _BEARER_PATTERN.match(authorization)
    return match.group(1) if match else None


class FirebaseTokenVerifier:
    """
    Verifies Firebase ID tokens.

    Verification never raises: an invalid, expired or otherwise unverifiable
    token yields None and the caller keeps its unverified fallback id.
    """

    def __init__(self, app_factory: Callable[[], firebase_admin.App] = get_firebase_app):
        self._app_factory = app_factory

    def _verify(self, id_token: str) -> dict:
        return auth.verify_id_token(id_token, app=self._app_factory())

    async def verify(self, id_token: str) -> Optional[VerifiedIdentity]:
        try:
            decoded = await asyncio.to_thread(self._verify, id_token)
        except Exception as e:
            logger.warning(f"Token verification failed (falling back to body userid): {e}")
            return None

        uid = decoded.get("uid") if decoded else None
        if not uid:
            logger.warning("Verified token carries no uid (falling back to body userid)")
            return None
        return VerifiedIdentity(uid=uid)
