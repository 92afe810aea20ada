"""
Firebase Admin SDK initialization.

Provides the process-wide Firebase app used for ID token verification and
Firestore access. The app is built once, on first use, from the service
account fields in the settings.
"""
import logging
import threading

import firebase_admin
from firebase_admin import credentials

from interview_generator.core.config import Settings, settings
from interview_generator.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_init_lock = threading.Lock()


def build_service_account(config: Settings) -> dict:
    """Service-account info in the shape google-auth expects."""
    return {
        "type": "service_account",
        "project_id": config.FIREBASE_PROJECT_ID,
        "client_email": config.FIREBASE_CLIENT_EMAIL,
        "private_key": config.FIREBASE_PRIVATE_KEY,
        "token_uri": "https://oauth2.googleapis.com/token",
    }


def get_firebase_app(config: Settings = settings) -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first call."""
    with _init_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            # No default app yet
            pass

        if not config.firebase_configured:
            raise ConfigurationError(
                "Firebase service account is not configured",
                details={"required": ["FIREBASE_PROJECT_ID", "FIREBASE_CLIENT_EMAIL", "FIREBASE_PRIVATE_KEY"]},
            )

        cred = credentials.Certificate(build_service_account(config))
        app = firebase_admin.initialize_app(cred, {"projectId": config.FIREBASE_PROJECT_ID})
        logger.info(f"Firebase app initialized for project '{config.FIREBASE_PROJECT_ID}'")
        return app
