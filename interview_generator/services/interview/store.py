import logging
from typing import Callable

import firebase_admin
from firebase_admin import firestore_async

from interview_generator.core.config import settings
from interview_generator.core.firebase import get_firebase_app
from interview_generator.schemas.interview import InterviewRecord

logger = logging.getLogger(__name__)


class FirestoreInterviewStore:
    """Writes interview records to a Firestore collection. Insert only."""

    def __init__(
        self,
        collection: str = settings.INTERVIEWS_COLLECTION,
        app_factory: Callable[[], firebase_admin.App] = get_firebase_app,
    ):
        self.collection = collection
        self._app_factory = app_factory
        self._client = None

    @property
    def client(self):
        if self._client is None:
            self._client = firestore_async.client(app=self._app_factory())
        return self._client

    async def add(self, record: InterviewRecord) -> str:
        """Insert the record as a new document and return its id."""
        _, doc_ref = await self.client.collection(self.collection).add(record.to_document())
        logger.info(f"Stored interview {doc_ref.id} in '{self.collection}'")
        return doc_ref.id
