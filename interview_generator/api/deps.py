from functools import lru_cache

from interview_generator.core.config import Settings, settings
from interview_generator.services.interview import (
    FirebaseTokenVerifier,
    FirestoreInterviewStore,
    InterviewService,
)
from interview_generator.services.llm import LLMService


def get_settings() -> Settings:
    """Process-wide settings, loaded once at startup."""
    return settings


@lru_cache
def get_token_verifier() -> FirebaseTokenVerifier:
    return FirebaseTokenVerifier()


@lru_cache
def get_interview_service() -> InterviewService:
    """
    Dependency providing the interview service.
    Clients are created lazily, on the first request that needs them.
    """
    return InterviewService(
        llm=LLMService(model=settings.GEMINI_MODEL),
        store=FirestoreInterviewStore(collection=settings.INTERVIEWS_COLLECTION),
    )
