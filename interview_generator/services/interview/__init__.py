"""
Interview generation services.

Architecture:
- service.py: Orchestration (prompt -> model -> parse -> store)
- identity.py: Optional Firebase ID token verification
- store.py: Firestore persistence
- covers.py: Cover image picker
"""

from .covers import INTERVIEW_COVERS, get_random_interview_cover
from .identity import FirebaseTokenVerifier, VerifiedIdentity, extract_bearer_token
from .service import InterviewService
from .store import FirestoreInterviewStore

__all__ = [
    'InterviewService',
    'FirebaseTokenVerifier',
    'VerifiedIdentity',
    'extract_bearer_token',
    'FirestoreInterviewStore',
    'INTERVIEW_COVERS',
    'get_random_interview_cover',
]
