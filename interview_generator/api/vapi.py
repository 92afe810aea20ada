import logging
import secrets
import uuid
from typing import Any, Optional

from fastapi import APIRouter, Depends, Header, Request

from interview_generator.api.deps import get_interview_service, get_settings, get_token_verifier
from interview_generator.core.config import Settings
from interview_generator.core.exceptions import (
    AppError,
    InterviewGenerationError,
    UnauthorizedRequestError,
)
from interview_generator.core.logger import set_correlation_id
from interview_generator.schemas.interview import (
    ErrorResponse,
    GenerateInterviewRequest,
    LivenessResponse,
    SuccessResponse,
)
from interview_generator.services.interview import (
    FirebaseTokenVerifier,
    InterviewService,
    extract_bearer_token,
)

logger = logging.getLogger(__name__)

vapi_router = APIRouter()


async def read_json_body(request: Request) -> dict[str, Any]:
    """Request body as a dict; missing or malformed bodies become {}."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def check_vapi_secret(config: Settings, provided: Optional[str]) -> None:
    """Require the shared secret when one is configured."""
    if not config.VAPI_SECRET:
        return
    if not provided or not secrets.compare_digest(provided.encode(), config.VAPI_SECRET.encode()):
        logger.error("Unauthorized: missing or invalid x-vapi-secret")
        raise UnauthorizedRequestError()


async def resolve_user_id(
    verifier: FirebaseTokenVerifier,
    authorization: Optional[str],
    fallback_user_id: Any,
) -> Any:
    """Verified token uid when available, otherwise the body-supplied id."""
    id_token = extract_bearer_token(authorization)
    if id_token is None:
        return fallback_user_id

    identity = await verifier.verify(id_token)
    if identity is None:
        return fallback_user_id
    return identity.uid


@vapi_router.post(
    "/vapi-assistant",
    response_model=SuccessResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_interview(
    request: Request,
    x_vapi_secret: Optional[str] = Header(default=None),
    authorization: Optional[str] = Header(default=None),
    config: Settings = Depends(get_settings),
    verifier: FirebaseTokenVerifier = Depends(get_token_verifier),
    service: InterviewService = Depends(get_interview_service),
):
    """
    Generates interview questions for a role and stores the interview.

    Flow:
    1. Check the shared secret (if configured)
    2. Resolve the user id (verified token or body userid)
    3. Generate, parse and store the interview
    """
    set_correlation_id(str(uuid.uuid4()))
    body = await read_json_body(request)

    try:
        check_vapi_secret(config, x_vapi_secret)

        payload = GenerateInterviewRequest.model_validate(body)
        user_id = await resolve_user_id(verifier, authorization, payload.userid)

        await service.create_interview(payload, user_id)
        return SuccessResponse()

    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error in /api/vapi-assistant: {e}", exc_info=True)
        raise InterviewGenerationError(str(e)) from e


@vapi_router.get("/vapi-assistant", response_model=LivenessResponse)
async def vapi_liveness():
    return LivenessResponse()
