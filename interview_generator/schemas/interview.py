from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Literal, Optional

# --- Request Models ---

class GenerateInterviewRequest(BaseModel):
    """
    Body posted by the voice assistant workflow.
    Every field is optional and untyped; missing values flow through as None.
    """
    model_config = ConfigDict(extra="ignore")

    type: Any = Field(default=None, description="Behavioural vs technical weighting.")
    role: Any = Field(default=None, description="The job role, e.g. 'Frontend Developer'.")
    level: Any = Field(default=None, description="The job experience level, e.g. 'Junior'.")
    techstack: Any = Field(default=None, description="Comma separated string or list of technologies.")
    amount: Any = Field(default=None, description="Number of questions requested.")
    userid: Any = Field(default=None, description="Unverified user id supplied by the caller.")


def normalize_techstack(techstack: Any) -> list[str]:
    """Split a comma separated string or stringify a list; trim every element."""
    if isinstance(techstack, str):
        items = techstack.split(",")
    elif isinstance(techstack, (list, tuple)):
        items = techstack
    else:
        items = []
    return [str(item).strip() for item in items]


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# --- Persisted Models ---

class InterviewRecord(BaseModel):
    """A single generated interview, stored once and never updated."""
    model_config = ConfigDict(populate_by_name=True)

    role: Any = None
    type: Any = None
    level: Any = None
    techstack: list[str] = Field(default_factory=list)
    questions: list[str] = Field(..., min_length=1)
    user_id: Optional[Any] = Field(default=None, alias="userId")
    finalized: bool = True
    cover_image: str = Field(..., alias="coverImage")
    created_at: str = Field(default_factory=utc_timestamp, alias="createdAt")

    def to_document(self) -> dict[str, Any]:
        """Document body using the collection's camelCase field names."""
        return self.model_dump(by_alias=True)


# --- API Response Models ---

class SuccessResponse(BaseModel):
    success: Literal[True] = True


class LivenessResponse(SuccessResponse):
    data: str = "Thank you!"


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
