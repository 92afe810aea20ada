import logging
from typing import Any, Callable, Optional, Protocol

from interview_generator.core.exceptions import QuestionParseError
from interview_generator.core.prompts import generate_interview_questions_prompt
from interview_generator.schemas.interview import (
    GenerateInterviewRequest,
    InterviewRecord,
    normalize_techstack,
)
from interview_generator.services.interview.covers import get_random_interview_cover
from interview_generator.services.llm.question_parser import parse_questions
from interview_generator.services.llm.responses import LLMResponse

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> LLMResponse: ...


class InterviewStore(Protocol):
    async def add(self, record: InterviewRecord) -> str: ...


class InterviewService:
    """
    Generates one interview per call.

    Flow:
    1. Build the prompt from the request body
    2. Call the model once
    3. Parse the reply into questions (502 when none)
    4. Insert the record
    """

    def __init__(
        self,
        llm: TextGenerator,
        store: InterviewStore,
        cover_picker: Callable[[], str] = get_random_interview_cover,
    ):
        self.llm = llm
        self.store = store
        self.cover_picker = cover_picker

    async def create_interview(
        self,
        payload: GenerateInterviewRequest,
        user_id: Optional[Any],
    ) -> InterviewRecord:
        prompt = generate_interview_questions_prompt(
            role=payload.role,
            level=payload.level,
            techstack=payload.techstack,
            interview_type=payload.type,
            amount=payload.amount,
        )

        response = await self.llm.generate_text(prompt)
        parsed = parse_questions(response.text)

        if not parsed:
            logger.error(
                f"LLM did not return questions in a parseable format. Raw LLM output: {response.text!r}"
            )
            raise QuestionParseError(details={"response_kind": response.kind})

        logger.info(f"Parsed {len(parsed.questions)} question(s) using the {parsed.strategy} path")

        record = InterviewRecord(
            role=payload.role,
            type=payload.type,
            level=payload.level,
            techstack=normalize_techstack(payload.techstack),
            questions=parsed.questions,
            user_id=user_id,
            finalized=True,
            cover_image=self.cover_picker(),
        )

        document_id = await self.store.add(record)
        logger.info(f"Interview {document_id} created for user {user_id!r}")
        return record
