import asyncio
import logging
from typing import Any, Callable, Optional

from google import genai

from interview_generator.core.llm import GEMINI_MODEL, get_genai_client
from interview_generator.core.logger import log_async_execution_time
from interview_generator.services.llm.responses import LLMResponse, classify_llm_response

logger = logging.getLogger(__name__)


class LLMService:
    """
    Adapter around the Gemini text-generation API.

    Issues exactly one request per call (no retries) and hands back the
    response already classified into one of the known shapes.
    """

    def __init__(
        self,
        client_factory: Callable[[], genai.Client] = get_genai_client,
        model: str = GEMINI_MODEL,
    ):
        self._client_factory = client_factory
        self.model = model
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def _generate(self, prompt: str) -> Any:
        return self.client.models.generate_content(model=self.model, contents=prompt)

    @log_async_execution_time
    async def generate_text(self, prompt: str) -> LLMResponse:
        """
        Send the prompt to the model and classify the reply.

        Args:
            prompt: The prompt to send to the LLM.

        Returns:
            The response resolved into a TextResponse, NestedOutputResponse
            or UnrecognizedResponse.
        """
        logger.info(f"Gemini request started (model={self.model}, prompt={len(prompt)} chars)")
        raw = await asyncio.to_thread(self._generate, prompt)
        response = classify_llm_response(raw)
        logger.info(f"Gemini response received as '{response.kind}' ({len(response.text)} chars)")
        return response
