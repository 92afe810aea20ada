import logging
from typing import Optional

from google import genai

from interview_generator.core.config import settings
from interview_generator.core.exceptions import ConfigurationError

"""
Language Model (LLM) client configuration.

This module provides:
- A lazily created GenAI SDK client shared by the whole process
- The model identifier used for question generation
"""

logger = logging.getLogger(__name__)

# Singleton client for question generation
_genai_client: Optional[genai.Client] = None


def get_genai_client() -> genai.Client:
    """Get or create the GenAI SDK client instance."""
    global _genai_client
    if _genai_client is None:
        if not settings.GEMINI_API_KEY:
            raise ConfigurationError("GEMINI_API_KEY is not configured")
        try:
            _genai_client = genai.Client(api_key=settings.GEMINI_API_KEY)
        except Exception as e:
            logger.error(f"Failed to initialize GenAI client: {e}")
            raise
    return _genai_client


# Model constant for question generation
GEMINI_MODEL = settings.GEMINI_MODEL
