"""
LLM provider adapter.

Architecture:
- llm_service.py: Gemini calls
- responses.py: Known response shapes (tagged union)
- question_parser.py: Model output to question list
"""

from .llm_service import LLMService
from .question_parser import ParsedQuestions, parse_questions
from .responses import (
    LLMResponse,
    NestedOutputResponse,
    TextResponse,
    UnrecognizedResponse,
    classify_llm_response,
)

__all__ = [
    'LLMService',
    'LLMResponse',
    'TextResponse',
    'NestedOutputResponse',
    'UnrecognizedResponse',
    'classify_llm_response',
    'ParsedQuestions',
    'parse_questions',
]
