import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional

logger = logging.getLogger(__name__)

# Compile regex patterns once at module level
_CODE_FENCE_OPEN = re.compile(r'^```[\w-]*\s*')
_CODE_FENCE_CLOSE = re.compile(r'\s*```$')
_OUTER_BRACKETS_AND_QUOTES = re.compile(r'^[\s\[\]"]+|[\s\[\]"]+$')
_ITEM_BOUNDARY = re.compile(r'\r?\n|["\']\s*,\s*["\']')
_LEADING_NUMBERING = re.compile(r'^\d+[).\s-]+')
_SURROUNDING_QUOTES = re.compile(r'^["\'\s]+|["\'\s,]+$')

ParseStrategy = Literal["strict", "fallback"]


@dataclass
class ParsedQuestions:
    """Questions extracted from model output and the path that produced them."""
    questions: List[str] = field(default_factory=list)
    strategy: ParseStrategy = "strict"

    def __bool__(self) -> bool:
        return bool(self.questions)


def strip_code_fences(raw_text: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    text = raw_text.strip()
    text = _CODE_FENCE_OPEN.sub('', text)
    text = _CODE_FENCE_CLOSE.sub('', text)
    return text.strip()


def _coerce(items: List[Any]) -> List[str]:
    return [q for q in (str(item).strip() for item in items) if q]


def parse_strict(text: str) -> Optional[List[str]]:
    """
    Interpret the text as JSON: a top-level array, or an object with a
    ``questions`` array. Returns None when the text is not one of those shapes.
    Duplicates are kept.
    """
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None

    if isinstance(parsed, list):
        return _coerce(parsed)
    if isinstance(parsed, dict) and isinstance(parsed.get("questions"), list):
        return _coerce(parsed["questions"])
    return None


def parse_fallback(text: str) -> List[str]:
    """
    Heuristic split for output that is not valid JSON: numbered lines,
    truncated arrays, one question per line. Duplicates are dropped,
    keeping the first occurrence.
    """
    body = _OUTER_BRACKETS_AND_QUOTES.sub('', text)
    pieces = []
    for piece in _ITEM_BOUNDARY.split(body):
        piece = _LEADING_NUMBERING.sub('', piece)
        piece = _SURROUNDING_QUOTES.sub('', piece).strip()
        if piece:
            pieces.append(piece)
    return list(dict.fromkeys(pieces))


def parse_questions(raw_text: Optional[str]) -> ParsedQuestions:
    """Parse model output into a list of questions, strict JSON first."""
    if not raw_text:
        return ParsedQuestions(questions=[], strategy="strict")

    text = strip_code_fences(raw_text)

    questions = parse_strict(text)
    if questions is not None:
        return ParsedQuestions(questions=questions, strategy="strict")

    logger.debug("Model output is not a JSON question list, using fallback parsing")
    return ParsedQuestions(questions=parse_fallback(text), strategy="fallback")
