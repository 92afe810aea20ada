"""
Known shapes of a text-generation response.

The provider adapter classifies whatever the SDK hands back exactly once, so
the rest of the service only ever sees one of the variants below.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextResponse:
    """The response is a string or carries a string ``text`` field."""
    text: str
    kind: Literal["text"] = "text"


@dataclass(frozen=True)
class NestedOutputResponse:
    """The text lives at ``output[0].content[0].text``."""
    text: str
    kind: Literal["nested_output"] = "nested_output"


@dataclass(frozen=True)
class UnrecognizedResponse:
    """Anything else; ``raw`` holds the serialized payload."""
    raw: str
    kind: Literal["unrecognized"] = "unrecognized"

    @property
    def text(self) -> str:
        return self.raw


LLMResponse = Union[TextResponse, NestedOutputResponse, UnrecognizedResponse]


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(items: Any) -> Any:
    if isinstance(items, (list, tuple)) and items:
        return items[0]
    return None


def _direct_text(raw: Any) -> Optional[str]:
    try:
        text = _field(raw, "text")
    except (ValueError, AttributeError):
        # Some SDK objects raise from the text accessor when there are no candidates
        return None
    return text if isinstance(text, str) else None


def _nested_output_text(raw: Any) -> Optional[str]:
    content = _field(_first(_field(raw, "output")), "content")
    text = _field(_first(content), "text")
    return text if isinstance(text, str) and text else None


def serialize_payload(raw: Any) -> str:
    """Serialize an unknown response object wholesale."""
    model_dump_json = getattr(raw, "model_dump_json", None)
    if callable(model_dump_json):
        return model_dump_json()
    try:
        return json.dumps(raw, default=str)
    except (TypeError, ValueError):
        return str(raw)


def classify_llm_response(raw: Any) -> LLMResponse:
    """Resolve a raw provider response into one of the known shapes."""
    if raw is None:
        return TextResponse(text="")
    if isinstance(raw, str):
        return TextResponse(text=raw)

    text = _direct_text(raw)
    if text is not None:
        return TextResponse(text=text)

    text = _nested_output_text(raw)
    if text is not None:
        return NestedOutputResponse(text=text)

    logger.warning(f"Unrecognized LLM response shape: {type(raw).__name__}")
    return UnrecognizedResponse(raw=serialize_payload(raw))
