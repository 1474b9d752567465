"""
app/schemas/common.py - Shared response envelopes and field helpers.
"""
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

_INVISIBLE = ("\u200b", "\u200c", "\u200d", "\ufeff", "\xa0")


def clean_identifier(value: str) -> str:
    """Strip whitespace and invisible characters pasted along with ids."""
    v = (value or "").strip()
    for ch in _INVISIBLE:
        v = v.replace(ch, "")
    if not v:
        raise ValueError("identifier cannot be empty")
    return v


class CamelModel(BaseModel):
    """Wire models: camelCase on the wire, snake_case accepted on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    result: T


class ErrorBody(BaseModel):
    message: str
    code: str
    details: Optional[Dict[str, Any]] = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: ErrorBody
