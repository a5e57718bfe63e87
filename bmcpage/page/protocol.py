"""Envelope shapes returned by the management controller's web API."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import OUTCOME_ERR, OUTCOME_OK, URL_ERROR_SENTINEL
from .errors import ParseError, ShapeError


class ResponseEnvelope(BaseModel):
    """``{"response": [body, ...]}``; only the first body is ever consumed."""

    model_config = ConfigDict(extra="allow")

    response: List[Any] = Field(min_length=1)

    @property
    def body(self) -> Any:
        return self.response[0]


class MutationEntry(BaseModel):
    """First element of each value in a mutation reply, e.g. ``{"result": "ok"}``."""

    model_config = ConfigDict(extra="allow")

    result: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.result == OUTCOME_OK


def _decode(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ParseError(f"Malformed JSON: {exc}")


def parse_get_envelope(raw: str) -> Any:
    decoded = _decode(raw)
    if not isinstance(decoded, dict):
        raise ShapeError(f"Expected a JSON object envelope, got {type(decoded).__name__}")
    try:
        envelope = ResponseEnvelope.model_validate(decoded)
    except ValidationError as exc:
        raise ShapeError(f"Bad response envelope: {exc.errors()[0]['msg']}")
    return envelope.body


def parse_mutation_outcome(raw: str) -> str:
    """Classify the body of a POST reply as ``"ok"`` or ``"err"``.

    The ``"urlerr"`` sentinel stands for a request that never got an answer and
    short-circuits to ``"err"``. For a real body every top-level key is visited
    in order and each one overwrites the running result, so the last key
    decides. An empty mapping has no result and counts as ``"err"``.
    """
    if raw == URL_ERROR_SENTINEL:
        return OUTCOME_ERR

    decoded = _decode(raw)
    if not isinstance(decoded, dict):
        raise ShapeError(f"Expected a JSON object, got {type(decoded).__name__}")

    last: Optional[MutationEntry] = None
    for key, value in decoded.items():
        if not isinstance(value, list) or not value:
            raise ShapeError(f"Entry {key!r} is not a non-empty list")
        try:
            last = MutationEntry.model_validate(value[0])
        except ValidationError as exc:
            raise ShapeError(f"Entry {key!r}: {exc.errors()[0]['msg']}")

    if last is not None and last.ok:
        return OUTCOME_OK
    return OUTCOME_ERR


__all__ = [
    "ResponseEnvelope",
    "MutationEntry",
    "parse_get_envelope",
    "parse_mutation_outcome",
]
