"""Agent reply normalization — shape detection, decoding and message extraction.

The workflow answers with either plain text or a loosely-structured JSON
payload. Decoding yields an explicit Decoded | Malformed outcome, and a decoded
value is classified as ReplyFields (an object carrying at least one of the
message fields) or RawReply (anything else). extract_message() folds those
variants into the final text without any exception handling.
"""

import json
from dataclasses import dataclass
from typing import Any

import json5

# Lookup order matters: the first present key wins, even when its value is empty.
MESSAGE_FIELDS = ("result", "content", "message")


@dataclass(frozen=True)
class Decoded:
    value: Any


@dataclass(frozen=True)
class Malformed:
    reason: str


type DecodeOutcome = Decoded | Malformed


@dataclass(frozen=True)
class ReplyFields:
    """Message fields of a decoded JSON object. None marks an absent key."""

    result: str | None = None
    content: str | None = None
    message: str | None = None

    def first_present(self) -> str:
        for value in (self.result, self.content, self.message):
            if value is not None:
                return value
        return ""


@dataclass(frozen=True)
class RawReply:
    """A decoded value with none of the message fields; the raw body is used."""


type Reply = ReplyFields | RawReply


def is_structured(body: str) -> bool:
    """Bracket-delimited bodies are attempted as JSON; everything else is text."""
    return (body.startswith("{") and body.endswith("}")) or (
        body.startswith("[") and body.endswith("]")
    )


def decode(body: str) -> DecodeOutcome:
    """Permissively decode body.

    Plain JSON is tried first, accepting raw control characters inside
    strings. Anything it rejects is retried as JSON5, which accepts single
    quotes, unquoted keys, trailing commas and comments.
    """
    try:
        return Decoded(value=json.loads(body, strict=False))
    except (ValueError, RecursionError):
        return _decode_relaxed(body)


def _decode_relaxed(body: str) -> DecodeOutcome:
    try:
        return Decoded(value=json5.loads(body))
    except (ValueError, RecursionError) as exc:
        return Malformed(reason=str(exc))


def unreadable_reason(outcome: DecodeOutcome) -> str | None:
    """Why a structured body cannot be read by field, or None when it can."""
    if isinstance(outcome, Malformed):
        return outcome.reason
    if not isinstance(outcome.value, dict):
        return f"expected a JSON object, got {type(outcome.value).__name__}"
    return None


def classify(value: Any) -> Reply:
    if not isinstance(value, dict):
        return RawReply()
    present = {name: coerce_text(value[name]) for name in MESSAGE_FIELDS if name in value}
    if not present:
        return RawReply()
    return ReplyFields(**present)


def coerce_text(value: Any) -> str:
    """Render a JSON value as text: strings verbatim, null empty, others as JSON."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def extract_message(body: str, outcome: DecodeOutcome) -> str:
    """Return the reply text for a trimmed structured body and its decode outcome."""
    if isinstance(outcome, Malformed):
        return body
    reply = classify(outcome.value)
    if isinstance(reply, ReplyFields):
        return reply.first_present()
    return body


def strip_leading_newlines(message: str) -> str:
    return message.lstrip("\n")
