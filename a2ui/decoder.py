"""
Decoder - inbound A2UI v0.9 client messages.

Accepts a JSON array of envelopes, or a single envelope object for clients
that do not batch. Decoding is fail-fast: the first invalid envelope aborts
the whole batch and only that error is returned.

Example:
    result = decode('[{"action":{"event":{"name":"refresh"},"surfaceId":"s1"}}]')
    if result.ok:
        for message in result.messages:
            ...
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import ValidationError

from .errors import DecodeError, MalformedAction, MalformedError, ParseError, UnknownMessage
from .messages import ActionPayload, BareActionPayload, ErrorPayload
from .values import Action, ClientError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedAction:
    """
    An action plus its envelope metadata.

    metadata holds surface_id / source_component_id / timestamp (each possibly
    None) for canonical envelopes, and is empty for bare-fallback envelopes.
    """
    action: Action
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DecodedError:
    """A client error plus {"surface_id": ...} metadata"""
    error: ClientError
    metadata: dict[str, Any] = field(default_factory=dict)


DecodedMessage = Union[DecodedAction, DecodedError]


@dataclass(frozen=True)
class DecodeResult:
    ok: bool
    messages: list[DecodedMessage] = field(default_factory=list)
    error: Optional[DecodeError] = None

    @classmethod
    def success(cls, messages: list[DecodedMessage]) -> "DecodeResult":
        return cls(ok=True, messages=messages)

    @classmethod
    def failure(cls, error: DecodeError) -> "DecodeResult":
        return cls(ok=False, error=error)


def decode(text: Union[str, bytes]) -> DecodeResult:
    """
    Decode inbound JSON text.

    Args:
        text: Raw frame/event text as received from the transport

    Returns:
        DecodeResult with either all decoded messages or the first error
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Rejected inbound message: invalid JSON (%s)", e.msg)
        return DecodeResult.failure(ParseError(e.msg, line=e.lineno, column=e.colno))
    except UnicodeDecodeError as e:
        logger.debug("Rejected inbound message: invalid UTF-8")
        return DecodeResult.failure(ParseError(str(e)))
    except RecursionError:
        logger.debug("Rejected inbound message: nesting too deep")
        return DecodeResult.failure(ParseError("nesting too deep"))

    if isinstance(parsed, list):
        envelopes = parsed
    elif isinstance(parsed, dict):
        envelopes = [parsed]
    else:
        return _fail(UnknownMessage(parsed))

    messages: list[DecodedMessage] = []
    for envelope in envelopes:
        decoded = decode_message(envelope)
        if isinstance(decoded, DecodeError):
            return _fail(decoded)
        messages.append(decoded)

    logger.debug("Decoded %d inbound message(s)", len(messages))
    return DecodeResult.success(messages)


def decode_message(envelope: Any) -> Union[DecodedMessage, DecodeError]:
    """Decode one envelope; it must carry exactly one of the action/error keys"""
    if not isinstance(envelope, dict):
        return UnknownMessage(envelope)

    has_action = "action" in envelope
    has_error = "error" in envelope

    if has_action and not has_error:
        return decode_action(envelope["action"])
    if has_error and not has_action:
        return decode_error(envelope["error"])
    return UnknownMessage(envelope)


def decode_action(payload: Any) -> Union[DecodedAction, DecodeError]:
    """
    Decode an action payload.

    Canonical: {"event": {"name", "context"?}, "surfaceId"?, "sourceComponentId"?, "timestamp"?}
    Bare fallback: {"name", "context"?}
    """
    if not isinstance(payload, dict):
        return MalformedAction(payload)

    try:
        if "event" in payload:
            canonical = ActionPayload.model_validate(payload)
            action = Action(name=canonical.event.name, context=canonical.event.context)
            metadata = {
                "surface_id": canonical.surfaceId,
                "source_component_id": canonical.sourceComponentId,
                "timestamp": canonical.timestamp,
            }
            return DecodedAction(action, metadata)

        if "name" in payload:
            bare = BareActionPayload.model_validate(payload)
            return DecodedAction(Action(name=bare.name, context=bare.context), {})
    except ValidationError:
        return MalformedAction(payload)

    return MalformedAction(payload)


def decode_error(payload: Any) -> Union[DecodedError, DecodeError]:
    """Decode an error payload; "type" is required, surfaceId goes to metadata"""
    if not isinstance(payload, dict):
        return MalformedError(payload)

    try:
        parsed = ErrorPayload.model_validate(payload)
    except ValidationError:
        return MalformedError(payload)

    error = ClientError(type=parsed.type, path=parsed.path, message=parsed.message)
    return DecodedError(error, {"surface_id": parsed.surfaceId})


def _fail(error: DecodeError) -> DecodeResult:
    logger.debug("Rejected inbound message: %s", error.error_code.value)
    return DecodeResult.failure(error)


__all__ = [
    "DecodedAction",
    "DecodedError",
    "DecodedMessage",
    "DecodeResult",
    "decode",
    "decode_message",
    "decode_action",
    "decode_error",
]
