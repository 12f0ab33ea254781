"""
Error taxonomy for the decoder and the catalog.

These are values, not exceptions: decode() and validate_component() return
them and the caller decides whether to log, drop or report.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN_MESSAGE = "UNKNOWN_MESSAGE"
    MALFORMED_ACTION = "MALFORMED_ACTION"
    MALFORMED_ERROR = "MALFORMED_ERROR"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"
    MISSING_REQUIRED = "MISSING_REQUIRED"
    DISALLOWED_PROPERTIES = "DISALLOWED_PROPERTIES"


@dataclass(frozen=True)
class ProtocolError:
    error_code: ClassVar[ErrorCode]

    @property
    def message(self) -> str:
        return self.error_code.value

    def details(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details(),
        }


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DecodeError(ProtocolError):
    """Base for everything decode() can return instead of messages"""


@dataclass(frozen=True)
class ParseError(DecodeError):
    """Top-level JSON syntax failure"""
    error_code: ClassVar[ErrorCode] = ErrorCode.PARSE_ERROR
    reason: str
    line: int | None = None
    column: int | None = None

    @property
    def message(self) -> str:
        return f"Invalid JSON: {self.reason}"

    def details(self) -> dict[str, Any]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class UnknownMessage(DecodeError):
    """Envelope that carries neither or both of the action/error keys"""
    error_code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN_MESSAGE
    payload: Any

    @property
    def message(self) -> str:
        return "Unknown message envelope"

    def details(self) -> dict[str, Any]:
        return {"payload": self.payload}


@dataclass(frozen=True)
class MalformedAction(DecodeError):
    error_code: ClassVar[ErrorCode] = ErrorCode.MALFORMED_ACTION
    payload: Any

    @property
    def message(self) -> str:
        return "Malformed action payload"

    def details(self) -> dict[str, Any]:
        return {"payload": self.payload}


@dataclass(frozen=True)
class MalformedError(DecodeError):
    error_code: ClassVar[ErrorCode] = ErrorCode.MALFORMED_ERROR
    payload: Any

    @property
    def message(self) -> str:
        return "Malformed error payload"

    def details(self) -> dict[str, Any]:
        return {"payload": self.payload}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CatalogError(ProtocolError):
    """Base for component validation failures"""


@dataclass(frozen=True)
class UnknownType(CatalogError):
    error_code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN_TYPE
    name: str

    @property
    def message(self) -> str:
        return f"Unknown component type: {self.name}"

    def details(self) -> dict[str, Any]:
        return {"type": self.name}


@dataclass(frozen=True)
class MissingRequired(CatalogError):
    error_code: ClassVar[ErrorCode] = ErrorCode.MISSING_REQUIRED
    names: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Missing required properties: {', '.join(self.names)}"

    def details(self) -> dict[str, Any]:
        return {"properties": list(self.names)}


@dataclass(frozen=True)
class DisallowedProperties(CatalogError):
    error_code: ClassVar[ErrorCode] = ErrorCode.DISALLOWED_PROPERTIES
    names: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Properties not allowed: {', '.join(self.names)}"

    def details(self) -> dict[str, Any]:
        return {"properties": list(self.names)}


__all__ = [
    "ErrorCode",
    "ProtocolError",
    "DecodeError",
    "ParseError",
    "UnknownMessage",
    "MalformedAction",
    "MalformedError",
    "CatalogError",
    "UnknownType",
    "MissingRequired",
    "DisallowedProperties",
]
