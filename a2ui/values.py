"""
Dynamic values and the small value types that appear in component properties.

A property value on the wire is one of:
- a bare literal (string, number, bool, list)
- a path binding into the surface data model: {"path": "/user/name"}
- a client-evaluated function call: {"call": ..., "args": ..., "returnType": ...}
- an action, a check rule or a template child list
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


# A2UI v0.9 standard client functions
STANDARD_FUNCTIONS = (
    "required",
    "regex",
    "length",
    "numeric",
    "email",
    "formatString",
    "formatNumber",
    "formatCurrency",
    "formatDate",
    "pluralize",
    "and",
    "or",
    "not",
    "openUrl",
)


@dataclass(frozen=True)
class BoundValue:
    """
    A value that is a literal, a data model binding, or both.

    When both are set the binding wins on the wire; the literal is only kept
    as the pre-binding fallback of the legacy dual mode and is dropped during
    encoding.
    """
    literal: Any = None
    path: Optional[str] = None

    @classmethod
    def literal_of(cls, value: Any) -> "BoundValue":
        """Wrap a static value"""
        return cls(literal=value)

    @classmethod
    def bind(cls, path: str, fallback: Any = None) -> "BoundValue":
        """Bind to a data model path, optionally with a legacy fallback literal"""
        return cls(literal=fallback, path=path)

    @property
    def is_bound(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class FunctionCall:
    """
    A function call evaluated by the client, never by the server.

    Args values may be further FunctionCall or BoundValue instances, forming
    an expression tree of arbitrary depth.
    """
    call: str
    args: Mapping[str, Any] = field(default_factory=dict)
    return_type: Optional[str] = None

    @property
    def is_standard(self) -> bool:
        return self.call in STANDARD_FUNCTIONS

    @classmethod
    def format_string(cls, template: str) -> "FunctionCall":
        return cls("formatString", {"template": template}, "string")

    @classmethod
    def open_url(cls, url: str) -> "FunctionCall":
        return cls("openUrl", {"url": url})

    @classmethod
    def required(cls, value_ref: Any) -> "FunctionCall":
        return cls("required", {"value": value_ref}, "boolean")

    @classmethod
    def regex(cls, value_ref: Any, pattern: str) -> "FunctionCall":
        return cls("regex", {"value": value_ref, "pattern": pattern}, "boolean")

    @classmethod
    def length(
        cls,
        value_ref: Any,
        min: Optional[int] = None,
        max: Optional[int] = None,
    ) -> "FunctionCall":
        """Length check; only the bounds that are given end up in args"""
        args: dict[str, Any] = {"value": value_ref}
        if min is not None:
            args["min"] = min
        if max is not None:
            args["max"] = max
        return cls("length", args, "boolean")


DynamicValue = Union[BoundValue, FunctionCall, str, int, float, bool, list]


@dataclass(frozen=True)
class Action:
    """
    A named event raised by user interaction.

    Context values are resolved by the client against the data model when the
    action fires.
    """
    name: str
    context: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class CheckRule:
    """Validation predicate for input components and the message shown when it fails"""
    condition: Union[bool, BoundValue, FunctionCall]
    message: str

    @classmethod
    def required(cls, value_ref: Any, message: str = "This field is required") -> "CheckRule":
        return cls(FunctionCall.required(value_ref), message)

    @classmethod
    def regex(cls, value_ref: Any, pattern: str, message: str) -> "CheckRule":
        return cls(FunctionCall.regex(value_ref, pattern), message)

    @classmethod
    def max_length(cls, value_ref: Any, max: int, message: str = "Too long") -> "CheckRule":
        return cls(FunctionCall("length", {"value": value_ref, "max": max}, "boolean"), message)


@dataclass(frozen=True)
class TemplateChildList:
    """One child per element of the data model array at `path`, rendered with `component_id`"""
    path: str
    component_id: str


@dataclass(frozen=True)
class Theme:
    """Surface theme, sent with createSurface"""
    primary_color: Optional[str] = None
    icon_url: Optional[str] = None
    agent_display_name: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.primary_color is None
            and self.icon_url is None
            and self.agent_display_name is None
        )


@dataclass(frozen=True)
class ClientError:
    """Error reported by a client, e.g. a failed input validation"""
    type: str
    path: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def validation_failed(cls, path: str, message: Optional[str] = None) -> "ClientError":
        return cls(type="VALIDATION_FAILED", path=path, message=message)


__all__ = [
    "STANDARD_FUNCTIONS",
    "BoundValue",
    "FunctionCall",
    "DynamicValue",
    "Action",
    "CheckRule",
    "TemplateChildList",
    "Theme",
    "ClientError",
]
