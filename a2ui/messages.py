"""
A2UI Protocol (v0.9) wire message models.

Server -> client messages, one per envelope:
  updateComponents  -- define/update components of a surface (flat list)
  updateDataModel   -- replace data, upsert a path, or delete a path
  createSurface     -- tell the client which component to render first
  deleteSurface     -- remove a surface

Client -> server messages:
  action            -- a user interaction event
  error             -- a client-side failure (e.g. validation)

Outbound models are dumped with exclude_unset, so optional keys only appear
when the encoder sets them explicitly. This matters for updateDataModel,
where a set `value` of None is an upsert of JSON null and an unset `value`
is a delete.
"""
from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel


# Supported envelope keys
SERVER_MESSAGE_KEYS = [
    "updateComponents",
    "updateDataModel",
    "createSurface",
    "deleteSurface",
]

CLIENT_MESSAGE_KEYS = [
    "action",
    "error",
]


# ============================================================================
# Server -> client
# ============================================================================

class ServerMessage(BaseModel):
    """Base for payloads wrapped as {<message_key>: payload, "version": ...}"""
    message_key: ClassVar[str]

    def envelope(self, version: str) -> dict[str, Any]:
        return {
            self.message_key: self.model_dump(exclude_unset=True),
            "version": version,
        }


class UpdateComponents(ServerMessage):
    """v0.9 updateComponents"""
    message_key: ClassVar[str] = "updateComponents"
    surfaceId: str
    components: list[dict[str, Any]]


class UpdateDataModel(ServerMessage):
    """v0.9 updateDataModel (bulk data, path upsert or path delete)"""
    message_key: ClassVar[str] = "updateDataModel"
    surfaceId: str
    data: Optional[dict[str, Any]] = None
    path: Optional[str] = None
    value: Any = None


class ThemePayload(BaseModel):
    primaryColor: Optional[str] = None
    iconUrl: Optional[str] = None
    agentDisplayName: Optional[str] = None


class CreateSurface(ServerMessage):
    """v0.9 createSurface"""
    message_key: ClassVar[str] = "createSurface"
    surfaceId: str
    rootComponentId: str
    catalogId: Optional[str] = None
    sendDataModel: Optional[bool] = None
    theme: Optional[ThemePayload] = None


class DeleteSurface(ServerMessage):
    """v0.9 deleteSurface"""
    message_key: ClassVar[str] = "deleteSurface"
    surfaceId: str


# ============================================================================
# Client -> server
# ============================================================================

class ActionEvent(BaseModel):
    name: str
    context: Optional[dict[str, Any]] = None


class ActionPayload(BaseModel):
    """Canonical action: {"event": {...}, "surfaceId", "sourceComponentId", "timestamp"}"""
    event: ActionEvent
    # Metadata is passed through unchecked; only event.name decides validity
    surfaceId: Any = None
    sourceComponentId: Any = None
    timestamp: Any = None


class BareActionPayload(BaseModel):
    """Fallback action sent by minimal clients: {"name", "context"}"""
    name: str
    context: Optional[dict[str, Any]] = None


class ErrorPayload(BaseModel):
    type: str
    path: Any = None
    message: Any = None
    surfaceId: Any = None


__all__ = [
    "SERVER_MESSAGE_KEYS",
    "CLIENT_MESSAGE_KEYS",
    "ServerMessage",
    "UpdateComponents",
    "UpdateDataModel",
    "ThemePayload",
    "CreateSurface",
    "DeleteSurface",
    "ActionEvent",
    "ActionPayload",
    "BareActionPayload",
    "ErrorPayload",
]
