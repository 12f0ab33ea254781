"""
Encoder - data model values to A2UI v0.9 JSON.

Every message is an envelope {<messageKey>: payload, "version": "v0.9"} and
every public entry point returns a JSON array string, even for a single
message, so the transport can write it out unchanged.

Example:
    surface = (
        Surface.new("status")
        .add_component(Component("t", ComponentType.TEXT, {"text": "hi"}))
        .set_root("t")
    )
    encode_surface(surface)
    # '[{"updateComponents":{...},"version":"v0.9"},{"createSurface":{...},"version":"v0.9"}]'
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, Mapping, Optional

from .component import Component
from .config import ProtocolConfig, get_config
from .messages import (
    CreateSurface,
    DeleteSurface,
    ThemePayload,
    UpdateComponents,
    UpdateDataModel,
)
from .surface import Surface
from .values import Action, BoundValue, CheckRule, FunctionCall, TemplateChildList, Theme

logger = logging.getLogger(__name__)

DEFAULT_ROOT_ID = "root"

_SEPARATOR_RE = re.compile(r"[_\-]+")


def to_camel_case(key: str) -> str:
    """Convert snake_case (or kebab-case) to camelCase; camelCase passes through"""
    components = [part for part in _SEPARATOR_RE.split(key) if part]
    if not components:
        return key
    return components[0] + "".join(x[:1].upper() + x[1:] for x in components[1:])


def effective_root_id(surface: Surface) -> str:
    """Root component id as sent in createSurface"""
    if surface.root_component_id is None:
        return DEFAULT_ROOT_ID
    return surface.root_component_id


# ---------------------------------------------------------------------------
# Property values
# ---------------------------------------------------------------------------

def encode_value(value: Any) -> Any:
    """
    Encode a property value to its wire form.

    - BoundValue with a path -> {"path": ...} (any fallback literal is dropped)
    - BoundValue literal only -> the bare literal
    - FunctionCall -> {"call", "args"?, "returnType"?}
    - Action -> {"event": {"name", "context"?}}
    - CheckRule -> {"condition", "message"}
    - TemplateChildList -> {"path", "componentId"}
    - lists/tuples element-wise, mappings value-wise, scalars unchanged
    """
    if isinstance(value, BoundValue):
        if value.path is not None:
            return {"path": value.path}
        return encode_value(value.literal)

    if isinstance(value, FunctionCall):
        encoded: dict[str, Any] = {"call": value.call}
        if value.args:
            encoded["args"] = {k: encode_value(v) for k, v in value.args.items()}
        if value.return_type is not None:
            encoded["returnType"] = value.return_type
        return encoded

    if isinstance(value, Action):
        event: dict[str, Any] = {"name": value.name}
        if value.context:
            event["context"] = {k: encode_value(v) for k, v in value.context.items()}
        return {"event": event}

    if isinstance(value, CheckRule):
        return {
            "condition": encode_value(value.condition),
            "message": value.message,
        }

    if isinstance(value, TemplateChildList):
        return {"path": value.path, "componentId": value.component_id}

    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]

    if isinstance(value, Mapping):
        return {k: encode_value(v) for k, v in value.items()}

    return value


def encode_component(component: Component) -> dict[str, Any]:
    """Flatten a component to {"id", "component", ...camelCasedProperties}"""
    encoded: dict[str, Any] = {
        "id": component.id,
        "component": component.type_name,
    }
    for key, value in component.properties.items():
        wire_key = to_camel_case(key)
        if wire_key in encoded:
            logger.warning(
                "Component %s: property %r collides with wire key %r, last value wins",
                component.id, key, wire_key,
            )
        encoded[wire_key] = encode_value(value)
    return encoded


def _encode_theme(theme: Optional[Theme]) -> Optional[ThemePayload]:
    if theme is None or theme.is_empty():
        return None

    fields: dict[str, str] = {}
    if theme.primary_color is not None:
        fields["primaryColor"] = theme.primary_color
    if theme.icon_url is not None:
        fields["iconUrl"] = theme.icon_url
    if theme.agent_display_name is not None:
        fields["agentDisplayName"] = theme.agent_display_name
    return ThemePayload(**fields)


# ---------------------------------------------------------------------------
# Message builders (envelope dicts)
# ---------------------------------------------------------------------------

def _resolve(config: Optional[ProtocolConfig]) -> ProtocolConfig:
    return config if config is not None else get_config()


def update_components_message(
    surface: Surface, config: Optional[ProtocolConfig] = None
) -> dict[str, Any]:
    config = _resolve(config)

    if config.warn_on_duplicate_ids:
        duplicates = surface.duplicate_component_ids()
        if duplicates:
            logger.warning(
                "Surface %s has duplicate component ids: %s",
                surface.id, ", ".join(duplicates),
            )

    message = UpdateComponents(
        surfaceId=surface.id,
        components=[encode_component(c) for c in surface.components],
    )
    return message.envelope(config.version)


def update_data_model_message(
    surface_id: str, data: Mapping[str, Any], config: Optional[ProtocolConfig] = None
) -> dict[str, Any]:
    message = UpdateDataModel(surfaceId=surface_id, data=encode_value(data))
    return message.envelope(_resolve(config).version)


def update_data_model_path_message(
    surface_id: str, path: str, value: Any, config: Optional[ProtocolConfig] = None
) -> dict[str, Any]:
    # value is always set, so a None value is written as null
    message = UpdateDataModel(surfaceId=surface_id, path=path, value=encode_value(value))
    return message.envelope(_resolve(config).version)


def delete_data_model_path_message(
    surface_id: str, path: str, config: Optional[ProtocolConfig] = None
) -> dict[str, Any]:
    # No value key: its absence is the delete signal
    message = UpdateDataModel(surfaceId=surface_id, path=path)
    return message.envelope(_resolve(config).version)


def create_surface_message(
    surface: Surface, config: Optional[ProtocolConfig] = None
) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "surfaceId": surface.id,
        "rootComponentId": effective_root_id(surface),
    }
    if surface.catalog_id is not None:
        fields["catalogId"] = surface.catalog_id
    if surface.send_data_model:
        fields["sendDataModel"] = True
    theme = _encode_theme(surface.theme)
    if theme is not None:
        fields["theme"] = theme

    return CreateSurface(**fields).envelope(_resolve(config).version)


def delete_surface_message(
    surface_id: str, config: Optional[ProtocolConfig] = None
) -> dict[str, Any]:
    return DeleteSurface(surfaceId=surface_id).envelope(_resolve(config).version)


def surface_messages(
    surface: Surface, config: Optional[ProtocolConfig] = None
) -> list[dict[str, Any]]:
    """
    Messages a renderer needs for a full surface, in order:
    updateComponents, updateDataModel (only with data), createSurface (only with a root).
    """
    config = _resolve(config)
    messages = [update_components_message(surface, config)]

    if surface.data:
        messages.append(update_data_model_message(surface.id, surface.data, config))

    if surface.root_component_id is not None:
        messages.append(create_surface_message(surface, config))

    return messages


# ---------------------------------------------------------------------------
# JSON entry points
# ---------------------------------------------------------------------------

def encode_messages(
    messages: Iterable[dict[str, Any]], config: Optional[ProtocolConfig] = None
) -> str:
    """Serialize envelopes as one compact JSON array"""
    return json.dumps(
        list(messages),
        separators=(",", ":"),
        ensure_ascii=_resolve(config).ensure_ascii,
    )


def update_components(surface: Surface, config: Optional[ProtocolConfig] = None) -> str:
    return encode_messages([update_components_message(surface, config)], config)


def update_data_model(
    surface_id: str, data: Mapping[str, Any], config: Optional[ProtocolConfig] = None
) -> str:
    return encode_messages([update_data_model_message(surface_id, data, config)], config)


def update_data_model_path(
    surface_id: str, path: str, value: Any, config: Optional[ProtocolConfig] = None
) -> str:
    return encode_messages([update_data_model_path_message(surface_id, path, value, config)], config)


def delete_data_model_path(
    surface_id: str, path: str, config: Optional[ProtocolConfig] = None
) -> str:
    return encode_messages([delete_data_model_path_message(surface_id, path, config)], config)


def create_surface(surface: Surface, config: Optional[ProtocolConfig] = None) -> str:
    return encode_messages([create_surface_message(surface, config)], config)


def delete_surface(surface_id: str, config: Optional[ProtocolConfig] = None) -> str:
    return encode_messages([delete_surface_message(surface_id, config)], config)


def encode_surface(surface: Surface, config: Optional[ProtocolConfig] = None) -> str:
    """
    Encode a whole surface as a single JSON array.

    The array must go out as one transport frame: the data and createSurface
    messages depend on the components arriving with them.
    """
    config = _resolve(config)
    messages = surface_messages(surface, config)
    logger.debug("Encoded surface %s as %d message(s)", surface.id, len(messages))
    return encode_messages(messages, config)


__all__ = [
    "DEFAULT_ROOT_ID",
    "to_camel_case",
    "effective_root_id",
    "encode_value",
    "encode_component",
    "update_components_message",
    "update_data_model_message",
    "update_data_model_path_message",
    "delete_data_model_path_message",
    "create_surface_message",
    "delete_surface_message",
    "surface_messages",
    "encode_messages",
    "update_components",
    "update_data_model",
    "update_data_model_path",
    "delete_data_model_path",
    "create_surface",
    "delete_surface",
    "encode_surface",
]
