"""
A2UI v0.9 protocol core.

Data model for server-driven UI surfaces, an encoder producing the versioned
JSON wire format, a decoder for client action/error messages, and a catalog
for validating custom component types.
"""

from .catalog import Catalog, TypeSpec
from .component import Component, ComponentType
from .config import PROTOCOL_VERSION, ProtocolConfig, get_config
from .decoder import DecodedAction, DecodedError, DecodeResult, decode
from .encoder import (
    create_surface,
    delete_data_model_path,
    delete_surface,
    encode_surface,
    encode_value,
    update_components,
    update_data_model,
    update_data_model_path,
)
from .errors import (
    DisallowedProperties,
    ErrorCode,
    MalformedAction,
    MalformedError,
    MissingRequired,
    ParseError,
    UnknownMessage,
    UnknownType,
)
from .surface import Surface
from .values import (
    Action,
    BoundValue,
    CheckRule,
    ClientError,
    FunctionCall,
    TemplateChildList,
    Theme,
)

__all__ = [
    "PROTOCOL_VERSION",
    "ProtocolConfig",
    "get_config",
    "Surface",
    "Component",
    "ComponentType",
    "BoundValue",
    "FunctionCall",
    "Action",
    "CheckRule",
    "TemplateChildList",
    "Theme",
    "ClientError",
    "Catalog",
    "TypeSpec",
    "encode_surface",
    "encode_value",
    "update_components",
    "update_data_model",
    "update_data_model_path",
    "delete_data_model_path",
    "create_surface",
    "delete_surface",
    "decode",
    "DecodeResult",
    "DecodedAction",
    "DecodedError",
    "ErrorCode",
    "ParseError",
    "UnknownMessage",
    "MalformedAction",
    "MalformedError",
    "UnknownType",
    "MissingRequired",
    "DisallowedProperties",
]
