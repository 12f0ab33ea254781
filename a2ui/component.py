"""
Components - the building blocks of a surface.

Standard kinds map one-to-one onto the v0.9 wire names. Any other kind is an
extension registered in a catalog and is written with its name unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union


class ComponentType(str, Enum):
    # Display
    TEXT = "Text"
    IMAGE = "Image"
    ICON = "Icon"
    VIDEO = "Video"
    AUDIO_PLAYER = "AudioPlayer"
    DIVIDER = "Divider"
    # Interactive
    BUTTON = "Button"
    TEXT_FIELD = "TextField"
    CHECKBOX = "CheckBox"
    DATE_TIME_INPUT = "DateTimeInput"
    SLIDER = "Slider"
    CHOICE_PICKER = "ChoicePicker"
    # Layout
    ROW = "Row"
    COLUMN = "Column"
    LIST = "List"
    # Container
    CARD = "Card"
    TABS = "Tabs"
    MODAL = "Modal"


STANDARD_TYPE_NAMES: frozenset[str] = frozenset(t.value for t in ComponentType)


def wire_type_name(component_type: Union[ComponentType, str]) -> str:
    """Return the name written in the "component" field"""
    if isinstance(component_type, ComponentType):
        return component_type.value
    return component_type


def is_standard_type(component_type: Union[ComponentType, str]) -> bool:
    return wire_type_name(component_type) in STANDARD_TYPE_NAMES


@dataclass(frozen=True)
class Component:
    """
    A single UI element.

    `type` is a ComponentType for the standard kinds or a plain string naming
    an extension kind. Parent/child relationships live in the `children`
    property of container components, which holds either a list of ids or a
    TemplateChildList.
    """
    id: str
    type: Union[ComponentType, str]
    properties: Mapping[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return wire_type_name(self.type)

    @property
    def is_standard(self) -> bool:
        return is_standard_type(self.type)

    def with_property(self, name: str, value: Any) -> "Component":
        """Return a copy with one property set"""
        return Component(self.id, self.type, {**self.properties, name: value})

    @staticmethod
    def standard_types() -> list[ComponentType]:
        return list(ComponentType)


__all__ = [
    "ComponentType",
    "STANDARD_TYPE_NAMES",
    "Component",
    "wire_type_name",
    "is_standard_type",
]
