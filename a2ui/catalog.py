"""
Catalog - registry of custom component types and their property contracts.

Standard component types (Text, Button, Card, ...) are always valid and are
never looked up in the catalog. Custom types must be registered and their
components must satisfy the declared required / allowed properties.

Example:
    catalog = (
        Catalog.new("my-app-v1")
        .register("Graph", description="Network graph",
                  properties=["nodes", "edges"], required=["nodes"])
        .register("Sparkline", properties=["data", "color"])
    )

    catalog.validate_component(component)  # -> None | CatalogError
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Literal, Mapping, Optional, Union

from .component import Component, is_standard_type
from .errors import CatalogError, DisallowedProperties, MissingRequired, UnknownType
from .surface import Surface

logger = logging.getLogger(__name__)

ANY_PROPERTIES = "any"


@dataclass(frozen=True)
class TypeSpec:
    """Property contract for one custom type"""
    description: Optional[str] = None
    properties: Union[Literal["any"], frozenset[str]] = ANY_PROPERTIES
    required: frozenset[str] = frozenset()
    # Declaration order of `required`, used to report missing names stably
    required_order: tuple[str, ...] = ()

    @property
    def allows_any(self) -> bool:
        return self.properties == ANY_PROPERTIES

    def required_names(self) -> list[str]:
        """Required names in declaration order; names without a recorded order come last, sorted"""
        declared = [name for name in self.required_order if name in self.required]
        return declared + sorted(self.required.difference(declared))


@dataclass(frozen=True)
class Catalog:
    id: str
    types: Mapping[str, TypeSpec] = field(default_factory=dict)

    @classmethod
    def new(cls, catalog_id: str) -> "Catalog":
        return cls(id=catalog_id)

    def register(
        self,
        type_name: str,
        description: Optional[str] = None,
        properties: Union[Literal["any"], Iterable[str]] = ANY_PROPERTIES,
        required: Iterable[str] = (),
    ) -> "Catalog":
        """
        Register a custom component type and return the new catalog.

        Args:
            type_name: Wire name of the custom type
            description: Human-readable description
            properties: Allowed property names, or "any"
            required: Property names that must be present

        Returns:
            A new Catalog; re-registering a name replaces its spec
        """
        required_order = tuple(dict.fromkeys(required))
        spec = TypeSpec(
            description=description,
            properties=ANY_PROPERTIES if properties == ANY_PROPERTIES else frozenset(properties),
            required=frozenset(required_order),
            required_order=required_order,
        )
        return replace(self, types={**self.types, type_name: spec})

    def type_names(self) -> list[str]:
        """Registered custom type names"""
        return list(self.types)

    def has_type(self, type_name: str) -> bool:
        return type_name in self.types

    def get_spec(self, type_name: str) -> Optional[TypeSpec]:
        return self.types.get(type_name)

    def validate_component(self, component: Component) -> Optional[CatalogError]:
        """
        Check a component against the catalog.

        Returns:
            None when valid, otherwise UnknownType, MissingRequired or
            DisallowedProperties
        """
        type_name = component.type_name

        if is_standard_type(type_name):
            return None

        spec = self.get_spec(type_name)
        if spec is None:
            return UnknownType(type_name)

        present = list(component.properties)

        missing = tuple(name for name in spec.required_names() if name not in component.properties)
        if missing:
            return MissingRequired(missing)

        if not spec.allows_any:
            disallowed = tuple(key for key in present if key not in spec.properties)
            if disallowed:
                return DisallowedProperties(disallowed)

        return None

    def validate_surface(self, surface: Surface) -> list[tuple[str, CatalogError]]:
        """Validate every component of a surface; returns (component_id, error) per failure"""
        failures = []
        for component in surface.components:
            error = self.validate_component(component)
            if error is not None:
                failures.append((component.id, error))

        if failures:
            logger.debug(
                "Surface %s failed catalog %s: %d invalid component(s)",
                surface.id, self.id, len(failures),
            )
        return failures


__all__ = ["ANY_PROPERTIES", "TypeSpec", "Catalog"]
