"""
Surface - a canvas holding a flat component list and a reactive data store.

Components are an adjacency list, not a nested tree: containers reference
child ids through their `children` property. List order is only the order in
which components are encoded.

All operations return a new Surface; the receiver is never mutated.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from .component import Component
from .values import Theme


@dataclass(frozen=True)
class Surface:
    id: str
    catalog_id: Optional[str] = None
    root_component_id: Optional[str] = None
    components: tuple[Component, ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict)
    theme: Optional[Theme] = None
    send_data_model: bool = False

    @classmethod
    def new(cls, surface_id: str, catalog_id: Optional[str] = None) -> "Surface":
        return cls(id=surface_id, catalog_id=catalog_id)

    def add_component(self, component: Component) -> "Surface":
        """
        Append a component.

        Ids are not checked for uniqueness here; see duplicate_component_ids().
        """
        return replace(self, components=self.components + (component,))

    def set_root(self, component_id: str) -> "Surface":
        return replace(self, root_component_id=component_id)

    def put_data(self, path: str, value: Any) -> "Surface":
        """Set a value in the data model at a JSON Pointer path"""
        return replace(self, data={**self.data, path: value})

    def set_theme(self, theme: Optional[Theme]) -> "Surface":
        return replace(self, theme=theme)

    def set_catalog(self, catalog_id: Optional[str]) -> "Surface":
        return replace(self, catalog_id=catalog_id)

    def set_send_data_model(self, enabled: bool = True) -> "Surface":
        return replace(self, send_data_model=enabled)

    def get_component(self, component_id: str) -> Optional[Component]:
        """First component with the given id, or None"""
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def component_count(self) -> int:
        return len(self.components)

    def duplicate_component_ids(self) -> list[str]:
        """Ids used by more than one component, in first-seen order"""
        counts = Counter(c.id for c in self.components)
        return [cid for cid, n in counts.items() if n > 1]


__all__ = ["Surface"]
