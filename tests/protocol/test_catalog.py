"""
Tests for catalog registration and component validation.
"""
from a2ui.catalog import ANY_PROPERTIES, Catalog, TypeSpec
from a2ui.component import Component, ComponentType
from a2ui.errors import (
    DisallowedProperties,
    ErrorCode,
    MissingRequired,
    UnknownType,
)
from a2ui.surface import Surface


def graph_catalog() -> Catalog:
    return Catalog.new("my-app-v1").register(
        "Graph",
        description="Network graph",
        properties=["nodes", "edges"],
        required=["nodes"],
    )


class TestRegistration:
    """Catalog registration"""

    def test_new_catalog_is_empty(self):
        catalog = Catalog.new("c")
        assert catalog.id == "c"
        assert catalog.type_names() == []

    def test_register_returns_new_catalog(self):
        base = Catalog.new("c")
        catalog = base.register("Sparkline")

        assert base.has_type("Sparkline") is False
        assert catalog.has_type("Sparkline") is True

    def test_register_defaults(self):
        spec = Catalog.new("c").register("Sparkline").get_spec("Sparkline")

        assert spec.description is None
        assert spec.properties == ANY_PROPERTIES
        assert spec.allows_any is True
        assert spec.required == frozenset()

    def test_register_with_options(self):
        spec = graph_catalog().get_spec("Graph")

        assert spec.description == "Network graph"
        assert spec.properties == frozenset({"nodes", "edges"})
        assert spec.required == frozenset({"nodes"})

    def test_type_names(self):
        catalog = graph_catalog().register("Sparkline")
        assert sorted(catalog.type_names()) == ["Graph", "Sparkline"]
        assert catalog.get_spec("Chart") is None


class TestValidateComponent:
    """Component validation against a catalog"""

    def test_standard_types_always_pass(self):
        catalog = Catalog.new("empty")
        component = Component("t", ComponentType.TEXT, {"anything": 1})

        assert catalog.validate_component(component) is None

    def test_standard_name_as_string_passes(self):
        assert Catalog.new("empty").validate_component(Component("c", "Card")) is None

    def test_unknown_type(self):
        error = graph_catalog().validate_component(Component("c", "Chart"))

        assert error == UnknownType("Chart")
        assert error.error_code == ErrorCode.UNKNOWN_TYPE

    def test_missing_required(self):
        error = graph_catalog().validate_component(Component("g", "Graph", {"edges": []}))

        assert error == MissingRequired(("nodes",))
        assert error.to_dict()["details"] == {"properties": ["nodes"]}

    def test_disallowed_properties(self):
        component = Component("g", "Graph", {"nodes": [], "bad": True})
        error = graph_catalog().validate_component(component)

        assert error == DisallowedProperties(("bad",))

    def test_valid_custom_component(self):
        component = Component("g", "Graph", {"nodes": [], "edges": []})
        assert graph_catalog().validate_component(component) is None

    def test_any_properties_allows_extras(self):
        catalog = Catalog.new("c").register("Sparkline", required=["data"])

        assert catalog.validate_component(Component("s", "Sparkline", {"data": [], "x": 1})) is None
        assert catalog.validate_component(Component("s", "Sparkline", {"x": 1})) == MissingRequired(("data",))

    def test_required_checked_before_allowed(self):
        component = Component("g", "Graph", {"bad": True})
        assert isinstance(graph_catalog().validate_component(component), MissingRequired)


def test_validate_surface():
    surface = (
        Surface.new("s", catalog_id="my-app-v1")
        .add_component(Component("t", ComponentType.TEXT, {"text": "hi"}))
        .add_component(Component("g1", "Graph", {"nodes": []}))
        .add_component(Component("g2", "Graph", {"edges": []}))
        .add_component(Component("c", "Chart"))
    )

    failures = graph_catalog().validate_surface(surface)

    assert failures == [
        ("g2", MissingRequired(("nodes",))),
        ("c", UnknownType("Chart")),
    ]


class TestDirectTypeSpec:
    """Catalogs built from TypeSpec values without register()"""

    def test_missing_required_without_declared_order(self):
        catalog = Catalog(
            "c",
            {
                "Graph": TypeSpec(
                    properties=frozenset({"nodes", "edges"}),
                    required=frozenset({"nodes"}),
                )
            },
        )

        error = catalog.validate_component(Component("g", "Graph", {"edges": []}))

        assert error == MissingRequired(("nodes",))

    def test_unordered_names_reported_sorted(self):
        spec = TypeSpec(required=frozenset({"zeta", "alpha"}))
        catalog = Catalog("c", {"Chart": spec})

        assert spec.required_names() == ["alpha", "zeta"]
        assert catalog.validate_component(Component("c", "Chart")) == MissingRequired(("alpha", "zeta"))

    def test_declared_order_kept(self):
        spec = Catalog.new("c").register("Chart", required=["zeta", "alpha"]).get_spec("Chart")
        assert spec.required_names() == ["zeta", "alpha"]
