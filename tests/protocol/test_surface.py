"""
Tests for Surface and Component construction.
"""
from a2ui.component import (
    STANDARD_TYPE_NAMES,
    Component,
    ComponentType,
    is_standard_type,
    wire_type_name,
)
from a2ui.surface import Surface
from a2ui.values import Theme


def test_standard_types():
    """18 standard kinds with fixed wire names"""
    assert len(Component.standard_types()) == 18
    assert len(STANDARD_TYPE_NAMES) == 18
    assert wire_type_name(ComponentType.TEXT_FIELD) == "TextField"
    assert wire_type_name(ComponentType.CHECKBOX) == "CheckBox"
    assert wire_type_name(ComponentType.CHOICE_PICKER) == "ChoicePicker"
    assert wire_type_name(ComponentType.AUDIO_PLAYER) == "AudioPlayer"


def test_custom_type_name_passes_through():
    assert wire_type_name("Graph") == "Graph"
    assert is_standard_type("Graph") is False
    assert is_standard_type(ComponentType.MODAL) is True
    assert Component("g", "Graph").is_standard is False


def test_component_with_property_is_persistent():
    original = Component("t", ComponentType.TEXT, {"text": "a"})
    updated = original.with_property("variant", "h1")

    assert original.properties == {"text": "a"}
    assert updated.properties == {"text": "a", "variant": "h1"}


class TestSurface:
    """Surface operations never mutate the receiver"""

    def test_new_surface(self):
        surface = Surface.new("s1")

        assert surface.id == "s1"
        assert surface.components == ()
        assert surface.data == {}
        assert surface.root_component_id is None
        assert surface.catalog_id is None
        assert surface.theme is None
        assert surface.send_data_model is False

    def test_add_component_preserves_order(self):
        a = Component("a", ComponentType.TEXT)
        b = Component("b", ComponentType.BUTTON)

        base = Surface.new("s")
        surface = base.add_component(a).add_component(b)

        assert [c.id for c in surface.components] == ["a", "b"]
        assert base.component_count() == 0
        assert surface.component_count() == 2

    def test_independent_branches(self):
        base = Surface.new("s").put_data("/a", 1)
        left = base.put_data("/b", 2)
        right = base.put_data("/c", 3)

        assert base.data == {"/a": 1}
        assert left.data == {"/a": 1, "/b": 2}
        assert right.data == {"/a": 1, "/c": 3}

    def test_setters(self):
        theme = Theme(primary_color="#00BFFF")
        surface = (
            Surface.new("s")
            .set_root("main")
            .set_catalog("my-catalog")
            .set_theme(theme)
            .set_send_data_model()
        )

        assert surface.root_component_id == "main"
        assert surface.catalog_id == "my-catalog"
        assert surface.theme == theme
        assert surface.send_data_model is True

    def test_get_component(self):
        text = Component("t", ComponentType.TEXT, {"text": "hi"})
        surface = Surface.new("s").add_component(text)

        assert surface.get_component("t") == text
        assert surface.get_component("missing") is None

    def test_duplicate_component_ids(self):
        surface = (
            Surface.new("s")
            .add_component(Component("a", ComponentType.TEXT))
            .add_component(Component("b", ComponentType.TEXT))
            .add_component(Component("a", ComponentType.BUTTON))
        )

        assert surface.duplicate_component_ids() == ["a"]
        assert Surface.new("s").duplicate_component_ids() == []
