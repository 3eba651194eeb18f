"""
Tests for template elements and the component builder.
"""
from core.template.builder import (
    FRAGMENT,
    ComponentRef,
    Element,
    Fragment,
    component,
    create_element,
    ws_component,
)
from core.template.values import ExpressionValue


class TestComponentRef:
    """Test building elements from component references."""

    def test_component_returns_named_ref(self):
        ref = component("Box")
        assert isinstance(ref, ComponentRef)
        assert ref.name == "Box"

    def test_ws_component_prefix(self):
        assert ws_component("collection").name == "ws:collection"

    def test_call_builds_element(self):
        Box = component("Box")
        element = Box("text", props={"ws:id": "a"}, title="Hi")
        assert element.component == "Box"
        assert element.props == {"ws:id": "a", "title": "Hi"}
        assert element.children == ["text"]

    def test_ref_as_component_argument(self):
        element = create_element(component("Box"), {"a": 1})
        assert element.component == "Box"


class TestCreateElement:
    """Test normalization of element children."""

    def test_children_prop_appended_after_positional(self):
        element = create_element("Box", {"children": ["late"]}, "early")
        assert element.children == ["early", "late"]
        assert "children" not in element.props

    def test_nested_lists_are_flattened(self):
        element = create_element("Box", None, ["a", ["b", ("c",)]], "d")
        assert element.children == ["a", "b", "c", "d"]

    def test_conditional_children_are_dropped(self):
        element = create_element("Box", None, None, False, True, "kept")
        assert element.children == ["kept"]

    def test_numbers_become_text(self):
        element = create_element("Box", None, 1, 2.5)
        assert element.children == ["1", "2.5"]

    def test_typed_children_kept(self):
        expression = ExpressionValue("a")
        assert create_element("Box", None, expression).children == [expression]


class TestElement:
    """Test element identity and accessors."""

    def test_identity_equality(self):
        assert Element("Box") != Element("Box")
        element = Element("Box")
        assert element == element
        assert len({Element("Box"), Element("Box")}) == 2

    def test_fragment_marker(self):
        fragment = Fragment("a")
        assert fragment.component is FRAGMENT
        assert fragment.is_fragment
        assert not Element("Box").is_fragment
        assert repr(FRAGMENT) == "FRAGMENT"

    def test_explicit_id_and_label(self):
        element = Element("Box", props={"ws:id": 3, "ws:label": "Card"})
        assert element.explicit_id == "3"
        assert element.label == "Card"
        assert Element("Box").explicit_id is None
        assert Element("Box").label is None

    def test_label_is_coerced_to_string(self):
        assert Element("Box", props={"ws:label": 5}).label == "5"
        assert Element("Box", props={"ws:label": ""}).label is None
