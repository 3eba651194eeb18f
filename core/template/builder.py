"""
Template builder.

Elements are the input tree of the normalizer. They are built with
component references, in the same shape a view tree is written:

    Box = component("Box")
    Text = component("Text")

    root = Box(
        Text("Hello"),
        props={"ws:id": "root", "ws:label": "Root"},
    )
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

# Reserved attribute names
ID_ATTR = "ws:id"
LABEL_ATTR = "ws:label"
STYLE_ATTR = "ws:style"
CHILDREN_ATTR = "children"

RESERVED_ATTRS = frozenset({ID_ATTR, LABEL_ATTR, STYLE_ATTR, CHILDREN_ATTR})


class _FragmentMarker:
    """Component tag of transparent grouping nodes"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FRAGMENT"


FRAGMENT = _FragmentMarker()


@dataclass(eq=False)
class Element:
    """
    One node of a template tree.

    Hashing and equality are by identity, so the same Element object always
    resolves to the same instance id, while two equal-looking Elements stay
    distinct instances.
    """
    component: Any
    props: Dict[str, Any] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)

    @property
    def is_fragment(self) -> bool:
        return self.component is FRAGMENT

    @property
    def explicit_id(self) -> Optional[str]:
        value = self.props.get(ID_ATTR)
        return None if value is None else str(value)

    @property
    def label(self) -> Optional[str]:
        value = self.props.get(LABEL_ATTR)
        return str(value) if value else None


def _flatten_children(children: Iterable[Any]) -> List[Any]:
    result = []
    for child in children:
        if child is None or child is False or child is True:
            continue
        if isinstance(child, (list, tuple)):
            result.extend(_flatten_children(child))
        elif isinstance(child, (int, float)):
            result.append(str(child))
        else:
            result.append(child)
    return result


def create_element(component: Any, props: Optional[Mapping[str, Any]] = None, *children: Any) -> Element:
    """Build an Element; a "children" prop is appended after positional children"""
    attrs = dict(props or {})
    extra = attrs.pop(CHILDREN_ATTR, None)
    all_children = list(children)
    if extra is not None:
        all_children.append(extra)
    if isinstance(component, ComponentRef):
        component = component.name
    return Element(
        component=component,
        props=attrs,
        children=_flatten_children(all_children),
    )


def Fragment(*children: Any) -> Element:
    return create_element(FRAGMENT, None, *children)


@dataclass(frozen=True)
class ComponentRef:
    """A named component; calling it builds an Element of that component"""
    name: str

    def __call__(self, *children: Any, props: Optional[Mapping[str, Any]] = None, **attrs: Any) -> Element:
        merged = dict(props or {})
        merged.update(attrs)
        return create_element(self.name, merged, *children)


def component(name: str) -> ComponentRef:
    return ComponentRef(name)


def ws_component(name: str) -> ComponentRef:
    """Editor built-in component, e.g. ws:descendant"""
    return ComponentRef(f"ws:{name}")
