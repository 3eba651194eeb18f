"""
Load template trees from JSON documents.

A node is written as

    {"component": "Box", "props": {"ws:id": "root"}, "children": [...]}

The component "Fragment", or a bare list, is a fragment. Typed values are
one-key objects tagged with "$": {"$expression": "a + b"},
{"$parameter": "dataSourceId"}, {"$action": {"args": [], "code": ""}}...
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .builder import FRAGMENT, LABEL_ATTR, STYLE_ATTR, Element
from .errors import TemplateFormatError
from .values import (
    ActionValue,
    AssetValue,
    ExpressionValue,
    PageValue,
    ParameterValue,
    PlaceholderValue,
    ResourceValue,
)

logger = logging.getLogger(__name__)

FRAGMENT_COMPONENT = "Fragment"
TAG_PREFIX = "$"


def _require_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise TemplateFormatError(path, f"expected a string, got {type(value).__name__}")
    return value


def _load_action(payload: Any, path: str) -> ActionValue:
    if not isinstance(payload, dict):
        raise TemplateFormatError(path, "action must be an object with 'args' and 'code'")
    args = payload.get("args", [])
    if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
        raise TemplateFormatError(f"{path}.args", "action args must be a list of strings")
    return ActionValue(args=args, code=_require_str(payload.get("code", ""), f"{path}.code"))


def _load_page(payload: Any, path: str) -> PageValue:
    if isinstance(payload, str):
        return PageValue(payload)
    if isinstance(payload, dict) and "pageId" in payload:
        instance_id = payload.get("instanceId")
        return PageValue(
            _require_str(payload["pageId"], f"{path}.pageId"),
            None if instance_id is None else _require_str(instance_id, f"{path}.instanceId"),
        )
    raise TemplateFormatError(path, "page must be a page id or an object with 'pageId'")


_TAGGED_LOADERS = {
    "$expression": lambda payload, path: ExpressionValue(_require_str(payload, path)),
    "$parameter": lambda payload, path: ParameterValue(_require_str(payload, path)),
    "$resource": lambda payload, path: ResourceValue(_require_str(payload, path)),
    "$asset": lambda payload, path: AssetValue(_require_str(payload, path)),
    "$placeholder": lambda payload, path: PlaceholderValue(_require_str(payload, path)),
    "$action": _load_action,
    "$page": _load_page,
}


def _is_tagged(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and len(value) == 1
        and next(iter(value)).startswith(TAG_PREFIX)
    )


def load_value(value: Any, path: str = "") -> Any:
    """Turn a tagged object into its typed value; other values pass through"""
    if not _is_tagged(value):
        return value
    tag, payload = next(iter(value.items()))
    loader = _TAGGED_LOADERS.get(tag)
    if loader is None:
        raise TemplateFormatError(path, f"unknown value tag '{tag}'")
    return loader(payload, f"{path}.{tag}" if path else tag)


def _load_child(child: Any, path: str) -> Any:
    if isinstance(child, str):
        return child
    if isinstance(child, (int, float)) and not isinstance(child, bool):
        return str(child)
    if _is_tagged(child):
        value = load_value(child, path)
        if not isinstance(value, (ExpressionValue, PlaceholderValue)):
            raise TemplateFormatError(path, "only $expression and $placeholder values may be children")
        return value
    return load_node(child, path)


def _check_reserved_props(props: Dict[str, Any], path: str):
    label = props.get(LABEL_ATTR)
    if label is not None and not isinstance(label, str):
        raise TemplateFormatError(f"{path}.{LABEL_ATTR}", "label must be a string")

    decls = props.get(STYLE_ATTR)
    if decls is None:
        return
    if not isinstance(decls, list):
        raise TemplateFormatError(f"{path}.{STYLE_ATTR}", "styles must be a list of declarations")
    for i, decl in enumerate(decls):
        decl_path = f"{path}.{STYLE_ATTR}[{i}]"
        if not isinstance(decl, dict) or "property" not in decl or "value" not in decl:
            raise TemplateFormatError(decl_path, "style declaration needs 'property' and 'value'")
        _require_str(decl["property"], f"{decl_path}.property")
        state = decl.get("state")
        if state is not None:
            _require_str(state, f"{decl_path}.state")


def load_node(doc: Union[Dict[str, Any], List[Any]], path: str = "") -> Element:
    """Build an element tree from a JSON node"""
    if isinstance(doc, list):
        return Element(
            component=FRAGMENT,
            children=[
                _load_child(child, f"{path}[{i}]")
                for i, child in enumerate(doc)
                if child is not None
            ],
        )
    if not isinstance(doc, dict):
        raise TemplateFormatError(path, f"expected a node object, got {type(doc).__name__}")
    if "component" not in doc:
        raise TemplateFormatError(path, "node is missing 'component'")

    prefix = f"{path}." if path else ""
    name = _require_str(doc["component"], f"{prefix}component")
    props = doc.get("props") or {}
    if not isinstance(props, dict):
        raise TemplateFormatError(f"{prefix}props", "props must be an object")
    _check_reserved_props(props, f"{prefix}props")
    children = doc.get("children") or []
    if not isinstance(children, list):
        raise TemplateFormatError(f"{prefix}children", "children must be a list")

    return Element(
        component=FRAGMENT if name == FRAGMENT_COMPONENT else name,
        props={key: load_value(value, f"{prefix}props.{key}") for key, value in props.items()},
        children=[
            _load_child(child, f"{prefix}children[{i}]")
            for i, child in enumerate(children)
            if child is not None
        ],
    )


def load_template(doc: Union[Dict[str, Any], List[Any]]) -> Element:
    return load_node(doc)


def load_template_file(file_path: Union[str, Path]) -> Element:
    """Read a JSON template document from disk"""
    path = Path(file_path)
    logger.debug(f"Loading template from {path}")
    with open(path, "r") as f:
        doc = json.load(f)
    return load_template(doc)
