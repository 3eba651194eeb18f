"""
Typed-value dispatch: one attribute value in, one prop record out.
"""

import logging
from typing import Any

from .models import (
    ActionProp,
    AssetProp,
    BooleanProp,
    ExpressionProp,
    JsonProp,
    NumberProp,
    PageProp,
    ParameterProp,
    ResourceProp,
    StringProp,
)
from .values import PROP_VALUE_TYPES, PlaceholderValue

logger = logging.getLogger(__name__)

# Prop record for each wrapper kind
_PROPS_BY_KIND = {
    "expression": ExpressionProp,
    "parameter": ParameterProp,
    "resource": ResourceProp,
    "action": ActionProp,
    "asset": AssetProp,
    "page": PageProp,
}

# Checked in order; precedence follows PROP_VALUE_TYPES
_WRAPPED_PROPS = tuple(
    (value_cls, _PROPS_BY_KIND[value_cls.kind]) for value_cls in PROP_VALUE_TYPES
)


def prop_id(instance_id: str, name: str) -> str:
    """Prop ids are derived from the owning instance and the prop name"""
    return f"{instance_id}:{name}"


def create_prop(instance_id: str, name: str, value: Any):
    """
    Classify an attribute value into exactly one prop kind.

    Wrapper kinds are checked first, then plain literals. Anything left
    over, including nested lists and dicts, becomes a json prop with the
    value unchanged.
    """
    base = {"id": prop_id(instance_id, name), "instance_id": instance_id, "name": name}

    for value_cls, prop_cls in _WRAPPED_PROPS:
        if isinstance(value, value_cls):
            if prop_cls is ActionProp:
                # Props hold a list of actions; a template binds exactly one
                return ActionProp(**base, value=[value.payload])
            return prop_cls(**base, value=value.payload)

    if isinstance(value, str):
        return StringProp(**base, value=value)
    # bool is an int subclass, so it is excluded from numbers explicitly
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return NumberProp(**base, value=value)
    if isinstance(value, bool):
        return BooleanProp(**base, value=value)

    if isinstance(value, PlaceholderValue):
        value = value.payload
    logger.debug(f"Prop '{name}' on instance {instance_id} stored as json ({type(value).__name__})")
    return JsonProp(**base, value=value)
