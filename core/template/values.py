"""
Typed template values.

Wrappers that mark an attribute or child value as something other than a
plain literal. The family is closed: the dispatcher in dispatch.py knows
every kind listed here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union


@dataclass(frozen=True)
class TemplateValue(ABC):
    """Base class for all typed template values"""
    kind: ClassVar[str] = ""

    @property
    @abstractmethod
    def payload(self) -> Any:
        """The value stored on the record this kind is lowered into"""


@dataclass(frozen=True)
class ExpressionValue(TemplateValue):
    expression: str
    kind: ClassVar[str] = "expression"

    @property
    def payload(self) -> str:
        return self.expression


@dataclass(frozen=True)
class ParameterValue(TemplateValue):
    data_source_id: str
    kind: ClassVar[str] = "parameter"

    @property
    def payload(self) -> str:
        return self.data_source_id


@dataclass(frozen=True)
class ResourceValue(TemplateValue):
    resource_id: str
    kind: ClassVar[str] = "resource"

    @property
    def payload(self) -> str:
        return self.resource_id


@dataclass(frozen=True)
class ActionValue(TemplateValue):
    """An executable action bound to an event prop"""
    args: List[str] = field(default_factory=list)
    code: str = ""
    kind: ClassVar[str] = "action"

    @property
    def payload(self) -> Dict[str, Any]:
        return {"type": "execute", "args": list(self.args), "code": self.code}


@dataclass(frozen=True)
class AssetValue(TemplateValue):
    asset_id: str
    kind: ClassVar[str] = "asset"

    @property
    def payload(self) -> str:
        return self.asset_id


@dataclass(frozen=True)
class PageValue(TemplateValue):
    """Link target: a page, or a page plus an instance anchored on it"""
    page_id: str
    instance_id: Optional[str] = None
    kind: ClassVar[str] = "page"

    @property
    def payload(self) -> Union[str, Dict[str, str]]:
        if self.instance_id:
            return {"pageId": self.page_id, "instanceId": self.instance_id}
        return self.page_id


@dataclass(frozen=True)
class PlaceholderValue(TemplateValue):
    """Text child shown in the editor until the user replaces it"""
    text: str
    kind: ClassVar[str] = "placeholder"

    @property
    def payload(self) -> str:
        return self.text


# Kinds accepted as attribute values, in dispatch precedence order
PROP_VALUE_TYPES = (
    ExpressionValue,
    ParameterValue,
    ResourceValue,
    ActionValue,
    AssetValue,
    PageValue,
)

# Child leaves that never become instances
LEAF_CHILD_TYPES = (str, PlaceholderValue, ExpressionValue)


def is_leaf_child(child: Any) -> bool:
    return isinstance(child, LEAF_CHILD_TYPES)
