"""
Output records of the template normalizer.

All records are frozen pydantic models. Attributes are snake_case in
Python and serialize with camelCase aliases (instanceId, styleSourceId...).
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SparseRecord(Record):
    """Record whose optional attributes are left out of the dump when unset"""

    @model_serializer(mode="wrap")
    def omit_none(self, handler):
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


# Instance children

class TextChild(SparseRecord):
    type: Literal["text"] = "text"
    value: str
    placeholder: Optional[bool] = None


class ExpressionChild(Record):
    type: Literal["expression"] = "expression"
    value: str


class IdChild(Record):
    type: Literal["id"] = "id"
    value: str


Child = Annotated[Union[TextChild, ExpressionChild, IdChild], Field(discriminator="type")]


class Instance(SparseRecord):
    type: Literal["instance"] = "instance"
    id: str
    component: str
    label: Optional[str] = None
    children: List[Child] = Field(default_factory=list)


# Props

class PropBase(Record):
    id: str
    instance_id: str
    name: str


class ExpressionProp(PropBase):
    type: Literal["expression"] = "expression"
    value: str


class ParameterProp(PropBase):
    type: Literal["parameter"] = "parameter"
    value: str


class ResourceProp(PropBase):
    type: Literal["resource"] = "resource"
    value: str


class ActionProp(PropBase):
    type: Literal["action"] = "action"
    value: List[Dict[str, Any]]


class AssetProp(PropBase):
    type: Literal["asset"] = "asset"
    value: str


class PageProp(PropBase):
    type: Literal["page"] = "page"
    value: Union[str, Dict[str, str]]


class StringProp(PropBase):
    type: Literal["string"] = "string"
    value: str


class NumberProp(PropBase):
    type: Literal["number"] = "number"
    value: Union[int, float]


class BooleanProp(PropBase):
    type: Literal["boolean"] = "boolean"
    value: bool


class JsonProp(PropBase):
    type: Literal["json"] = "json"
    value: Any = None


Prop = Annotated[
    Union[
        ExpressionProp,
        ParameterProp,
        ResourceProp,
        ActionProp,
        AssetProp,
        PageProp,
        StringProp,
        NumberProp,
        BooleanProp,
        JsonProp,
    ],
    Field(discriminator="type"),
]


# Styles

class TemplateStyleDecl(SparseRecord):
    """A local style declaration as written on an element"""
    property: str
    value: Any
    state: Optional[str] = None


class Breakpoint(Record):
    id: str
    label: str = ""


class StyleSource(Record):
    type: Literal["local"] = "local"
    id: str


class StyleSourceSelection(Record):
    instance_id: str
    values: List[str]


class StyleDecl(SparseRecord):
    breakpoint_id: str
    style_source_id: str
    state: Optional[str] = None
    property: str
    value: Any


class TemplateFragment(Record):
    """Aggregate result of one normalization"""
    children: List[Child] = Field(default_factory=list)
    instances: List[Instance] = Field(default_factory=list)
    props: List[Prop] = Field(default_factory=list)
    breakpoints: List[Breakpoint] = Field(default_factory=list)
    style_sources: List[StyleSource] = Field(default_factory=list)
    style_source_selections: List[StyleSourceSelection] = Field(default_factory=list)
    styles: List[StyleDecl] = Field(default_factory=list)
    # Not populated by the normalizer; present so consumers see one shape
    assets: List[Any] = Field(default_factory=list)
    data_sources: List[Any] = Field(default_factory=list)
    resources: List[Any] = Field(default_factory=list)


@dataclass
class TemplateMaps:
    """Instances and props keyed by id"""
    instances: Dict[str, Instance] = field(default_factory=dict)
    props: Dict[str, Any] = field(default_factory=dict)
