"""
Template Normalizer

Lowers declarative template trees into the flat records of the document
model: instances, props, style sources, style declarations and breakpoints.
"""

from .builder import (
    FRAGMENT,
    ComponentRef,
    Element,
    Fragment,
    component,
    create_element,
    ws_component,
)
from .values import (
    ActionValue,
    AssetValue,
    ExpressionValue,
    PageValue,
    ParameterValue,
    PlaceholderValue,
    ResourceValue,
    TemplateValue,
)
from .models import (
    Breakpoint,
    Instance,
    StyleDecl,
    StyleSource,
    StyleSourceSelection,
    TemplateFragment,
    TemplateMaps,
    TemplateStyleDecl,
)
from .errors import DuplicateIdentifierError, TemplateError, TemplateFormatError
from .identifiers import IdentifierAllocator
from .dispatch import create_prop
from .normalizer import TemplateNormalizer, normalize, normalize_to_maps, to_maps
from .loader import load_template, load_template_file
from .json_output import JSONFormatter, fragment_to_dict, fragment_to_json, maps_to_dict

__version__ = "1.0.0"
__all__ = [
    "FRAGMENT",
    "ComponentRef",
    "Element",
    "Fragment",
    "component",
    "create_element",
    "ws_component",
    "ActionValue",
    "AssetValue",
    "ExpressionValue",
    "PageValue",
    "ParameterValue",
    "PlaceholderValue",
    "ResourceValue",
    "TemplateValue",
    "Breakpoint",
    "Instance",
    "StyleDecl",
    "StyleSource",
    "StyleSourceSelection",
    "TemplateFragment",
    "TemplateMaps",
    "TemplateStyleDecl",
    "DuplicateIdentifierError",
    "TemplateError",
    "TemplateFormatError",
    "IdentifierAllocator",
    "create_prop",
    "TemplateNormalizer",
    "normalize",
    "normalize_to_maps",
    "to_maps",
    "load_template",
    "load_template_file",
    "JSONFormatter",
    "fragment_to_dict",
    "fragment_to_json",
    "maps_to_dict",
]
