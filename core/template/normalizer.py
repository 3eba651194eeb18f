"""
Template Normalizer (tree → flat graph)

Lowers a tree of template elements into the flat, relational records the
document model stores: instances, props, style sources, style source
selections, style declarations and breakpoints, linked by ids.

Fragments are spliced into their parent's children and never produce an
instance. Records are emitted in depth-first pre-order.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Set

from .builder import CHILDREN_ATTR, ID_ATTR, LABEL_ATTR, STYLE_ATTR, Element
from .dispatch import create_prop
from .errors import DuplicateIdentifierError
from .identifiers import IdentifierAllocator
from .models import (
    Breakpoint,
    ExpressionChild,
    IdChild,
    Instance,
    StyleDecl,
    StyleSource,
    StyleSourceSelection,
    TemplateFragment,
    TemplateMaps,
    TemplateStyleDecl,
    TextChild,
)
from .values import PlaceholderValue, is_leaf_child

logger = logging.getLogger(__name__)

BASE_BREAKPOINT_ID = "base"


def collect_explicit_ids(root: Any) -> Dict[str, Element]:
    """
    Map every explicit instance id in the tree to its element.

    Raises DuplicateIdentifierError when two distinct elements claim the
    same id.
    """
    claimed: Dict[str, Element] = {}
    seen: Set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, Element) or id(node) in seen:
            continue
        seen.add(id(node))
        explicit = None if node.is_fragment else node.explicit_id
        if explicit is not None:
            owner = claimed.get(explicit)
            if owner is not None and owner is not node:
                raise DuplicateIdentifierError(explicit)
            claimed[explicit] = node
        stack.extend(reversed(node.children))
    return claimed


class TemplateNormalizer:
    """
    One normalization pass.

    Holds the id allocator and the output collections for a single call;
    create a new normalizer per template.
    """

    def __init__(self, root: Any):
        self.root = root
        self.ids = IdentifierAllocator(reserved=collect_explicit_ids(root))
        self.instances: List[Instance] = []
        self.props: List[Any] = []
        self.breakpoints: List[Breakpoint] = []
        self.style_sources: List[StyleSource] = []
        self.style_source_selections: List[StyleSourceSelection] = []
        self.styles: List[StyleDecl] = []
        self._rendered: Set[str] = set()

    def run(self) -> TemplateFragment:
        # The root is treated as the only child of an implicit fragment
        children = self._flatten([self.root])

        fragment = TemplateFragment(
            children=children,
            instances=self.instances,
            props=self.props,
            breakpoints=self.breakpoints,
            style_sources=self.style_sources,
            style_source_selections=self.style_source_selections,
            styles=self.styles,
        )
        logger.debug(
            f"Normalized template: {len(fragment.instances)} instances, "
            f"{len(fragment.props)} props, {len(fragment.styles)} styles, "
            f"{len(fragment.breakpoints)} breakpoints"
        )
        return fragment

    def _flatten(self, children: Iterable[Any]) -> List[IdChild]:
        """Render structural children, splicing fragments; leaves are skipped"""
        refs: List[IdChild] = []
        for child in children:
            if is_leaf_child(child):
                continue
            if not isinstance(child, Element):
                logger.warning(f"Skipping child of unsupported type {type(child).__name__}")
            elif child.is_fragment:
                refs.extend(self._flatten(child.children))
            else:
                refs.append(self._render_instance(child))
        return refs

    def _id_for(self, element: Element) -> str:
        return self.ids.identifier_for(element, element.explicit_id)

    def _child_refs(self, children: Iterable[Any], in_fragment: bool = False) -> List[Any]:
        """
        References for an instance's children, in source order.

        Ids of structural children are resolved here, before any of them is
        rendered. Fragments are spliced in place and drop their own leaves.
        """
        refs: List[Any] = []
        for child in children:
            if is_leaf_child(child):
                if in_fragment:
                    continue
                if isinstance(child, str):
                    refs.append(TextChild(value=child))
                elif isinstance(child, PlaceholderValue):
                    refs.append(TextChild(value=child.text, placeholder=True))
                else:
                    refs.append(ExpressionChild(value=child.expression))
            elif not isinstance(child, Element):
                continue
            elif child.is_fragment:
                refs.extend(self._child_refs(child.children, in_fragment=True))
            else:
                refs.append(IdChild(value=self._id_for(child)))
        return refs

    def _render_instance(self, element: Element) -> IdChild:
        instance_id = self._id_for(element)
        ref = IdChild(value=instance_id)
        # Shared elements are materialized once; every parent links to it
        if instance_id in self._rendered:
            return ref
        self._rendered.add(instance_id)

        self._emit_props(instance_id, element.props)
        self.instances.append(Instance(
            id=instance_id,
            component=str(element.component),
            label=element.label,
            children=self._child_refs(element.children),
        ))

        # Descendants follow their parent
        self._flatten(element.children)
        return ref

    def _emit_props(self, instance_id: str, attrs: Mapping[str, Any]):
        for name, value in attrs.items():
            if name in (ID_ATTR, LABEL_ATTR, CHILDREN_ATTR):
                continue
            if name == STYLE_ATTR:
                self._emit_local_styles(instance_id, name, value or [])
                continue
            self.props.append(create_prop(instance_id, name, value))

    def _emit_local_styles(self, instance_id: str, name: str, decls: Iterable[Any]):
        style_source_id = f"{instance_id}:{name}"
        self.style_sources.append(StyleSource(id=style_source_id))
        self.style_source_selections.append(
            StyleSourceSelection(instance_id=instance_id, values=[style_source_id])
        )
        for decl in decls:
            if not isinstance(decl, TemplateStyleDecl):
                decl = TemplateStyleDecl.model_validate(decl)
            self.styles.append(StyleDecl(
                breakpoint_id=self._breakpoint_id(),
                style_source_id=style_source_id,
                state=decl.state,
                property=decl.property,
                value=decl.value,
            ))

    def _breakpoint_id(self) -> str:
        # Created on first use, shared by every declaration afterwards
        if self.breakpoints:
            return self.breakpoints[0].id
        self.breakpoints.append(Breakpoint(id=BASE_BREAKPOINT_ID, label=""))
        return BASE_BREAKPOINT_ID


def normalize(root: Any) -> TemplateFragment:
    """Lower a template tree into a fragment of flat records"""
    return TemplateNormalizer(root).run()


def to_maps(fragment: TemplateFragment) -> TemplateMaps:
    """Key instances and props by id; later duplicates overwrite earlier ones"""
    return TemplateMaps(
        instances={instance.id: instance for instance in fragment.instances},
        props={prop.id: prop for prop in fragment.props},
    )


def normalize_to_maps(root: Any) -> TemplateMaps:
    return to_maps(normalize(root))
