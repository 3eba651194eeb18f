"""
JSON output formatting for normalized templates
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .errors import TemplateError
from .models import TemplateFragment, TemplateMaps


def fragment_to_dict(fragment: TemplateFragment) -> Dict[str, Any]:
    """Serialized form of a fragment, camelCase keys"""
    return fragment.model_dump(mode="json", by_alias=True)


def maps_to_dict(maps: TemplateMaps) -> Dict[str, Any]:
    return {
        "instances": {
            instance_id: instance.model_dump(mode="json", by_alias=True)
            for instance_id, instance in maps.instances.items()
        },
        "props": {
            prop_id: prop.model_dump(mode="json", by_alias=True)
            for prop_id, prop in maps.props.items()
        },
    }


class JSONFormatter:
    """Formats normalization results as structured JSON"""

    @staticmethod
    def format_summary(fragment: TemplateFragment) -> Dict[str, Any]:
        return {
            "total_instances": len(fragment.instances),
            "total_props": len(fragment.props),
            "total_style_sources": len(fragment.style_sources),
            "total_styles": len(fragment.styles),
            "total_breakpoints": len(fragment.breakpoints),
            "top_level_children": len(fragment.children),
        }

    @staticmethod
    def format_fragment(fragment: TemplateFragment) -> Dict[str, Any]:
        """Fragment plus a summary block"""
        return {
            "success": True,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "stage": "normalization",
            "fragment": fragment_to_dict(fragment),
            "summary": JSONFormatter.format_summary(fragment),
        }

    @staticmethod
    def to_json_string(data: Dict[str, Any], indent: Optional[int] = 2) -> str:
        """Strict JSON text; NaN and infinite numbers are rejected"""
        try:
            return json.dumps(data, indent=indent, default=str, allow_nan=False)
        except ValueError as e:
            raise TemplateError(f"Output is not valid JSON: {e}") from e


def fragment_to_json(fragment: TemplateFragment, indent: Optional[int] = 2) -> str:
    return JSONFormatter.to_json_string(fragment_to_dict(fragment), indent=indent)
