"""
Pytest configuration and fixtures for the template normalizer tests.
"""
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.template import component, ws_component


@pytest.fixture
def Box():
    return component("Box")


@pytest.fixture
def Text():
    return component("Text")


@pytest.fixture
def Button():
    return component("Button")


@pytest.fixture
def Descendant():
    return ws_component("descendant")


@pytest.fixture
def sample_template_doc():
    """Sample JSON template document."""
    return {
        "component": "Fragment",
        "children": [
            {
                "component": "Box",
                "props": {
                    "ws:id": "root",
                    "ws:label": "Root",
                    "ws:style": [
                        {"property": "color", "value": {"type": "keyword", "value": "red"}},
                        {"property": "width", "value": {"type": "unit", "unit": "px", "value": 10}},
                    ],
                    "tag": "section",
                },
                "children": [
                    {
                        "component": "Text",
                        "children": ["Hello", {"$expression": "$ws$dataSource$name"}],
                    },
                    {
                        "component": "Link",
                        "props": {
                            "href": {"$page": {"pageId": "home", "instanceId": "hero"}},
                            "onClick": {"$action": {"args": ["event"], "code": "count = count + 1"}},
                            "tabIndex": 0,
                            "disabled": False,
                        },
                        "children": [{"$placeholder": "Link text"}],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def sample_template_file(tmp_path, sample_template_doc):
    """Sample template document written to disk."""
    import json

    path = tmp_path / "template.json"
    path.write_text(json.dumps(sample_template_doc))
    return path
