"""Pytest configuration and fixtures."""

import pytest
from json_inspector import JSONInspector, TreeFlattener, VisibilityController


@pytest.fixture
def sample_nested_json():
    """Nested document mixing objects, arrays and primitives."""
    return {
        "users": [
            {
                "name": "Alice",
                "profile": {
                    "age": 30,
                    "city": "New York"
                }
            },
            {
                "name": "Bob",
                "profile": {
                    "age": 25,
                    "city": "San Francisco"
                }
            }
        ],
        "settings": {
            "theme": "dark",
            "notifications": True,
            "proxy": None
        },
        "version": 2
    }


@pytest.fixture
def sample_records_json():
    """Array of records for the table view."""
    return [
        {"id": 1, "name": "Item 1", "active": True},
        {"id": 2, "name": "Item 2", "tags": ["a", "b"]},
        {"id": 3, "active": False},
    ]


@pytest.fixture
def nested_tree(sample_nested_json):
    """Flattened tree of the nested sample."""
    return TreeFlattener().flatten(sample_nested_json)


@pytest.fixture
def nested_visibility(nested_tree):
    """Fresh visibility state over the nested sample tree."""
    return VisibilityController(nested_tree)


@pytest.fixture
def inspector():
    """Inspector session without a loaded document."""
    return JSONInspector()
