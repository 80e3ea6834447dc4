#!/usr/bin/env python3
"""
Example usage of the JSON Inspector.

This script demonstrates loading a document into the tree view,
collapsing rows and copying the visible rows as spreadsheet text.
"""

import json
from json_inspector import JSONInspector, ExportMode


def main():
    """Main example function."""
    print("JSON Inspector Example")
    print("=" * 50)

    sample_data = {
        "users": [
            {
                "name": "Alice Johnson",
                "profile": {"age": 30, "city": "New York"},
                "interests": ["reading", "hiking"]
            },
            {
                "name": "Bob Smith",
                "profile": {"age": 25, "city": "San Francisco"},
                "interests": ["coding"]
            }
        ],
        "metadata": {
            "version": "1.0",
            "total_users": 2
        }
    }

    inspector = JSONInspector()
    text = inspector.minify(json.dumps(sample_data))
    print(f"\n📄 Minified input ({len(text)} chars):")
    print(text)

    result = inspector.load(text)
    print(f"\n🌳 Loaded {result.row_count} rows, {result.max_level + 1} levels deep")

    for row in inspector.visible_rows():
        print(f"   {'  ' * row.level}{row.key}: {row.display_value}  [{row.id}]")

    print("\n📋 Full export:")
    print(inspector.export_visible().text)

    inspector.reveal_to_depth(2)
    print("📋 Export with two levels visible:")
    print(inspector.export_visible().text)

    users = inspector.tree.find_by_path(["users", "0"])
    print(f"📋 Values of subtree {users.id}:")
    print(inspector.export_subtree(users.id, ExportMode.VALUE).text)


if __name__ == "__main__":
    main()
