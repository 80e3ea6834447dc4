"""Flatten a JSON value into an ordered row sequence."""

import json
import logging
from typing import Any, Iterator, List, Optional, Tuple, Union
from .config import InspectorConfig
from .models import Row, JsonTree
from .parser import JSONParser
from .types import ValueKind


def detect_value_kind(value: Any) -> ValueKind:
    """
    Detect the JSON kind of a decoded value.

    Args:
        value: Value produced by the JSON decoder

    Returns:
        ValueKind of the value
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


def summarize_value(value: Any, kind: ValueKind) -> Union[str, int]:
    """Literal text of a primitive, or the entry count of a container."""
    if kind.is_container:
        return len(value)
    if kind == ValueKind.STRING:
        return f'"{value}"'
    return json.dumps(value)


# (key, value, level, parent id, path)
_Pending = Tuple[str, Any, int, Optional[str], Tuple[str, ...]]


class TreeFlattener:
    """
    Builds the tree view rows for a JSON document.

    The walk is pre-order and depth-first: each row is followed by all of its
    descendants before its next sibling. Members of a container root become
    level 0 rows; the root container itself gets no row. A primitive root
    becomes a single synthetic row. An explicit stack replaces recursion so
    arbitrarily deep documents do not hit the interpreter recursion limit.
    """

    def __init__(self, config: Optional[InspectorConfig] = None,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or InspectorConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)

    def flatten(self, value: Any) -> JsonTree:
        """
        Flatten a decoded JSON value.

        Row ids are assigned from a counter local to this call, so two calls
        on the same value produce identical trees.

        Args:
            value: Decoded JSON value

        Returns:
            JsonTree with rows in pre-order and the deepest level reached
        """
        rows: List[Row] = []
        by_id = {}
        max_level = 0
        counter = 0

        if isinstance(value, (dict, list)):
            stack = list(reversed(list(self._entries(value, 0, None, ()))))
        else:
            label = self.config.root_label
            stack = [(label, value, 0, None, (label,))]

        while stack:
            key, item, level, parent_id, path = stack.pop()
            kind = detect_value_kind(item)
            row = Row(
                id=f"{self.config.id_prefix}{counter}",
                parent_id=parent_id,
                key=key,
                level=level,
                value_kind=kind,
                value_summary=summarize_value(item, kind),
                has_children=kind.is_container and len(item) > 0,
                path=path,
            )
            counter += 1
            rows.append(row)
            by_id[row.id] = row
            if parent_id is not None:
                by_id[parent_id].children.append(row.id)
            max_level = max(max_level, level)

            if row.has_children:
                stack.extend(reversed(list(self._entries(item, level + 1, row.id, path))))

        self.logger.debug(f"Flattened document into {len(rows)} rows, max level {max_level}")
        return JsonTree(rows, max_level)

    def flatten_text(self, text: str) -> JsonTree:
        """
        Parse JSON text and flatten it.

        Raises:
            EmptyInputError: If the text is empty
            ParseError: If the text is not valid JSON
        """
        return self.flatten(self.parser.parse(text))

    @staticmethod
    def _entries(container: Union[dict, list], level: int, parent_id: Optional[str],
                 path: Tuple[str, ...]) -> Iterator[_Pending]:
        if isinstance(container, dict):
            items = ((str(k), v) for k, v in container.items())
        else:
            items = ((str(i), v) for i, v in enumerate(container))
        for key, item in items:
            yield key, item, level, parent_id, path + (key,)
