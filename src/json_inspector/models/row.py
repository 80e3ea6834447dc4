"""Row model for the flattened tree view."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union
from ..types import ValueKind


@dataclass
class Row:
    """
    One flattened tree entry.

    A row stands for a single object member or array element of the source
    document (or the document itself when it is a primitive). Rows carry
    enough linkage to be rendered and exported without the source value.
    """

    id: str
    parent_id: Optional[str]
    key: str
    level: int
    value_kind: ValueKind
    value_summary: Union[str, int]
    has_children: bool
    children: List[str] = field(default_factory=list)
    path: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate row after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate row integrity."""
        if not self.id:
            raise ValueError("id cannot be empty")

        if self.level < 0:
            raise ValueError("level must be non-negative")

        if (self.parent_id is None) != (self.level == 0):
            raise ValueError("only level 0 rows may be without a parent")

        if self.has_children and not self.value_kind.is_container:
            raise ValueError(f"{self.value_kind.value} rows cannot have children")

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def display_value(self) -> str:
        """Bare literal shown in the value column."""
        if self.value_kind == ValueKind.ARRAY:
            return f"Array({self.value_summary})"
        if self.value_kind == ValueKind.OBJECT:
            return f"Object{{{self.value_summary}}}"
        return str(self.value_summary)

    def to_dict(self) -> Dict[str, Any]:
        """Convert row to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "parentId": self.parent_id,
            "key": self.key,
            "level": self.level,
            "valueKind": self.value_kind.value,
            "valueSummary": self.value_summary,
            "hasChildren": self.has_children,
            "children": list(self.children),
            "path": list(self.path),
        }
