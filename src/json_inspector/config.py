"""Configuration for the JSON Inspector."""

from dataclasses import dataclass, fields, asdict
from typing import Any, Dict


@dataclass
class InspectorConfig:
    """
    Settings shared by the inspector components.

    Attributes:
        indent: Indentation width used by the pretty printer
        ensure_ascii: Escape non-ASCII characters when serializing
        root_label: Key shown for a document that is a single primitive
        id_prefix: Prefix of generated row ids
        empty_message: Text shown instead of a tree for an empty document
        deep_nesting_warning: Depth above which validation emits a warning
    """

    indent: int = 2
    ensure_ascii: bool = False
    root_label: str = "Root"
    id_prefix: str = "row-"
    empty_message: str = "Empty JSON"
    deep_nesting_warning: int = 20

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.indent < 0:
            raise ValueError("indent must be non-negative")

        if not self.root_label:
            raise ValueError("root_label cannot be empty")

        if not self.id_prefix:
            raise ValueError("id_prefix cannot be empty")

        if self.deep_nesting_warning < 1:
            raise ValueError("deep_nesting_warning must be at least 1")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InspectorConfig':
        """
        Create a config from a mapping, ignoring unknown keys.

        Args:
            data: Mapping of setting names to values

        Returns:
            InspectorConfig instance
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
