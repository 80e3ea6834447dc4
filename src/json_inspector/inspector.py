"""Session object tying the inspector components together."""

import logging
from typing import List, Optional
from .canonicalizer import Canonicalizer
from .config import InspectorConfig
from .error_handler import ErrorHandler
from .exporter import AlignedExporter
from .flattener import TreeFlattener
from .models import Row, JsonTree
from .parser import JSONParser
from .table import TableConverter
from .types import (
    ExportMode,
    ExportResult,
    LoadResult,
    InspectorError,
    ParseError,
    EmptyInputError,
    ErrorType
)
from .visibility import VisibilityController


NO_ROWS_MESSAGE = "No visible rows to copy."


class JSONInspector:
    """
    Interactive JSON inspection session.

    Owns the current tree and its visibility state. A successful ``load``
    replaces both at once; a failed one leaves the previous pair untouched.
    """

    def __init__(self, config: Optional[InspectorConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the inspector.

        Args:
            config: Optional configuration, defaults to InspectorConfig()
            logger: Optional logger instance shared with all components
        """
        self.config = config or InspectorConfig()
        self.logger = logger or logging.getLogger(__name__)

        self.parser = JSONParser(self.logger)
        self.error_handler = ErrorHandler(self.config, self.parser, self.logger)
        self.canonicalizer = Canonicalizer(self.config, self.parser, self.logger)
        self.flattener = TreeFlattener(self.config, self.parser, self.logger)
        self.exporter = AlignedExporter(self.logger)
        self.table_converter = TableConverter(self.logger)

        self._tree: Optional[JsonTree] = None
        self._visibility: Optional[VisibilityController] = None

    # Canonical forms

    def format(self, text: str) -> str:
        return self.canonicalizer.format(text)

    def minify(self, text: str) -> str:
        return self.canonicalizer.minify(text)

    def unescape(self, text: str) -> str:
        return self.canonicalizer.unescape(text)

    def table(self, text: str):
        """Table view of JSON text, see TableConverter."""
        return self.table_converter.convert(self.parser.parse(text))

    # Tree view

    @property
    def tree(self) -> Optional[JsonTree]:
        return self._tree

    @property
    def visibility(self) -> Optional[VisibilityController]:
        return self._visibility

    def load(self, text: str) -> LoadResult:
        """
        Build a fresh tree view from JSON text.

        Args:
            text: JSON text

        Returns:
            LoadResult; ``skipped`` is set for empty input and ``message``
            carries a recovery hint when parsing fails
        """
        try:
            tree = self.flattener.flatten_text(text)
        except EmptyInputError:
            self.logger.debug("Empty input, tree view left unchanged")
            return LoadResult(success=False, skipped=True)
        except ParseError as e:
            response = self.error_handler.handle_error(e)
            return LoadResult(success=False, message=response.suggested_action,
                              errors=[str(e)])

        self._tree = tree
        self._visibility = VisibilityController(tree, self.logger)
        self.logger.info(f"Loaded tree with {len(tree)} rows, max level {tree.max_level}")

        return LoadResult(
            success=True,
            row_count=len(tree),
            max_level=tree.max_level,
            message=self.config.empty_message if tree.is_empty else None,
        )

    def clear(self) -> None:
        self._tree = None
        self._visibility = None

    def toggle(self, row_id: str) -> bool:
        return self._require_visibility().toggle(row_id)

    def set_expanded(self, row_id: str, expanded: bool) -> None:
        self._require_visibility().set_expanded(row_id, expanded)

    def expand_all(self) -> None:
        self._require_visibility().expand_all()

    def collapse_all(self) -> None:
        self._require_visibility().collapse_all()

    def reveal_to_depth(self, depth: int) -> None:
        self._require_visibility().reveal_to_depth(depth)

    def visible_rows(self) -> List[Row]:
        return self._require_visibility().visible_rows()

    # Export

    def export_visible(self, mode: ExportMode = ExportMode.ROW) -> ExportResult:
        """Export every visible row."""
        visibility = self._require_visibility()
        rows = visibility.visible_rows()
        text = self.exporter.export_rows(rows, visibility, mode)
        return self._export_result(text, len(rows), mode)

    def export_subtree(self, row_id: str, mode: ExportMode = ExportMode.ROW) -> ExportResult:
        """
        Export a row and all of its descendants.

        Raises:
            RowNotFoundError: If the id is not part of the current tree
        """
        tree = self._require_tree()
        rows = tree.subtree(row_id)
        text = self.exporter.export_subtree(tree, row_id, mode)
        return self._export_result(text, len(rows), mode)

    def copy_key(self, row_id: str) -> str:
        return self.exporter.copy_key(self._require_tree().get(row_id))

    def _export_result(self, text: str, row_count: int, mode: ExportMode) -> ExportResult:
        if not text:
            return ExportResult(success=False, text="", row_count=0, mode=mode,
                                errors=[NO_ROWS_MESSAGE])
        return ExportResult(success=True, text=text, row_count=row_count, mode=mode)

    def _require_tree(self) -> JsonTree:
        if self._tree is None:
            raise InspectorError("No JSON document loaded", ErrorType.STATE)
        return self._tree

    def _require_visibility(self) -> VisibilityController:
        self._require_tree()
        return self._visibility
