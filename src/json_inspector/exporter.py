"""Tab-aligned text export of tree rows."""

import logging
from typing import Callable, List, Optional, Sequence
from .models import Row, JsonTree
from .types import ExportMode, ExportError
from .visibility import VisibilityController


class AlignedExporter:
    r"""
    Turns rows into tab-delimited text for pasting into a spreadsheet.

    A parent that is opened in the export contributes its key, followed by a
    tab, to the line of its first descendant instead of a line of its own.
    Keys are indented one tab per level and leaf keys are padded so the value
    column lines up at the deepest level present in the export. For
    ``{"a": 1, "b": {"c": 2}}`` the result is ``"a\t\t1\nb\tc\t2\n"``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def export_rows(self, rows: Sequence[Row], visibility: VisibilityController,
                    mode: ExportMode = ExportMode.ROW) -> str:
        """
        Export visible rows in tree order.

        An expanded parent is merged onto its first child's line. A collapsed
        parent is exported like a leaf, with its ``Array(n)``/``Object{n}``
        summary as the value.

        Args:
            rows: Visible rows in tree order
            visibility: State the rows were selected from
            mode: What each line carries

        Returns:
            Export text, empty when there are no rows

        Raises:
            ExportError: If a row does not belong to the controlled tree, is
                hidden, or is out of tree order
        """
        tree = visibility.tree
        previous = -1
        for row in rows:
            if row.id not in tree or tree.get(row.id) is not row:
                raise ExportError(f"Row {row.id} is not part of the current tree",
                                  context=row.id)
            if not visibility.is_visible(row.id):
                raise ExportError(f"Row {row.id} is hidden", context=row.id)
            position = tree.position(row.id)
            if position <= previous:
                raise ExportError(f"Row {row.id} is out of tree order", context=row.id)
            previous = position
        return self._render(rows, mode,
                            lambda row: row.has_children and visibility.is_expanded(row.id))

    def export_visible(self, tree: JsonTree, visibility: VisibilityController,
                       mode: ExportMode = ExportMode.ROW) -> str:
        """Export every currently visible row of a tree."""
        if visibility.tree is not tree:
            raise ExportError("Visibility state belongs to a different tree")
        return self.export_rows(visibility.visible_rows(), visibility, mode)

    def export_subtree(self, tree: JsonTree, row_id: str,
                       mode: ExportMode = ExportMode.ROW) -> str:
        """
        Export one row and all of its descendants, ignoring visibility.

        Every parent in the subtree is merged onto its first child's line.
        In value mode parents print nothing at all.

        Raises:
            RowNotFoundError: If the id is not part of the tree
        """
        return self._render(tree.subtree(row_id), mode, lambda row: row.has_children)

    @staticmethod
    def copy_key(row: Row) -> str:
        """Key of a single row."""
        return row.key

    def _render(self, rows: Sequence[Row], mode: ExportMode,
                is_open: Callable[[Row], bool]) -> str:
        if not rows:
            return ""

        max_level = max(row.level for row in rows)
        lines: List[str] = []
        pending_merge = False

        for row in rows:
            opened = is_open(row)

            if mode == ExportMode.VALUE:
                if not opened:
                    lines.append(f"{row.display_value}\n")
                continue

            indent = "" if pending_merge else "\t" * row.level
            pending_merge = False

            if opened:
                lines.append(f"{indent}{row.key}\t")
                pending_merge = True
            elif mode == ExportMode.KEY:
                lines.append(f"{indent}{row.key}\n")
            else:
                padding = "\t" * (max_level - row.level)
                lines.append(f"{indent}{row.key}{padding}\t{row.display_value}\n")

        text = "".join(lines)
        self.logger.debug(f"Exported {len(rows)} rows in {mode.value} mode")
        return text
