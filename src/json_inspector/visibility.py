"""Expand/collapse state over a flattened tree."""

import logging
from typing import Dict, List, Optional
from .models import Row, JsonTree
from .types import RowState


class VisibilityController:
    """
    Tracks which rows are expanded and which are visible.

    A row is visible iff it is a root, or its parent is both visible and
    expanded. Every operation keeps that invariant; the renderer only ever
    reads the resulting flags.

    Only rows with children carry ``expanded = True``; for leaves the flag is
    always False since it has nothing to govern.
    """

    def __init__(self, tree: JsonTree, logger: Optional[logging.Logger] = None):
        """
        Initialize state with every row visible and every parent expanded.

        Args:
            tree: Tree to control
            logger: Optional logger instance
        """
        self.tree = tree
        self.logger = logger or logging.getLogger(__name__)
        self._states: Dict[str, RowState] = {
            row.id: RowState(expanded=row.has_children, visible=True)
            for row in tree.rows
        }

    def state(self, row_id: str) -> RowState:
        self.tree.get(row_id)
        return self._states[row_id]

    def is_visible(self, row_id: str) -> bool:
        return self.state(row_id).visible

    def is_expanded(self, row_id: str) -> bool:
        return self.state(row_id).expanded

    def set_expanded(self, row_id: str, expanded: bool) -> None:
        """
        Expand or collapse one row and update its descendants.

        Collapsing hides the whole subtree. Expanding shows the direct
        children, and deeper levels only below descendants that are still
        expanded themselves.

        Args:
            row_id: Id of the row to change
            expanded: New expanded flag

        Raises:
            RowNotFoundError: If the id is not part of the tree
        """
        row = self.tree.get(row_id)
        if not row.has_children:
            self.logger.debug(f"Ignoring expand change on leaf row {row_id}")
            return

        self._states[row_id].expanded = expanded
        self._propagate(row)
        self.logger.debug(f"Row {row_id} {'expanded' if expanded else 'collapsed'}")

    def toggle(self, row_id: str) -> bool:
        """
        Flip a row's expanded flag.

        Returns:
            The new expanded flag
        """
        expanded = not self.is_expanded(row_id)
        self.set_expanded(row_id, expanded)
        return self.is_expanded(row_id)

    def expand_all(self) -> None:
        for row in self.tree.rows:
            state = self._states[row.id]
            state.expanded = row.has_children
            state.visible = True
        self.logger.debug("Expanded all rows")

    def collapse_all(self) -> None:
        for row in self.tree.rows:
            state = self._states[row.id]
            state.expanded = False
            state.visible = row.is_root
        self.logger.debug("Collapsed all rows")

    def reveal_to_depth(self, depth: int) -> None:
        """
        Show exactly the rows above a given depth.

        Rows with ``level < depth`` become visible, and parents with
        ``level < depth - 1`` become expanded, so the result does not depend
        on earlier toggles. Depth is clamped to 1 so roots stay visible.

        Args:
            depth: Number of levels to show
        """
        depth = max(1, depth)
        for row in self.tree.rows:
            state = self._states[row.id]
            state.visible = row.level < depth
            state.expanded = row.has_children and row.level < depth - 1
        self.logger.debug(f"Revealed tree to depth {depth}")

    def visible_rows(self) -> List[Row]:
        """Visible rows in tree order."""
        return [row for row in self.tree.rows if self._states[row.id].visible]

    def snapshot(self) -> Dict[str, RowState]:
        """Copy of the current state, keyed by row id."""
        return {row_id: RowState(s.expanded, s.visible) for row_id, s in self._states.items()}

    def check_invariant(self) -> List[str]:
        """
        Check the visibility rule for every row.

        Returns:
            Ids of rows whose visible flag disagrees with their parent
        """
        broken = []
        for row in self.tree.rows:
            if row.is_root:
                expected = True
            else:
                parent = self._states[row.parent_id]
                expected = parent.visible and parent.expanded
            if self._states[row.id].visible != expected:
                broken.append(row.id)
        return broken

    def _propagate(self, row: Row) -> None:
        stack = [row]
        while stack:
            parent = stack.pop()
            parent_state = self._states[parent.id]
            show = parent_state.visible and parent_state.expanded
            for child in self.tree.children(parent):
                self._states[child.id].visible = show
                if child.has_children:
                    stack.append(child)
