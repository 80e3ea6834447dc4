"""Flattened tree produced by a single flatten call."""

from typing import Dict, Iterator, List, Optional, Sequence
from .row import Row
from ..types import RowNotFoundError


class JsonTree:
    """
    Ordered row sequence with an id index.

    Rows are kept in emission (pre-order) order. The id index and each row's
    ``children`` list make parent/child lookups constant time, so subtree
    walks never rescan the full row list.
    """

    def __init__(self, rows: List[Row], max_level: int = 0):
        self.rows = rows
        self.max_level = max_level
        self._index: Dict[str, Row] = {row.id: row for row in rows}
        self._position: Dict[str, int] = {row.id: i for i, row in enumerate(rows)}
        if len(self._index) != len(rows):
            raise ValueError("row ids must be unique")

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._index

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def get(self, row_id: str) -> Row:
        """
        Look up a row by id.

        Raises:
            RowNotFoundError: If the id was not produced by this tree
        """
        try:
            return self._index[row_id]
        except KeyError:
            raise RowNotFoundError(row_id) from None

    def position(self, row_id: str) -> int:
        """Index of a row in emission order."""
        self.get(row_id)
        return self._position[row_id]

    def parent(self, row: Row) -> Optional[Row]:
        return self._index[row.parent_id] if row.parent_id is not None else None

    def children(self, row: Row) -> List[Row]:
        return [self._index[child_id] for child_id in row.children]

    def roots(self) -> List[Row]:
        return [row for row in self.rows if row.is_root]

    def subtree(self, row_id: str) -> List[Row]:
        """
        Return a row followed by all of its descendants in pre-order.

        Args:
            row_id: Id of the subtree root

        Returns:
            List of rows, starting with the subtree root
        """
        result = []
        stack = [self.get(row_id)]
        while stack:
            row = stack.pop()
            result.append(row)
            stack.extend(self._index[child_id] for child_id in reversed(row.children))
        return result

    def descendants(self, row_id: str) -> List[Row]:
        return self.subtree(row_id)[1:]

    def find_by_path(self, path: Sequence[str]) -> Row:
        """
        Find the row addressed by a key path from the document root.

        Raises:
            RowNotFoundError: If no row has that path
        """
        wanted = tuple(str(part) for part in path)
        candidates = self.roots()
        row = None
        for part in wanted:
            row = next((c for c in candidates if c.key == part), None)
            if row is None:
                break
            candidates = self.children(row)
        if row is None or row.path != wanted:
            raise RowNotFoundError("/".join(wanted))
        return row
