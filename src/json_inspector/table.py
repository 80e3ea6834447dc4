"""Grid view of JSON arrays and objects."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


MISSING_CELL = "-"


@dataclass
class TableView:
    """
    A grid of cells.

    Cells are plain text, a nested TableView for container values, or None
    when a record has no value for a column.
    """

    headers: List[str]
    rows: List[List[Any]] = field(default_factory=list)
    source: Any = None

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def column(self, header: str) -> List[Any]:
        index = self.headers.index(header)
        return [row[index] for row in self.rows]

    def to_text(self) -> str:
        """
        Render as tab-separated lines.

        Nested tables are written as minified JSON so each record stays on
        one line.
        """
        lines = []
        if self.headers:
            lines.append("\t".join(self.headers))
        for row in self.rows:
            lines.append("\t".join(self._cell_text(cell) for cell in row))
        return "\n".join(lines) + ("\n" if lines else "")

    @staticmethod
    def _cell_text(cell: Any) -> str:
        if cell is None:
            return MISSING_CELL
        if isinstance(cell, TableView):
            return json.dumps(cell.source, separators=(',', ':'), ensure_ascii=False)
        return cell


def scalar_text(value: Any) -> str:
    """Text of a primitive as shown in a table cell."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class TableConverter:
    """
    Converts decoded JSON into a TableView.

    An array of records becomes one row per record with the union of their
    keys as columns, in first-seen order. An array of primitives becomes a
    single ``Value`` column. An object becomes a two-column key/value grid
    without headers. Container values inside cells are converted the same
    way.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def convert(self, data: Any) -> Union[TableView, str]:
        """
        Convert a value.

        Args:
            data: Decoded JSON value

        Returns:
            TableView for arrays and objects, plain text for primitives
        """
        if isinstance(data, list):
            return self._convert_array(data)
        if isinstance(data, dict):
            return self._convert_object(data)
        return scalar_text(data)

    def _convert_array(self, data: List[Any]) -> TableView:
        if not data:
            return TableView(headers=[], source=data)

        if not isinstance(data[0], (dict, list)) and data[0] is not None:
            return TableView(headers=["Value"],
                             rows=[[self._cell(item)] for item in data],
                             source=data)

        headers: List[str] = []
        for item in data:
            if isinstance(item, dict):
                for key in item:
                    if key not in headers:
                        headers.append(key)

        rows = []
        for item in data:
            record = item if isinstance(item, dict) else {}
            rows.append([self._cell(record[h]) if h in record else None for h in headers])

        self.logger.debug(f"Converted array of {len(data)} records into {len(headers)} columns")
        return TableView(headers=headers, rows=rows, source=data)

    def _convert_object(self, data: dict) -> TableView:
        return TableView(headers=[],
                         rows=[[key, self._cell(value)] for key, value in data.items()],
                         source=data)

    def _cell(self, value: Any) -> Union[TableView, str]:
        if isinstance(value, (dict, list)):
            return self.convert(value)
        return scalar_text(value)
