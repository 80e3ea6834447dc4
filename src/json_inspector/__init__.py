"""
JSON Inspector - Interactive JSON inspection tool.

Pretty-prints, minifies and unescapes JSON text, and flattens documents into
a collapsible tree whose visible rows export as tab-aligned text.
"""

__version__ = "1.0.0"

from .inspector import JSONInspector
from .canonicalizer import Canonicalizer, format_json, minify_json, unescape_json
from .config import InspectorConfig
from .exporter import AlignedExporter
from .flattener import TreeFlattener
from .models import Row, JsonTree
from .table import TableConverter, TableView
from .types import (
    ValueKind,
    ExportMode,
    ExportResult,
    LoadResult,
    InspectorError,
    ParseError,
    EmptyInputError,
    ExportError,
    RowNotFoundError,
)
from .visibility import VisibilityController

__all__ = [
    "JSONInspector",
    "Canonicalizer",
    "format_json",
    "minify_json",
    "unescape_json",
    "InspectorConfig",
    "AlignedExporter",
    "TreeFlattener",
    "VisibilityController",
    "Row",
    "JsonTree",
    "TableConverter",
    "TableView",
    "ValueKind",
    "ExportMode",
    "ExportResult",
    "LoadResult",
    "InspectorError",
    "ParseError",
    "EmptyInputError",
    "ExportError",
    "RowNotFoundError",
]
