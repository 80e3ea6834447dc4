"""Core type definitions for the JSON Inspector."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ValueKind(Enum):
    """Enumeration of JSON value kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


class ExportMode(Enum):
    """What each exported line carries."""
    ROW = "row"
    KEY = "key"
    VALUE = "value"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    EMPTY = "empty"
    EXPORT = "export"
    LOOKUP = "lookup"
    STATE = "state"


@dataclass
class RowState:
    """Expand/visible flags of a single row."""
    expanded: bool
    visible: bool


@dataclass
class LoadResult:
    """Result of loading a document into the tree view."""
    success: bool
    row_count: int = 0
    max_level: int = 0
    skipped: bool = False
    message: Optional[str] = None
    errors: List[str] = field(default_factory=list)


@dataclass
class ExportResult:
    """Result of an export request."""
    success: bool
    text: str
    row_count: int
    mode: ExportMode
    errors: List[str] = field(default_factory=list)


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class InspectorError(Exception):
    """Base exception for inspector operations."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ParseError(InspectorError):
    """Raised when input text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None,
                 colno: Optional[int] = None):
        super().__init__(message, ErrorType.SYNTAX)
        self.lineno = lineno
        self.colno = colno


class EmptyInputError(InspectorError):
    """Raised when there is no input text to work on."""

    def __init__(self, message: str = "Input is empty"):
        super().__init__(message, ErrorType.EMPTY)


class ExportError(InspectorError):
    """Raised when an export is asked for rows outside the tree."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.EXPORT, context)


class RowNotFoundError(InspectorError, KeyError):
    """Raised when a row id is not part of the current tree."""

    def __init__(self, row_id: str):
        super().__init__(f"Unknown row id: {row_id}", ErrorType.LOOKUP, row_id)
        self.row_id = row_id

    def __str__(self) -> str:
        return self.args[0]
