"""Error handling implementation for the JSON Inspector."""

import logging
from typing import Any, Optional
from .config import InspectorConfig
from .parser import JSONParser
from .types import (
    ValidationResult,
    ValidationError,
    ErrorResponse,
    InspectorError,
    ParseError,
    EmptyInputError,
    ErrorType
)


class ErrorHandler:
    """
    Validates input and turns inspector errors into user-facing responses.

    No error is retried automatically; the response only says whether the
    user can fix the input and try again.
    """

    def __init__(self, config: Optional[InspectorConfig] = None,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            config: Optional inspector configuration
            parser: Optional parser used for validation
            logger: Optional logger instance for error reporting
        """
        self.config = config or InspectorConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        try:
            data = self.parser.parse(input_data)
        except EmptyInputError as e:
            errors.append(ValidationError(
                type=ErrorType.EMPTY,
                message=str(e),
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ParseError as e:
            location = f"line {e.lineno}, column {e.colno}" if e.lineno is not None else "input"
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location=location
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        depth = self._calculate_max_depth(data)
        if depth > self.config.deep_nesting_warning:
            message = f"Deep nesting detected (depth: {depth}). The tree view may be slow to browse."
            self.logger.warning(message)
            warnings.append(message)

        return ValidationResult(is_valid=True, errors=errors, warnings=warnings)

    def handle_error(self, error: InspectorError) -> ErrorResponse:
        """
        Describe how the user can recover from an error.

        Args:
            error: InspectorError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Inspector error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Fix the JSON syntax and try again. "
                                 "The previous tree view is left unchanged."
            )
        elif error.error_type == ErrorType.EMPTY:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Paste some JSON text first."
            )
        elif error.error_type == ErrorType.EXPORT:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Reload the tree view and select rows from it before copying."
            )
        elif error.error_type == ErrorType.LOOKUP:
            return ErrorResponse(
                can_recover=True,
                suggested_action="The row no longer exists. Reload the tree view."
            )
        # ErrorType.STATE
        return ErrorResponse(
            can_recover=True,
            suggested_action="Load a JSON document into the tree view first."
        )

    @staticmethod
    def _calculate_max_depth(data: Any) -> int:
        """Calculate maximum nesting depth, counting the first tier as 0."""
        max_depth = 0
        stack = [(data, 0)]
        while stack:
            value, depth = stack.pop()
            if isinstance(value, dict):
                children = value.values()
            elif isinstance(value, list):
                children = value
            else:
                continue
            for child in children:
                max_depth = max(max_depth, depth)
                stack.append((child, depth + 1))
        return max_depth
