"""Strict JSON parser for the inspector."""

import json
import logging
import math
from typing import Any, Optional
from .types import ParseError, EmptyInputError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not allowed in JSON")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    return value


class JSONParser:
    """
    JSON parser following the standard grammar.

    Python's decoder accepts ``NaN`` and ``Infinity`` by default and turns
    numbers beyond the float range, such as ``1e400``, into infinities. Both
    are rejected here so that every accepted document re-serializes as valid
    JSON text.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON string.

        Args:
            json_string: JSON text to parse

        Returns:
            The decoded value

        Raises:
            EmptyInputError: If the text is empty or only whitespace
            ParseError: If the text is not valid JSON
        """
        if not json_string or not json_string.strip():
            raise EmptyInputError()

        try:
            data = json.loads(json_string, parse_constant=_reject_constant,
                              parse_float=_parse_finite_float)
        except json.JSONDecodeError as e:
            self.logger.debug(f"JSON parsing failed: {e}")
            raise ParseError(
                f"Invalid JSON: {e.msg} at line {e.lineno}, column {e.colno}",
                lineno=e.lineno,
                colno=e.colno,
            ) from e
        except ValueError as e:
            self.logger.debug(f"JSON parsing failed: {e}")
            raise ParseError(f"Invalid JSON: {e}") from e
        except RecursionError as e:
            raise ParseError("Invalid JSON: document is nested too deeply to decode") from e

        self.logger.debug(f"Parsed JSON document of type {type(data).__name__}")
        return data
