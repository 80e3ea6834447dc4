"""Pretty-print, minify and unescape JSON text."""

import json
import logging
from typing import Any, Optional
from .config import InspectorConfig
from .parser import JSONParser
from .types import ParseError, EmptyInputError


class Canonicalizer:
    """Re-serializes JSON text in canonical forms."""

    def __init__(self, config: Optional[InspectorConfig] = None,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or InspectorConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)

    def format(self, text: str) -> str:
        """
        Pretty-print JSON text with the configured indentation.

        Raises:
            ParseError: If the text is not valid JSON
        """
        return self._pretty(self._parse(text))

    def minify(self, text: str) -> str:
        """
        Serialize JSON text without insignificant whitespace.

        Raises:
            ParseError: If the text is not valid JSON
        """
        return json.dumps(self._parse(text), separators=(',', ':'),
                          ensure_ascii=self.config.ensure_ascii)

    def unescape(self, text: str) -> str:
        """
        Undo one level of string escaping.

        A JSON string literal is decoded and returned verbatim. Any other
        JSON value is pretty-printed. Text that is not JSON at all gets a
        plain substitution of ``\\"`` and ``\\\\``, which suits escaped
        fragments copied out of log lines.
        """
        if not text:
            return ""

        try:
            parsed = self.parser.parse(text)
        except (ParseError, EmptyInputError):
            self.logger.debug("Unescape input is not JSON, using textual substitution")
            return text.replace('\\"', '"').replace('\\\\', '\\')

        if isinstance(parsed, str):
            return parsed
        return self._pretty(parsed)

    def _parse(self, text: str) -> Any:
        try:
            return self.parser.parse(text)
        except EmptyInputError as e:
            # Empty text is not a JSON document either.
            raise ParseError("Invalid JSON: Expecting value at line 1, column 1",
                             lineno=1, colno=1) from e

    def _pretty(self, value: Any) -> str:
        return json.dumps(value, indent=self.config.indent,
                          ensure_ascii=self.config.ensure_ascii)


_default = Canonicalizer()


def format_json(text: str) -> str:
    """Pretty-print JSON text with 2-space indentation."""
    return _default.format(text)


def minify_json(text: str) -> str:
    """Serialize JSON text compactly."""
    return _default.minify(text)


def unescape_json(text: str) -> str:
    """Undo one level of string escaping."""
    return _default.unescape(text)
