"""Data models for the JSON Inspector."""

from .row import Row
from .json_tree import JsonTree

__all__ = ["Row", "JsonTree"]
