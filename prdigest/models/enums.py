"""Enumerations for prdigest models."""

from enum import Enum


class ElementType(str, Enum):
    """Type of segmented description element."""

    PARAGRAPH = "paragraph"
    LIST_ENTRY = "list_entry"
