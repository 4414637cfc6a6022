"""Segmented text element models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from prdigest.models.enums import ElementType


@dataclass(frozen=True)
class TextElement(ABC):
    """One semantic element of a segmented description."""

    text: str

    @property
    @abstractmethod
    def element_type(self) -> ElementType:
        """Variant tag of this element."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": self.element_type.value, "text": self.text}


@dataclass(frozen=True)
class Paragraph(TextElement):
    """A prose block with single line breaks folded into spaces."""

    @property
    def element_type(self) -> ElementType:
        return ElementType.PARAGRAPH


@dataclass(frozen=True)
class ListEntry(TextElement):
    """The content of one bullet line, marker and leading blanks removed."""

    @property
    def element_type(self) -> ElementType:
        return ElementType.LIST_ENTRY
