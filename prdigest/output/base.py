"""Abstract base class for output formatters."""

from abc import ABC, abstractmethod
from typing import List

from prdigest.models import TextElement, PullRequestDigest


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format_element(self, element: TextElement) -> str:
        """Format a single element.

        Args:
            element: Paragraph or list entry to format

        Returns:
            Formatted string representation of the element
        """
        pass

    @abstractmethod
    def format_digest(self, digest: PullRequestDigest) -> str:
        """Format one pull request with its description.

        Args:
            digest: Pull request digest to format

        Returns:
            Formatted text block
        """
        pass

    def format_elements(self, elements: List[TextElement]) -> str:
        """Format elements in order, one rendering per line block."""
        return "\n".join(self.format_element(element) for element in elements)
