"""Plain console output formatter."""

import textwrap
from typing import List

from prdigest.models import TextElement, Paragraph, ListEntry, PullRequestDigest
from prdigest.output.base import OutputFormatter

DEFAULT_WIDTH = 72
DEFAULT_INDENT = "    "
DEFAULT_SEPARATOR = "------------"
LIST_PREFIX = "- "


class ConsoleFormatter(OutputFormatter):
    """Formats digests for a fixed-width terminal."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        indent: str = DEFAULT_INDENT,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """Initialize the console formatter.

        Args:
            width: Display width paragraphs are wrapped to, indent included
            indent: Prefix for every paragraph line
            separator: Line closing each pull request that has a description
        """
        self._width = width
        self._indent = indent
        self._separator = separator

    def format_element(self, element: TextElement) -> str:
        """Format a paragraph as an indented block, a list entry as one line.

        Paragraphs end with an empty line so the next element is set apart.
        """
        if isinstance(element, Paragraph):
            wrapped = textwrap.fill(
                element.text,
                width=self._width,
                initial_indent=self._indent,
                subsequent_indent=self._indent,
                break_long_words=False,
                break_on_hyphens=False,
            )
            return wrapped + "\n"
        if isinstance(element, ListEntry):
            return LIST_PREFIX + element.text
        raise TypeError(f"Unsupported element type: {type(element).__name__}")

    def format_digest(self, digest: PullRequestDigest) -> str:
        """Title, then the description blocks, then the separator."""
        lines: List[str] = [digest.title]

        if digest.has_description:
            lines.append("")
            lines.append(self.format_elements(digest.elements))

        if digest.pull_request.description is not None:
            lines.append(self._separator)

        return "\n".join(lines)
