"""Segmenter turning pull request descriptions into paragraphs and list entries."""

from dataclasses import dataclass, field
from typing import List, Union

from prdigest.models import TextElement, Paragraph, ListEntry

NEWLINE = "\n"
SPACE = " "
MARKERS = frozenset("-*")

# str.isspace() also accepts the ASCII information separators, which are not
# Unicode White_Space.
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_blank(char: str) -> bool:
    return char.isspace() and char not in _INFORMATION_SEPARATORS


@dataclass
class _Init:
    """Between elements; nothing accumulated."""


@dataclass
class _InParagraph:
    """Accumulating prose. ``last`` is NEWLINE while a line break is pending."""

    text: List[str]
    last: str


@dataclass
class _InListEntry:
    """Accumulating one bullet line."""

    text: List[str] = field(default_factory=list)
    started: bool = False


_State = Union[_Init, _InParagraph, _InListEntry]


def normalize_newlines(raw: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return raw.replace("\r\n", NEWLINE).replace("\r", NEWLINE)


def segment(raw: str) -> List[TextElement]:
    """Split a description into paragraphs and list entries.

    Single line breaks inside a paragraph fold into one space, a blank line
    ends the paragraph, and a line starting with ``-`` or ``*`` becomes a
    list entry. The scan is a single left-to-right pass: a newline inside a
    paragraph is only remembered, and the character after it decides whether
    it was a fold, a paragraph break or the start of a list entry.

    Args:
        raw: Description text using ``\\n`` line breaks

    Returns:
        Elements in order of appearance (empty for blank input)
    """
    state: _State = _Init()
    result: List[TextElement] = []

    for char in raw:
        if isinstance(state, _Init):
            if char == NEWLINE or char == SPACE:
                continue
            if char in MARKERS:
                state = _InListEntry()
            else:
                state = _InParagraph(text=[char], last=char)

        elif isinstance(state, _InParagraph):
            pending_break = state.last == NEWLINE
            if char == NEWLINE:
                if pending_break:
                    result.append(Paragraph("".join(state.text)))
                    state = _Init()
                else:
                    state.last = NEWLINE
            elif char == SPACE and pending_break:
                continue
            elif char in MARKERS and pending_break:
                result.append(Paragraph("".join(state.text)))
                state = _InListEntry()
            else:
                if pending_break:
                    state.text.append(SPACE)
                state.text.append(char)
                state.last = char

        elif isinstance(state, _InListEntry):
            if char == NEWLINE:
                result.append(ListEntry("".join(state.text)))
                state = _Init()
            elif state.started:
                state.text.append(char)
            elif not _is_blank(char):
                state.started = True
                state.text.append(char)

        else:
            raise AssertionError(f"Unhandled segmenter state: {state!r}")

    # Flush whatever is still open; a lone marker yields an empty entry.
    if isinstance(state, _InParagraph):
        result.append(Paragraph("".join(state.text)))
    elif isinstance(state, _InListEntry):
        result.append(ListEntry("".join(state.text)))

    return result


class DescriptionSegmenter:
    """Segments pull request descriptions into text elements."""

    def segment(self, text: str) -> List[TextElement]:
        """Segment text into paragraphs and list entries.

        Args:
            text: Description text using ``\\n`` line breaks

        Returns:
            List of text elements in source order
        """
        return segment(text)
