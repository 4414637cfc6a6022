from __future__ import annotations

import pytest

from prdigest.models import ListEntry, Paragraph, PullRequest, PullRequestDigest
from prdigest.output import ConsoleFormatter


def test_paragraph_is_wrapped_indented_and_followed_by_blank_line() -> None:
    formatter = ConsoleFormatter(width=20, indent="  ")

    rendered = formatter.format_element(Paragraph("one two three four five six"))

    assert rendered == "  one two three four\n  five six\n"


def test_long_words_are_not_broken() -> None:
    formatter = ConsoleFormatter(width=10, indent="  ")
    word = "x" * 30

    assert formatter.format_element(Paragraph(word)) == f"  {word}\n"


def test_list_entry_is_prefixed_and_not_wrapped() -> None:
    formatter = ConsoleFormatter(width=10)
    text = "a list entry much longer than ten characters"

    assert formatter.format_element(ListEntry(text)) == f"- {text}"


def test_format_elements_keeps_source_order() -> None:
    formatter = ConsoleFormatter()

    rendered = formatter.format_elements(
        [Paragraph("Intro"), ListEntry("a"), ListEntry("b"), Paragraph("Outro")]
    )

    assert rendered == "    Intro\n\n- a\n- b\n    Outro\n"


def test_unknown_element_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        ConsoleFormatter().format_element("plain string")  # type: ignore[arg-type]


def test_digest_without_description_prints_title_only() -> None:
    digest = PullRequestDigest(pull_request=PullRequest(title="Fix build"))

    assert ConsoleFormatter().format_digest(digest) == "Fix build"


def test_description_repeating_title_prints_only_separator() -> None:
    digest = PullRequestDigest(
        pull_request=PullRequest(title="Fix build", description="Fix build")
    )

    assert ConsoleFormatter().format_digest(digest) == "Fix build\n------------"


def test_digest_with_description() -> None:
    digest = PullRequestDigest(
        pull_request=PullRequest(title="Fix build", description="Body\n- item"),
        elements=[Paragraph("Body"), ListEntry("item")],
    )

    rendered = ConsoleFormatter(separator="===").format_digest(digest)

    assert rendered == "Fix build\n\n    Body\n\n- item\n==="
