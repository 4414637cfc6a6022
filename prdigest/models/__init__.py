"""Data models for prdigest."""

from prdigest.models.enums import ElementType
from prdigest.models.element import TextElement, Paragraph, ListEntry
from prdigest.models.pull_request import PullRequest, PullRequestDigest
from prdigest.models.result import DigestResult

__all__ = [
    "ElementType",
    "TextElement",
    "Paragraph",
    "ListEntry",
    "PullRequest",
    "PullRequestDigest",
    "DigestResult",
]
