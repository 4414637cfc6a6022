"""
prdigest: Pull request description digests

List a project's pull requests with their descriptions segmented into
paragraphs and list entries.
"""

from prdigest.config import PrDigestConfig
from prdigest.prdigest import PrDigest
from prdigest.models import (
    TextElement,
    Paragraph,
    ListEntry,
    ElementType,
    PullRequest,
    PullRequestDigest,
    DigestResult,
)
from prdigest.segmenters import DescriptionSegmenter, normalize_newlines, segment
from prdigest.exceptions import (
    PrDigestError,
    PrDigestConfigError,
    PrDigestCredentialsError,
    PrDigestAPIError,
)

__version__ = "0.1.0"
__all__ = [
    # Main classes
    "PrDigest",
    "PrDigestConfig",
    # Segmentation
    "segment",
    "normalize_newlines",
    "DescriptionSegmenter",
    # Models
    "TextElement",
    "Paragraph",
    "ListEntry",
    "PullRequest",
    "PullRequestDigest",
    "DigestResult",
    # Enums
    "ElementType",
    # Exceptions
    "PrDigestError",
    "PrDigestConfigError",
    "PrDigestCredentialsError",
    "PrDigestAPIError",
]
