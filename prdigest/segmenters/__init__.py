"""Text segmenters for prdigest."""

from prdigest.segmenters.description import (
    DescriptionSegmenter,
    normalize_newlines,
    segment,
)

__all__ = [
    "DescriptionSegmenter",
    "normalize_newlines",
    "segment",
]
