"""Result models for prdigest."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from prdigest.models.pull_request import PullRequestDigest


@dataclass
class DigestResult:
    """Result of a digest run."""

    digests: List[PullRequestDigest] = field(default_factory=list)
    skipped_drafts: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Get the number of digested pull requests."""
        return len(self.digests)

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "count": self.count,
            "skipped_drafts": self.skipped_drafts,
            "digests": [digest.to_dict() for digest in self.digests],
            "warnings": self.warnings,
        }
