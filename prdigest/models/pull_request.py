"""Pull request models for prdigest."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from prdigest.models.element import TextElement


@dataclass
class PullRequest:
    """A pull request record as returned by Azure DevOps."""

    title: str
    description: Optional[str] = None
    is_draft: bool = False
    pull_request_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PullRequest":
        """Create a PullRequest from the camelCase API record."""
        return cls(
            title=data.get("title") or "",
            description=data.get("description"),
            is_draft=bool(data.get("isDraft", False)),
            pull_request_id=data.get("pullRequestId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "pull_request_id": self.pull_request_id,
            "title": self.title,
            "description": self.description,
            "is_draft": self.is_draft,
        }


@dataclass
class PullRequestDigest:
    """A pull request together with its segmented description."""

    pull_request: PullRequest
    elements: List[TextElement] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.pull_request.title

    @property
    def has_description(self) -> bool:
        """True when the description exists and does not just repeat the title."""
        description = self.pull_request.description
        return description is not None and description != self.pull_request.title

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "pull_request": self.pull_request.to_dict(),
            "elements": [element.to_dict() for element in self.elements],
        }
