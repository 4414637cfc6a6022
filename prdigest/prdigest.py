"""Main PrDigest class - entry point for the library."""

import logging
from typing import Optional

import httpx

from prdigest.config import PrDigestConfig
from prdigest.models import DigestResult, PullRequest, PullRequestDigest
from prdigest.client.azure_devops import (
    AzureDevOpsClient,
    is_transient_error,
    read_personal_access_token,
)
from prdigest.output.base import OutputFormatter
from prdigest.output.console_formatter import ConsoleFormatter
from prdigest.segmenters.description import DescriptionSegmenter, normalize_newlines
from prdigest.utils.retry import RetryHandler
from prdigest.exceptions import PrDigestAPIError

logger = logging.getLogger(__name__)


class PrDigest:
    """Lists a project's pull requests with segmented descriptions."""

    def __init__(
        self,
        config: Optional[PrDigestConfig] = None,
        client: Optional[AzureDevOpsClient] = None,
        formatter: Optional[OutputFormatter] = None,
        segmenter: Optional[DescriptionSegmenter] = None,
    ) -> None:
        """Initialize PrDigest.

        Args:
            config: Configuration object
            client: Custom Azure DevOps client (built from config if omitted)
            formatter: Custom output formatter
            segmenter: Custom description segmenter

        Raises:
            PrDigestConfigError: If no client is given and connection settings are missing
            PrDigestCredentialsError: If the PAT file cannot be read
        """
        self._config = config or PrDigestConfig()

        if client is None:
            client = self._build_client(self._config)
        self._client = client

        self._formatter = formatter or ConsoleFormatter(
            width=self._config.wrap_width,
            indent=self._config.indent,
            separator=self._config.separator,
        )
        self._segmenter = segmenter or DescriptionSegmenter()

    @staticmethod
    def _build_client(config: PrDigestConfig) -> AzureDevOpsClient:
        config.require_connection()
        token = read_personal_access_token(config.pat_file)  # type: ignore[arg-type]

        retry_handler = RetryHandler(
            max_attempts=config.retry_attempts,
            base_delay=config.retry_delay,
            exceptions=(httpx.TransportError, PrDigestAPIError),
            should_retry=is_transient_error,
        )

        return AzureDevOpsClient(
            organization=config.organization,  # type: ignore[arg-type]
            project=config.project,  # type: ignore[arg-type]
            username=config.username,  # type: ignore[arg-type]
            personal_access_token=token,
            api_version=config.api_version,
            base_url=config.base_url,
            timeout=config.timeout,
            retry_handler=retry_handler,
        )

    @property
    def config(self) -> PrDigestConfig:
        return self._config

    def digest_pull_request(self, pull_request: PullRequest) -> PullRequestDigest:
        """Segment one pull request's description.

        Args:
            pull_request: Pull request to digest

        Returns:
            Digest with no elements when the description is missing or repeats the title
        """
        digest = PullRequestDigest(pull_request=pull_request)
        if digest.has_description:
            description = normalize_newlines(pull_request.description or "")
            digest.elements = self._segmenter.segment(description)
        return digest

    def run(self) -> DigestResult:
        """Fetch pull requests and digest every one that is not a draft.

        Returns:
            DigestResult in the order the API lists the pull requests

        Raises:
            PrDigestAPIError: If fetching fails
        """
        result = DigestResult()

        pull_requests = self._client.list_pull_requests()
        for pull_request in pull_requests:
            if pull_request.is_draft and not self._config.include_drafts:
                result.skipped_drafts += 1
                continue
            result.digests.append(self.digest_pull_request(pull_request))

        if not pull_requests:
            result.add_warning("No pull requests found")

        logger.info(
            f"Digested {result.count} pull requests "
            f"({result.skipped_drafts} drafts skipped)"
        )
        return result

    def render(self, result: DigestResult) -> str:
        """Render every digest of a run as text."""
        return "\n".join(self._formatter.format_digest(digest) for digest in result.digests)

    def close(self) -> None:
        """Release the HTTP client."""
        self._client.close()

    def __enter__(self) -> "PrDigest":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
