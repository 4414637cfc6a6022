"""Azure DevOps pull request client."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from prdigest.models import PullRequest
from prdigest.utils.retry import RetryHandler
from prdigest.exceptions import PrDigestAPIError, PrDigestCredentialsError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://dev.azure.com"


def read_personal_access_token(path: str | Path) -> str:
    """Read a personal access token from a file.

    Args:
        path: File holding the token

    Returns:
        The token with surrounding whitespace removed

    Raises:
        PrDigestCredentialsError: If the file cannot be read or is empty
    """
    file_path = Path(path)
    try:
        token = file_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise PrDigestCredentialsError(
            f"Failed to read PAT from {file_path}: {e}",
            file_path=str(file_path),
        )

    if not token:
        raise PrDigestCredentialsError(
            f"PAT file is empty: {file_path}",
            file_path=str(file_path),
        )

    return token


def is_transient_error(error: Exception) -> bool:
    """Check if a failed request is worth retrying."""
    if isinstance(error, PrDigestAPIError):
        return error.is_transient
    return isinstance(error, httpx.TransportError)


class AzureDevOpsClient:
    """Reads pull requests from the Azure DevOps REST API."""

    def __init__(
        self,
        organization: str,
        project: str,
        username: str,
        personal_access_token: str,
        api_version: str = "7.0",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_handler: Optional[RetryHandler] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the client.

        Args:
            organization: Azure DevOps organization name
            project: Team project name
            username: Username for basic authentication
            personal_access_token: PAT used as the basic auth password
            api_version: REST API version sent as ``api-version``
            base_url: Service root URL
            timeout: Request timeout in seconds
            retry_handler: Retry policy for transient failures
            http_client: Preconfigured httpx client (not closed by this client)
        """
        self._organization = organization
        self._project = project
        self._api_version = api_version
        self._base_url = base_url.rstrip("/")
        self._auth = httpx.BasicAuth(username, personal_access_token)
        self._retry_handler = retry_handler or RetryHandler(
            exceptions=(httpx.TransportError, PrDigestAPIError),
            should_retry=is_transient_error,
        )

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    @property
    def pull_requests_url(self) -> str:
        """Endpoint listing the project's pull requests."""
        return "/".join(
            [
                self._base_url,
                quote(self._organization, safe=""),
                quote(self._project, safe=""),
                "_apis/git/pullrequests",
            ]
        )

    def list_pull_requests(self) -> List[PullRequest]:
        """Fetch the project's pull requests.

        Returns:
            Pull requests in the order the API returns them

        Raises:
            PrDigestAPIError: If the request fails or the body is malformed
        """
        payload = self._retry_handler.execute(self._get_json, self.pull_requests_url)

        records = payload.get("value") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            raise PrDigestAPIError(
                "Response does not contain a 'value' list",
                url=self.pull_requests_url,
            )

        pull_requests = [
            PullRequest.from_dict(record) for record in records if isinstance(record, dict)
        ]
        logger.debug(f"Fetched {len(pull_requests)} pull requests")
        return pull_requests

    def _get_json(self, url: str) -> Any:
        """Issue one authenticated GET and decode the JSON body."""
        logger.debug(f"GET {url}")
        response = self._client.get(
            url,
            params={"api-version": self._api_version},
            auth=self._auth,
            headers={"Accept": "application/json"},
        )

        # A rejected PAT gets a 203 with an HTML sign-in page.
        if response.status_code in (401, 203):
            raise PrDigestAPIError(
                "Authentication failed; check the username and personal access token",
                status_code=response.status_code,
                url=url,
            )

        if response.is_error:
            raise PrDigestAPIError(
                f"Azure DevOps returned HTTP {response.status_code}: {_excerpt(response)}",
                status_code=response.status_code,
                url=url,
            )

        try:
            return response.json()
        except ValueError as e:
            raise PrDigestAPIError(
                f"Response is not valid JSON: {e}",
                status_code=response.status_code,
                url=url,
            )

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "AzureDevOpsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _excerpt(response: httpx.Response, limit: int = 200) -> str:
    text = response.text.strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text
