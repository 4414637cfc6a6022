"""Custom exceptions for prdigest."""

from typing import Optional


class PrDigestError(Exception):
    """Base exception for all prdigest errors."""

    pass


class PrDigestConfigError(PrDigestError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class PrDigestCredentialsError(PrDigestError):
    """Raised when the personal access token cannot be loaded."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(message)
        self.file_path = file_path


class PrDigestAPIError(PrDigestError):
    """Raised when the Azure DevOps API call fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    @property
    def is_transient(self) -> bool:
        """Check if the failure is worth retrying."""
        if self.status_code is None:
            return False
        return self.status_code == 429 or self.status_code >= 500
