"""Configuration for prdigest."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any
import os

import yaml

from prdigest.exceptions import PrDigestConfigError


@dataclass
class PrDigestConfig:
    """Configuration for a prdigest run."""

    # Azure DevOps connection
    organization: Optional[str] = None
    """Name of the Azure DevOps organization."""

    project: Optional[str] = None
    """Name of the team project."""

    username: Optional[str] = None
    """Username used for basic authentication."""

    pat_file: Optional[str] = None
    """Path to the file holding the personal access token."""

    api_version: str = "7.0"
    """Azure DevOps REST API version."""

    base_url: str = "https://dev.azure.com"
    """Azure DevOps service root."""

    # Output
    wrap_width: int = 72
    """Display width paragraphs are wrapped to."""

    indent: str = "    "
    """Prefix for every line of a wrapped paragraph."""

    include_drafts: bool = False
    """Also list draft pull requests."""

    separator: str = "------------"
    """Line printed after each pull request that has a description."""

    # Behavior
    retry_attempts: int = 3
    """Number of attempts for the pull request request."""

    retry_delay: float = 1.0
    """Initial delay between retries in seconds."""

    timeout: float = 30.0
    """HTTP timeout in seconds."""

    verbose: bool = False
    """Enable verbose logging output."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        if self.wrap_width < 1:
            raise PrDigestConfigError(
                f"wrap_width must be at least 1, got {self.wrap_width}",
                "wrap_width",
            )

        if len(self.indent) >= self.wrap_width:
            raise PrDigestConfigError(
                f"indent ({len(self.indent)} chars) must be shorter than wrap_width ({self.wrap_width})",
                "indent",
            )

        if self.retry_attempts < 1:
            raise PrDigestConfigError(
                f"retry_attempts must be at least 1, got {self.retry_attempts}",
                "retry_attempts",
            )

        if self.retry_delay < 0:
            raise PrDigestConfigError(
                f"retry_delay must be non-negative, got {self.retry_delay}",
                "retry_delay",
            )

        if self.timeout <= 0:
            raise PrDigestConfigError(
                f"timeout must be positive, got {self.timeout}",
                "timeout",
            )

        if not self.api_version:
            raise PrDigestConfigError("api_version must not be empty", "api_version")

    def require_connection(self) -> None:
        """Ensure all settings needed to reach Azure DevOps are present.

        Raises:
            PrDigestConfigError: If a connection setting is missing
        """
        for key in ("organization", "project", "username", "pat_file"):
            if not getattr(self, key):
                raise PrDigestConfigError(f"Missing required setting: {key}", key)

    def merged(self, **overrides: Any) -> "PrDigestConfig":
        """Return a copy with the non-None overrides applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return PrDigestConfig(**data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrDigestConfig":
        """Create configuration from dictionary."""
        # Handle nested structure from YAML
        flat_data = {}

        if "azure_devops" in data:
            azure = data["azure_devops"] or {}
            for key in (
                "organization",
                "project",
                "username",
                "pat_file",
                "api_version",
                "base_url",
            ):
                if key in azure:
                    flat_data[key] = azure[key]

        if "output" in data:
            output = data["output"] or {}
            for key in ("wrap_width", "indent", "include_drafts", "separator"):
                if key in output:
                    flat_data[key] = output[key]

        if "behavior" in data:
            behavior = data["behavior"] or {}
            for key in ("retry_attempts", "retry_delay", "timeout", "verbose"):
                if key in behavior:
                    flat_data[key] = behavior[key]

        # Also accept flat keys
        for key in cls().to_dict():
            if key in data and key not in flat_data:
                flat_data[key] = data[key]

        if "api_version" in flat_data:
            flat_data["api_version"] = str(flat_data["api_version"])

        return cls(**flat_data)

    @classmethod
    def from_yaml(cls, path: str) -> "PrDigestConfig":
        """Load configuration from YAML file."""
        file_path = Path(path)
        if not file_path.exists():
            raise PrDigestConfigError(f"Config file not found: {path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PrDigestConfigError(f"Invalid YAML in config file: {e}")

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise PrDigestConfigError(
                f"Config file must contain a mapping, got {type(data).__name__}"
            )

        # Handle environment variable substitution
        data = cls._substitute_env_vars(data)

        return cls.from_dict(data)

    @classmethod
    def _substitute_env_vars(cls, data: Any) -> Any:
        """Recursively substitute environment variables in config."""
        if isinstance(data, dict):
            return {k: cls._substitute_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
            env_var = data[2:-1]
            return os.environ.get(env_var, "")
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "organization": self.organization,
            "project": self.project,
            "username": self.username,
            "pat_file": self.pat_file,
            "api_version": self.api_version,
            "base_url": self.base_url,
            "wrap_width": self.wrap_width,
            "indent": self.indent,
            "include_drafts": self.include_drafts,
            "separator": self.separator,
            "retry_attempts": self.retry_attempts,
            "retry_delay": self.retry_delay,
            "timeout": self.timeout,
            "verbose": self.verbose,
        }
