from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import pytest

from prdigest import PrDigest, PrDigestConfig
from prdigest.exceptions import PrDigestConfigError, PrDigestCredentialsError
from prdigest.models import ListEntry, Paragraph, PullRequest


@dataclass
class FakeClient:
    pull_requests: List[PullRequest]
    closed: bool = False
    calls: List[str] = field(default_factory=list)

    def list_pull_requests(self) -> List[PullRequest]:
        self.calls.append("list")
        return list(self.pull_requests)

    def close(self) -> None:
        self.closed = True


def _digest(pull_requests: List[PullRequest], **config) -> PrDigest:
    return PrDigest(
        config=PrDigestConfig(**config),
        client=FakeClient(pull_requests),  # type: ignore[arg-type]
    )


def test_drafts_are_skipped_by_default() -> None:
    digest = _digest(
        [
            PullRequest(title="Ready", description="Done."),
            PullRequest(title="Draft", description="Not yet.", is_draft=True),
        ]
    )

    result = digest.run()

    assert [d.title for d in result.digests] == ["Ready"]
    assert result.skipped_drafts == 1


def test_drafts_included_when_configured() -> None:
    digest = _digest(
        [PullRequest(title="Draft", description="Not yet.", is_draft=True)],
        include_drafts=True,
    )

    result = digest.run()

    assert result.count == 1
    assert result.skipped_drafts == 0


def test_descriptions_are_normalized_and_segmented() -> None:
    digest = _digest(
        [PullRequest(title="Login", description="Adds login.\r\nAlso:\r\n- form\r\n* styles")]
    )

    result = digest.run()

    assert result.digests[0].elements == [
        Paragraph("Adds login. Also:"),
        ListEntry("form"),
        ListEntry("styles"),
    ]


def test_description_repeating_title_is_not_segmented() -> None:
    digest = _digest([PullRequest(title="Bump version", description="Bump version")])

    result = digest.run()

    assert result.digests[0].elements == []
    assert result.digests[0].has_description is False


def test_empty_listing_adds_warning() -> None:
    result = _digest([]).run()

    assert result.count == 0
    assert result.warnings == ["No pull requests found"]


def test_render_uses_configured_width() -> None:
    digest = _digest(
        [
            PullRequest(title="First", description="alpha beta gamma delta\n- item"),
            PullRequest(title="Second"),
        ],
        wrap_width=16,
        indent="  ",
    )

    output = digest.render(digest.run())

    assert output == (
        "First\n"
        "\n"
        "  alpha beta\n"
        "  gamma delta\n"
        "\n"
        "- item\n"
        "------------\n"
        "Second"
    )


def test_context_manager_closes_client() -> None:
    client = FakeClient([])

    with PrDigest(config=PrDigestConfig(), client=client):  # type: ignore[arg-type]
        pass

    assert client.closed is True


def test_missing_connection_settings_raise_config_error() -> None:
    with pytest.raises(PrDigestConfigError) as excinfo:
        PrDigest(config=PrDigestConfig(organization="contoso"))

    assert excinfo.value.config_key == "project"


def test_unreadable_pat_file_raises_credentials_error(tmp_path: Path) -> None:
    config = PrDigestConfig(
        organization="contoso",
        project="web",
        username="alice",
        pat_file=str(tmp_path / "missing.txt"),
    )

    with pytest.raises(PrDigestCredentialsError):
        PrDigest(config=config)


def test_client_built_from_config(tmp_path: Path) -> None:
    pat_file = tmp_path / "pat.txt"
    pat_file.write_text("s3cret\n", encoding="utf-8")
    config = PrDigestConfig(
        organization="contoso",
        project="web",
        username="alice",
        pat_file=str(pat_file),
    )

    with PrDigest(config=config) as digest:
        assert digest._client.pull_requests_url == (
            "https://dev.azure.com/contoso/web/_apis/git/pullrequests"
        )
