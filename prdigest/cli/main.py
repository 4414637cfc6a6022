"""CLI entry point for prdigest."""

import sys
import logging
from typing import Optional

import click
from rich.console import Console

from prdigest import PrDigest, PrDigestConfig, __version__
from prdigest.exceptions import PrDigestError

console = Console()


def setup_logging(verbose: bool) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command()
@click.argument("pat_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("username")
@click.argument("organization")
@click.argument("project")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration YAML file",
)
@click.option(
    "-w",
    "--width",
    type=int,
    default=None,
    help="Display width descriptions are wrapped to",
)
@click.option(
    "--include-drafts/--exclude-drafts",
    default=None,
    help="List draft pull requests too (excluded by default)",
)
@click.option(
    "--api-version",
    default=None,
    help="Azure DevOps REST API version",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__)
def cli(
    pat_file: str,
    username: str,
    organization: str,
    project: str,
    config: Optional[str],
    width: Optional[int],
    include_drafts: Optional[bool],
    api_version: Optional[str],
    verbose: bool,
) -> None:
    """prdigest: list pull requests with readable descriptions.

    PAT_FILE: Path to the file containing the PAT for authenticating with Azure DevOps

    USERNAME: Username on Azure DevOps

    ORGANIZATION: Name of the Azure DevOps organization

    PROJECT: Name of the team project in Azure DevOps
    """
    try:
        base_config = PrDigestConfig.from_yaml(config) if config else PrDigestConfig()
        digest_config = base_config.merged(
            pat_file=pat_file,
            username=username,
            organization=organization,
            project=project,
            wrap_width=width,
            include_drafts=include_drafts,
            api_version=api_version,
            verbose=verbose or None,
        )
    except PrDigestError as e:
        setup_logging(verbose)
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    verbose = digest_config.verbose
    setup_logging(verbose)

    try:
        with PrDigest(config=digest_config) as digest:
            result = digest.run()
            output = digest.render(result)
    except PrDigestError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if output:
        # Descriptions are user text; never interpret them as rich markup.
        console.print(
            output, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    if verbose:
        console.print(
            f"[dim]{result.count} pull requests, "
            f"{result.skipped_drafts} drafts skipped[/dim]"
        )

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
