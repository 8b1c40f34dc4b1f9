"""CLI entry point for the interchain token listing wizard.

Usage:
    tokenlist-wizard list-squid-token
    tokenlist-wizard list-squid-token --url https://interchain.axelar.dev/avalanche/0x1234...
    tokenlist-wizard list-squid-token --registry-root ../public-chain-configs --verbose
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..core.config import WizardConfig
from ..core.exceptions import (
    DataSourceError,
    DuplicateTokenError,
    InvalidTokenUrlError,
    TokenListingError,
    ValidationError,
)
from ..orchestrator import ListingDraft, TokenListingWizard
from ..output.formatters import JSONFormatter, TableFormatter

# Initialize app
app = typer.Typer(
    name="tokenlist-wizard",
    help="Interchain token listing wizard",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )


def build_wizard(config: WizardConfig) -> TokenListingWizard:
    """Create the wizard for a loaded configuration."""
    return TokenListingWizard(config)


def goodbye() -> None:
    console.print("\n[bold green]Goodbye![/]\n")
    raise typer.Exit(0)


@app.command("list-squid-token")
def list_squid_token(
    url: Optional[str] = typer.Option(
        None,
        "--url", "-u",
        help="Token details URL (prompted for when omitted)",
    ),
    registry_root: Optional[Path] = typer.Option(
        None,
        "--registry-root", "-r",
        help="Checkout of the chain configs repository (default: current directory)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML file with wizard settings",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Path to a .env file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Add an interchain token to the squid token list.

    The token must already be registered via the ITS portal. The token list
    and a placeholder icon are written in the registry root, and a branch
    with the change can be pushed for a pull request.
    """
    setup_logging(verbose)

    try:
        config = WizardConfig.load(env_file=env_file, config_file=config_file)
    except TokenListingError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    if registry_root is not None:
        config.registry_root = registry_root

    wizard = build_wizard(config)

    console.print("\n[blue]Generating token listing config...[/]\n")

    if not typer.confirm("Did you register your token via ITS portal?", default=False):
        console.print("\n[red]Please register your token via ITS portal before continuing[/]\n")
        raise typer.Exit(1)

    if url is None:
        url = typer.prompt(
            "What is the URL of your token details? "
            "(e.g: https://interchain.axelar.dev/avalanche/0x1234)"
        )

    try:
        source = wizard.parse_url(url)
        environment = source.environment.value

        with console.status(f"Searching {environment} token..."):
            search_result = wizard.search(source)

        with console.status(f"Fetching {environment} token details..."):
            details = wizard.fetch_details(source, search_result)

        record = wizard.build_record(details)

    except InvalidTokenUrlError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)
    except DataSourceError as e:
        console.print(f"[red]Could not fetch token from the interchain API: {escape(str(e))}[/]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]The interchain API returned invalid token data: {escape(str(e))}[/]")
        raise typer.Exit(1)
    finally:
        for entry in wizard.get_audit_trail():
            logger.debug(
                f"{entry.source.value} {entry.action} {entry.endpoint} "
                f"success={entry.success} {entry.duration_ms}ms"
            )

    draft = ListingDraft(
        source=source,
        search_result=search_result,
        details=details,
        record=record,
    )

    console.print("Here is your interchain token config:\n")
    typer.echo(JSONFormatter().format(record))
    if verbose:
        typer.echo(TableFormatter(color=console.is_terminal).format(record))

    relative_path = draft.token_list_relative_path.as_posix()
    if not typer.confirm(f"Would you like to save this config to \n './{relative_path}'?"):
        goodbye()

    try:
        saved = wizard.save(draft)
    except DuplicateTokenError:
        console.print(
            "\n[red]This token already exists in the tokenlist. "
            "Please check the tokenlist and try again.[/]\n"
        )
        raise typer.Exit(1)
    except TokenListingError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    console.print("\n[bold green]Config saved![/]\n")

    if not typer.confirm("Would you like to create a PR?", default=False):
        goodbye()

    try:
        with console.status("Creating PR..."):
            branch = wizard.publish(saved)
    except TokenListingError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    console.print(f"[green]Pushed branch {branch}[/]")


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    console.print(f"Token Listing Wizard v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
