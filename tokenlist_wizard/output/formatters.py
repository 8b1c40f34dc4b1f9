"""Output formatters for token list records.

- JSON: the record exactly as it will be written to the token list
- Table: human-readable summary for the CLI
"""

import json
import logging
from abc import ABC, abstractmethod
from io import StringIO

from rich.console import Console
from rich.table import Table

from ..core.models import InterchainTokenConfig

logger = logging.getLogger(__name__)


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, record: InterchainTokenConfig) -> str:
        """Format the record as a string."""
        pass


class JSONFormatter(OutputFormatter):
    """Formats records as JSON with the on-disk keys."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, record: InterchainTokenConfig) -> str:
        return json.dumps(record.to_dict(), indent=self.indent, ensure_ascii=False)


class TableFormatter(OutputFormatter):
    """Formats records as tables for CLI output."""

    def __init__(self, width: int = 100, color: bool = True):
        """
        Initialize table formatter.

        Args:
            width: Maximum table width
            color: Emit ANSI colors
        """
        self.width = width
        self.color = color

    def format(self, record: InterchainTokenConfig) -> str:
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self.color,
            no_color=not self.color,
            width=self.width,
        )

        info = Table(title=f"{record.symbol} - {record.name}", show_header=False)
        info.add_column("Field", style="cyan")
        info.add_column("Value", style="green")
        info.add_row("Token ID", record.token_id)
        info.add_row("Token address", record.token_address)
        info.add_row("Decimals", str(record.decimals))
        info.add_row(
            "Origin chain",
            f"{record.origin_axelar_chain_id} ({record.origin_chain_id})",
        )
        info.add_row("Transfer type", record.transfer_type)
        info.add_row("Icon", record.icon_urls.svg)
        console.print(info)

        if record.remote_tokens:
            remotes = Table(title="Remote Tokens")
            remotes.add_column("Chain", style="cyan")
            remotes.add_column("Chain ID", justify="right")
            remotes.add_column("Address", style="green")
            for remote in record.remote_tokens:
                remotes.add_row(remote.axelar_chain_id, remote.chain_id, remote.token_address)
            console.print(remotes)
        else:
            console.print("[dim]No remote deployments[/]")

        return output.getvalue()
