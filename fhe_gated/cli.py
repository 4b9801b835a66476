"""CLI for FHE Gated communities.

Commands:
    list      List communities (newest first), with search and "mine" filters
    create    Create an NFT-gated community
    verify    Verify access to a community with the connected wallet

The store is a local SQLite file (--store / FHE_GATED_STORE_PATH). Wallet
connection happens elsewhere; the selected account is passed with
--account / FHE_GATED_ACCOUNT. Settings may also come from a .env file.
"""

import asyncio
import json
import sys
from collections.abc import Coroutine
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Optional, TypeVar

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from fhe_gated import __version__
from fhe_gated.bootstrap.community import (
    get_access_verifier,
    get_community_registry,
    get_status_tracker,
    reset_community_services,
    set_opaque_store,
    set_session_provider,
)
from fhe_gated.bootstrap.logging import configure_structlog
from fhe_gated.domain.models.community import CommunityDraft, CommunityRecord
from fhe_gated.domain.models.transaction_status import (
    TransactionState,
    TransactionStatus,
)
from fhe_gated.domain.services.community_filter import (
    CommunityTab,
    filter_communities,
    summarize,
)
from fhe_gated.infrastructure.adapters.sqlite_opaque_store import SQLiteOpaqueStore
from fhe_gated.infrastructure.adapters.static_session import StaticSessionProvider
from fhe_gated.infrastructure.observability import correlation_scope

DEFAULT_STORE_PATH = Path("fhe_gated.db")

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Output format options."""

    text = "text"
    json = "json"


app = typer.Typer(
    name="fhe-gated",
    help="Private NFT-gated communities with FHE-protected access policies",
    add_completion=False,
)
console = Console()

_STATUS_STYLES = {
    TransactionState.PENDING: "[dim]...[/dim]",
    TransactionState.SUCCESS: "[green]✓[/green]",
    TransactionState.ERROR: "[red]✕[/red]",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"fhe-gated version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    environment: str = typer.Option(
        "development",
        "--env",
        envvar="FHE_GATED_ENV",
        help="Logging mode: production (JSON) or development (console)",
    ),
) -> None:
    """FHE Gated communities."""
    load_dotenv()
    configure_structlog(environment, log_file=sys.stderr)


def _wire(store: Path, account: Optional[str]) -> None:
    reset_community_services()
    set_opaque_store(SQLiteOpaqueStore(store))
    set_session_provider(StaticSessionProvider(account))


def _run(operation: Coroutine[Any, Any, T]) -> T:
    with correlation_scope():
        return asyncio.run(operation)


def _print_status(status: TransactionStatus) -> None:
    if status.state is TransactionState.IDLE:
        return
    console.print(f"{_STATUS_STYLES[status.state]} {status.message}")


def _record_to_dict(record: CommunityRecord) -> dict:
    return {
        "id": record.id,
        "name": record.name,
        "description": record.description,
        "nft_contract": record.nft_contract,
        "protected_payload": record.protected_payload,
        "created_at": record.created_at,
    }


def _format_date(created_at: int) -> str:
    return datetime.fromtimestamp(created_at, tz=timezone.utc).strftime("%Y-%m-%d")


StoreOption = typer.Option(
    DEFAULT_STORE_PATH,
    "--store",
    "-s",
    envvar="FHE_GATED_STORE_PATH",
    help="SQLite file holding the community store",
)
AccountOption = typer.Option(
    None,
    "--account",
    "-a",
    envvar="FHE_GATED_ACCOUNT",
    help="Connected wallet account",
)
FormatOption = typer.Option(
    OutputFormat.text,
    "--format",
    "-o",
    help="Output format: text or json",
)


@app.command("list")
def list_communities(
    search: str = typer.Option("", "--search", "-q", help="Filter by name or description"),
    mine: bool = typer.Option(
        False, "--mine", help="Only communities gated by the connected account"
    ),
    store: Path = StoreOption,
    account: Optional[str] = AccountOption,
    output_format: OutputFormat = FormatOption,
) -> None:
    """List communities, most recent first.

    Example:
        fhe-gated list --search art
        fhe-gated list --mine --account 0xabc
    """
    _wire(store, account)
    records = _run(get_community_registry().list_all())
    tab = CommunityTab.YOURS if mine else CommunityTab.ALL
    shown = filter_communities(records, search, tab, account or "")
    stats = summarize(records)

    if output_format == OutputFormat.json:
        output = {
            "total": stats.total,
            "communities": [_record_to_dict(record) for record in shown],
        }
        typer.echo(json.dumps(output, indent=2))
        return

    console.print(f"Total communities: {stats.total}")
    if not shown:
        console.print("No communities found", style="dim")
        return

    table = Table(title="Available Communities")
    table.add_column("ID", overflow="fold")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("NFT Contract", overflow="fold")
    table.add_column("Created")
    for record in shown:
        table.add_row(
            record.id,
            record.name,
            record.description,
            record.nft_contract,
            _format_date(record.created_at),
        )
    console.print(table)


@app.command()
def create(
    name: str = typer.Option(..., "--name", "-n", help="Community name"),
    description: str = typer.Option("", "--description", "-d", help="Description"),
    nft_contract: str = typer.Option(
        "", "--nft-contract", "-c", help="NFT contract address gating membership"
    ),
    store: Path = StoreOption,
    account: Optional[str] = AccountOption,
    output_format: OutputFormat = FormatOption,
) -> None:
    """Create an NFT-gated community.

    Example:
        fhe-gated create --name "Art DAO" --nft-contract 0xabc --account 0x123
    """
    try:
        draft = CommunityDraft(
            name=name, description=description, nft_contract=nft_contract
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}", style="bold")
        raise typer.Exit(code=1)

    _wire(store, account)
    quiet = output_format == OutputFormat.json
    if not quiet:
        get_status_tracker().subscribe(_print_status)

    record = _run(get_community_registry().create(draft))

    if record is None:
        if quiet:
            typer.echo(
                json.dumps({"created": False, "message": get_status_tracker().current.message})
            )
        raise typer.Exit(code=1)

    if quiet:
        typer.echo(json.dumps({"created": True, "community": _record_to_dict(record)}))
    else:
        console.print(f"Community ID: {record.id}")


@app.command()
def verify(
    community_id: str = typer.Argument(..., help="Community ID to verify access to"),
    store: Path = StoreOption,
    account: Optional[str] = AccountOption,
    output_format: OutputFormat = FormatOption,
) -> None:
    """Verify NFT ownership access to a community.

    Example:
        fhe-gated verify 1767225600000-k3x9q2a --account 0x123
    """
    _wire(store, account)
    quiet = output_format == OutputFormat.json
    if not quiet:
        get_status_tracker().subscribe(_print_status)

    result = _run(get_access_verifier().verify(community_id))

    if quiet:
        typer.echo(
            json.dumps(
                {
                    "community_id": result.community_id,
                    "outcome": result.outcome.value,
                    "reason": result.reason,
                }
            )
        )
    if not result.granted:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
