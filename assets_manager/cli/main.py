"""CLI entry point for the Assets Manager.

Usage:
    assets-manager add-token c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7
    assets-manager add-tokenlist c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7
    assets-manager add-tokenlist-extended c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7
    assets-manager upload-doc c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7 whitepaper.pdf
    assets-manager show-tokenlist ethereum --extended
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.chains import get_chain_by_handle
from ..core.config import ManagerConfig
from ..core.exceptions import AssetsManagerError
from ..core.types import TokenListKind
from ..manager.asset_info import create_asset_info_template
from ..manager.documents import upload_document
from ..manager.token_list import TokenListManager
from ..storage.paths import RegistryPaths

# Initialize app
app = typer.Typer(
    name="assets-manager",
    help="Manage asset info records, token lists and documents of the assets registry",
    add_completion=False,
)

console = Console()


@dataclass
class CLIContext:
    """Options shared by all commands."""

    paths: RegistryPaths
    config_path: Optional[Path]

    def load_config(self) -> ManagerConfig:
        return ManagerConfig.load(self.config_path, root=self.paths.root)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )


def fail(error: AssetsManagerError) -> NoReturn:
    """Report a domain error and exit with status 1."""
    console.print(f"[red]Error: {escape(str(error))}[/]")
    raise typer.Exit(1)


@app.callback()
def main_options(
    ctx: typer.Context,
    root: Path = typer.Option(
        Path("."),
        "--root", "-r",
        help="Root directory of the assets registry",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to YAML config file (default: <root>/.github/assets.config.yaml)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Manage asset info records, token lists and documents."""
    setup_logging(verbose)
    ctx.obj = CLIContext(paths=RegistryPaths(root), config_path=config)


@app.command("add-token")
def add_token(
    ctx: typer.Context,
    asset_id: str = typer.Argument(..., help="Asset id, e.g. c60_t0x..."),
    keep_existing: bool = typer.Option(
        False,
        "--keep-existing",
        help="Fail instead of overwriting an existing info.json",
    ),
) -> None:
    """
    Create an info.json template for a new asset.

    Examples:
        assets-manager add-token c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7
    """
    try:
        path = create_asset_info_template(ctx.obj.paths, asset_id, overwrite=not keep_existing)
    except AssetsManagerError as e:
        fail(e)

    console.print(f"[green]Created {path}[/]")
    console.print("Fill in the empty fields before adding the asset to a token list.")


def _add_to_list(ctx: typer.Context, asset_id: str, kind: TokenListKind) -> None:
    try:
        manager = TokenListManager(ctx.obj.paths, ctx.obj.load_config())
        token_list = manager.add_asset(asset_id, kind)
    except AssetsManagerError as e:
        fail(e)

    console.print(
        f"[green]Added {asset_id} to {kind.value} list "
        f"({len(token_list.tokens)} tokens, version {token_list.version.major})[/]"
    )


@app.command("add-tokenlist")
def add_tokenlist(
    ctx: typer.Context,
    asset_id: str = typer.Argument(..., help="Asset id, e.g. c60_t0x..."),
) -> None:
    """Add an asset to its chain's default token list."""
    _add_to_list(ctx, asset_id, TokenListKind.DEFAULT)


@app.command("add-tokenlist-extended")
def add_tokenlist_extended(
    ctx: typer.Context,
    asset_id: str = typer.Argument(..., help="Asset id, e.g. c60_t0x..."),
) -> None:
    """Add an asset to its chain's extended token list."""
    _add_to_list(ctx, asset_id, TokenListKind.EXTENDED)


@app.command("upload-doc")
def upload_doc(
    ctx: typer.Context,
    asset_id: str = typer.Argument(..., help="Asset id, e.g. c60_t0x..."),
    document: Path = typer.Argument(..., help="Document to attach (.pdf, .doc, .docx, .txt, .md)"),
) -> None:
    """
    Copy a supporting document into an existing asset directory.

    The asset must already exist (see add-token) and a document with the
    same file name must not.
    """
    try:
        dest = upload_document(ctx.obj.paths, asset_id, document)
    except AssetsManagerError as e:
        fail(e)

    console.print(f"[green]Successfully uploaded document to: {dest}[/]")


@app.command("show-tokenlist")
def show_tokenlist(
    ctx: typer.Context,
    chain: str = typer.Argument(..., help="Chain handle, e.g. ethereum, smartchain"),
    extended: bool = typer.Option(
        False,
        "--extended", "-e",
        help="Show the extended list instead of the default one",
    ),
) -> None:
    """Print a chain's token list as a table."""
    kind = TokenListKind.EXTENDED if extended else TokenListKind.DEFAULT

    try:
        manager = TokenListManager(ctx.obj.paths, ctx.obj.load_config())
        token_list = manager.load(get_chain_by_handle(chain), kind)
    except AssetsManagerError as e:
        fail(e)

    table = Table(
        title=f"{token_list.name} ({kind.value}, v{token_list.version.major})",
        caption=f"Updated {token_list.timestamp}",
    )
    table.add_column("Symbol", style="bold")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Decimals", justify="right")
    table.add_column("Asset", style="dim")

    for entry in token_list.tokens:
        table.add_row(
            entry.symbol or "",
            entry.name or "",
            entry.type or "",
            str(entry.decimals or 0),
            entry.asset,
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Assets Manager v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
