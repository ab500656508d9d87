"""
CLI Main - Typer-based command-line interface.

Usage:
    chatshare serve
    chatshare init
    chatshare token alice
    chatshare verify <token>
    chatshare quota alice
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="chatshare",
    help="ChatShare - GitHub login and chat sharing service",
    add_completion=False,
)
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    from chatshare.config import get_settings

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print("\n[green]Starting ChatShare API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "chatshare.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command()
def init(
    db_path: Path | None = typer.Option(None, "--db", "-d", help="Database path"),
) -> None:
    """Create the object store database."""
    asyncio.run(_init_async(db_path))


async def _init_async(db_path: Path | None) -> None:
    """Async initialization."""
    from chatshare.adapters.sqlite import SQLiteObjectStore
    from chatshare.config import get_settings

    path = db_path or get_settings().db_path
    store = SQLiteObjectStore(path)
    try:
        await store.initialize()
    finally:
        await store.close()

    console.print("\n[green]Initialization complete![/green]")
    console.print(f"[dim]Object store: {path}[/dim]")


@app.command()
def token(
    username: str = typer.Argument(..., help="GitHub username to issue tokens for"),
    name: str | None = typer.Option(None, "--name", "-n", help="Display name"),
) -> None:
    """Mint an access token and an identity token for local testing."""
    from chatshare.config import get_settings
    from chatshare.domains.tokens import create_token

    settings = get_settings()
    access = create_token(
        username, {"role": settings.api_role}, settings.jwt_secret, ttl=settings.token_ttl
    )
    identity = create_token(
        username,
        {"username": username, "name": name, "avatar_url": None},
        settings.jwt_secret,
        ttl=settings.token_ttl,
    )

    console.print(Panel(access, title="access_token", expand=False))
    console.print(Panel(identity, title="id_token", expand=False))
    console.print(
        f"\n[dim]Cookie: access_token={access}; id_token={identity}[/dim]",
        soft_wrap=True,
    )


@app.command()
def verify(
    value: str = typer.Argument(..., help="Encoded token"),
) -> None:
    """Verify a token with the configured secret and print its claims."""
    from chatshare.config import get_settings
    from chatshare.config.errors import TokenError
    from chatshare.domains.tokens import verify_token

    settings = get_settings()
    try:
        claims = verify_token(value, settings.jwt_secret)
    except TokenError as e:
        console.print(f"[red]Invalid:[/red] {e.message}")
        raise typer.Exit(1)

    table = Table(title=f"Token for {claims.subject}")
    table.add_column("Claim", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("subject", claims.subject)
    table.add_row("issued_at", claims.issued_at.isoformat())
    table.add_row("expires_at", claims.expires_at.isoformat())
    for key, claim in sorted(claims.claims.items()):
        table.add_row(key, str(claim))

    console.print(table)


@app.command()
def quota(
    owner: str = typer.Argument(..., help="Username to inspect"),
) -> None:
    """Show an owner's share counts against the configured limits."""
    asyncio.run(_quota_async(owner))


async def _quota_async(owner: str) -> None:
    """Async quota lookup."""
    from chatshare.adapters.sqlite import SQLiteObjectStore
    from chatshare.config import get_settings
    from chatshare.domains.sharing import compute_quota

    settings = get_settings()
    store = SQLiteObjectStore(settings.db_path)
    try:
        await store.initialize()
        listing = await store.list(f"{owner}/")
    finally:
        await store.close()

    state = compute_quota(listing, datetime.now(timezone.utc), settings.share_window)

    table = Table(title=f"Share quota for {owner}")
    table.add_column("Window", style="cyan")
    table.add_column("Used", style="green")
    table.add_column("Limit")

    table.add_row("total", str(state.total), str(settings.share_total_limit))
    table.add_row(
        f"last {settings.share_window_hours}h",
        str(state.recent),
        str(settings.share_daily_limit),
    )
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from chatshare import __version__

    console.print(f"ChatShare v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
