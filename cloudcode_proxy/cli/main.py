"""Main CLI entry point for cloudcode-proxy."""

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from cloudcode_proxy.core.constants import CloudCode
from cloudcode_proxy.core.exceptions import ConversionError, InvalidRequestError

app = typer.Typer(
    name="cloudcode-proxy",
    help="Cloud Code Proxy CLI - inspect envelopes and headers built from Claude requests",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def mask_token(token: str) -> str:
    """Keep only the edges of a token for display."""
    if len(token) <= 12:
        return "***"
    return f"{token[:4]}...{token[-4:]}"


def _load_request(console: Console, request_file: Path) -> dict[str, Any]:
    try:
        data = json.loads(request_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]❌ Cannot read request file {request_file}: {e}[/red]")
        raise typer.Exit(1) from e
    if not isinstance(data, dict):
        console.print("[red]❌ Request file must contain a JSON object[/red]")
        raise typer.Exit(1)
    return data


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Cloud Code Proxy CLI."""
    from cloudcode_proxy.core.config import validate_all
    from cloudcode_proxy.core.logging import configure_root_logging

    errors = validate_all()
    if errors:
        console = Console()
        for error in errors:
            console.print(f"[red]❌ Configuration error: {error}[/red]")
        raise typer.Exit(1)

    configure_root_logging("DEBUG" if verbose else None)


@app.command()
def envelope(
    request_file: Path = typer.Argument(..., help="JSON file holding a Claude Messages API request"),
    project: str = typer.Option(None, "--project", "-p", help="Cloud Code project id"),
    raw: bool = typer.Option(False, "--raw", help="Print compact JSON without formatting"),
) -> None:
    """Print the Cloud Code envelope built from a Claude request."""
    from cloudcode_proxy.cloudcode import CloudCodeRequestBuilder

    console = Console()
    data = _load_request(console, request_file)

    try:
        result = CloudCodeRequestBuilder().build_envelope(data, project)
    except ConversionError as e:
        console.print(f"[red]❌ Conversion failed: {e}[/red]")
        raise typer.Exit(1) from e
    except InvalidRequestError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from e

    payload = json.dumps(result.to_dict(), ensure_ascii=False)
    if raw:
        typer.echo(payload)
    else:
        console.print_json(payload)


@app.command()
def headers(
    model: str = typer.Option(..., "--model", "-m", help="Model identifier"),
    accept: str = typer.Option(CloudCode.DEFAULT_ACCEPT, "--accept", help="Accept header value"),
    token: str = typer.Option("<token>", "--token", help="Access token (masked in output)"),
) -> None:
    """Show the headers sent for a model."""
    from cloudcode_proxy.cloudcode import CloudCodeRequestBuilder
    from cloudcode_proxy.core.model_family import get_model_family, is_thinking_model

    console = Console()
    header_set = CloudCodeRequestBuilder().build_headers(mask_token(token), model, accept)

    table = Table(title=f"Headers for {model}")
    table.add_column("Header", style="cyan")
    table.add_column("Value", style="green", overflow="fold")
    for name, value in header_set.items():
        table.add_row(name, value)

    console.print(table)
    console.print(
        f"Family: [bold]{get_model_family(model).value}[/bold]  "
        f"Thinking: [bold]{is_thinking_model(model)}[/bold]"
    )


@app.command("session-id")
def session_id(
    request_file: Path = typer.Argument(..., help="JSON file holding a Claude Messages API request"),
) -> None:
    """Print the session id derived from a Claude request."""
    from cloudcode_proxy.session import derive_session_id

    console = Console()
    data = _load_request(console, request_file)
    try:
        typer.echo(derive_session_id(data))
    except ConversionError as e:
        console.print(f"[red]❌ Conversion failed: {e}[/red]")
        raise typer.Exit(1) from e


@app.command()
def version() -> None:
    """Show version information."""
    from cloudcode_proxy import __version__

    console = Console()
    console.print(f"[bold cyan]cloudcode-proxy[/bold cyan] version [green]{__version__}[/green]")


if __name__ == "__main__":
    app()
