"""CLI entry point for dpp-http."""

from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.markup import escape

from dpp_http import __version__
from dpp_http.archive import kind_of, looks_like_archive
from dpp_http.cli.common import (
    console,
    echo_json,
    fail,
    get_config,
    make_probe,
    print_plan,
    read_config,
)
from dpp_http.config import CONFIG_FILENAME, HttpConfig
from dpp_http.exceptions import DppHttpError
from dpp_http.log import setup_logging
from dpp_http.naming import directory_name
from dpp_http.planner.temp import TempPathProvider
from dpp_http.protocol import HttpProtocol
from dpp_http.url import normalize

app = typer.Typer(
    name="dpp-http",
    help="Detect HTTP(S) plugin sources and plan how to fetch them.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dpp-http {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr."),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Detect HTTP(S) plugin sources and plan how to fetch them."""
    setup_logging("DEBUG" if verbose else log_level)
    if ctx.invoked_subcommand == "init":
        ctx.obj = {"config": None}
        return
    ctx.obj = {"config": read_config(config_path)}


def _protocol(
    ctx: typer.Context,
    tools: list[str] | None = None,
    base_path: str | None = None,
) -> HttpProtocol:
    config = get_config(ctx)
    return HttpProtocol(
        base_path=base_path or config.resolved_base_path,
        probe=make_probe(tools),
        temp_paths=TempPathProvider(root=config.temp_dir),
    )


@app.command()
def detect(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="Plugin source URL.")],
    base_path: Annotated[
        Optional[str],
        typer.Option("--base-path", "-b", help="Override the configured base path."),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON.")] = False,
) -> None:
    """Show where a plugin URL would be installed.

    Examples:
      dpp-http detect https://github.com/Shougo/ddu.vim/archive/refs/heads/main.zip
    """
    result = _protocol(ctx, base_path=base_path).detect(url)
    if result is None:
        fail(f"Unsupported plugin URL: {url}")

    if as_json:
        echo_json(result.to_dict())
        return
    typer.echo(f"name: {result.name}")
    typer.echo(f"path: {result.path}")
    typer.echo(f"url:  {result.url}")


@app.command()
def name(
    url: Annotated[str, typer.Argument(help="Plugin source URL or path.")],
) -> None:
    """Print the local directory name for a URL."""
    typer.echo(directory_name(url))


@app.command()
def kind(
    path: Annotated[str, typer.Argument(help="URL, URL path or file name.")],
) -> None:
    """Print the archive kind of a URL or path."""
    host = ""
    url = normalize(path)
    if url is not None:
        path, host = url.path, url.host
    typer.echo(f"kind: {kind_of(path).value}")
    typer.echo(f"archive: {'yes' if looks_like_archive(path, host) else 'no'}")


@app.command()
def plan(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="Plugin source URL.")],
    destination: Annotated[str, typer.Argument(help="Destination path.")],
    tools: Annotated[
        Optional[List[str]],
        typer.Option(
            "--tool",
            "-t",
            help="Assume only these tools exist (repeatable, comma-separated).",
        ),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON.")] = False,
) -> None:
    """Print the commands that would fetch URL into DESTINATION.

    Nothing is executed.

    Examples:
      dpp-http plan https://example.com/plugin.tar.gz ./plugin
      dpp-http plan https://example.com/plugin.zip ./plugin -t curl,python3
    """
    protocol = _protocol(ctx, tools=tools)
    if protocol.detect(url) is None:
        fail(f"Unsupported plugin URL: {url}")

    result = protocol.plan_sync(url, destination)
    if result.is_empty:
        fail("No working command plan: required tools are missing")

    if as_json:
        echo_json(result.to_list())
        return
    print_plan(result)


@app.command()
def init(
    path: Annotated[
        Path,
        typer.Argument(help="Where to write the config file."),
    ] = Path(CONFIG_FILENAME),
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file.")
    ] = False,
) -> None:
    """Write a default dpp-http.toml."""
    if path.exists() and not force:
        fail(f"{path} already exists (use --force to overwrite)")
    try:
        HttpConfig().save(path)
    except (OSError, DppHttpError) as e:
        fail(f"Could not write {path}: {e}")
    console.print(f"[green]Wrote {escape(str(path))}[/green]")


if __name__ == "__main__":
    app()
