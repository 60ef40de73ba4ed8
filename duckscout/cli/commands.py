"""CLI commands for duckscout."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from loguru import logger

from duckscout import __version__

app = typer.Typer(
    name="duckscout",
    help="duckscout - DuckDuckGo search and page fetching for agents",
    no_args_is_help=True,
    add_completion=False,
)

ConfigOption = Annotated[
    Optional[Path], typer.Option("--config", "-c", help="Path to config file")
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
]


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"duckscout v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """duckscout - DuckDuckGo search and page fetching for agents."""


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("duckscout")
    else:
        logger.disable("duckscout")


def _run_tool(name: str, params: dict[str, Any], config_path: Path | None) -> str:
    from duckscout.agent.tools.factory import build_web_tool_registry
    from duckscout.agent.tools.websearch.client import DuckDuckGoClient
    from duckscout.config.loader import load_config

    config = load_config(config_path)

    async def run() -> str:
        async with DuckDuckGoClient(config.tools.web) as client:
            registry = build_web_tool_registry(client)
            return await registry.execute(name, params)

    return asyncio.run(run())


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="The search query")],
    max_results: Annotated[
        Optional[int], typer.Option("--max-results", "-n", help="Maximum number of results")
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Search DuckDuckGo and print formatted results."""
    _configure_logging(verbose)
    params: dict[str, Any] = {"query": query}
    if max_results is not None:
        params["maxResults"] = max_results
    typer.echo(_run_tool("web_search", params, config))


@app.command()
def fetch(
    url: Annotated[str, typer.Argument(help="The webpage URL to fetch")],
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Fetch a webpage and print its cleaned text."""
    _configure_logging(verbose)
    typer.echo(_run_tool("web_fetch", {"url": url}, config))


@app.command()
def tools(config: ConfigOption = None) -> None:
    """Print tool definitions in function-calling format."""
    from duckscout.agent.tools.factory import build_web_tool_registry
    from duckscout.agent.tools.websearch.client import DuckDuckGoClient
    from duckscout.config.loader import load_config

    logger.disable("duckscout")
    # The HTTP client is created lazily, so nothing here touches the network.
    registry = build_web_tool_registry(DuckDuckGoClient(load_config(config).tools.web))
    typer.echo(json.dumps(registry.get_definitions(), indent=2))


@app.command()
def onboard(
    config: ConfigOption = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config")] = False,
) -> None:
    """Write a default configuration file."""
    from duckscout.config.loader import get_config_path, save_config
    from duckscout.config.schema import Config

    path = config or get_config_path()
    if path.exists() and not force:
        typer.echo(f"Config already exists at {path} (use --force to overwrite)", err=True)
        raise typer.Exit(1)

    save_config(Config(), path)
    typer.echo(f"Created config at {path}")


if __name__ == "__main__":
    app()
