"""
Main entry point for the Say Hello MCP server.
"""

import asyncio
import sys

import anyio
import click
from rich.console import Console

from say_hello.app import create_prober, create_server
from say_hello.config import Config
from say_hello.health.report import format_probe_result
from say_hello.mcp.transport import serve_stdio
from say_hello.utils.log_config import configure_logging

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

console = Console()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the YAML configuration file. Defaults to ~/.config/say-hello/config.yaml.",
)
@click.pass_context
def cli(ctx, config_file):
    """Say Hello MCP server with a Gemini CLI health check."""
    ctx.ensure_object(dict)
    config = Config(config_file)
    configure_logging(config.get_log_level())
    ctx.obj["CONFIG"] = config


@cli.command()
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def serve(ctx, debug):
    """Run the MCP server on stdin/stdout."""
    config = ctx.obj["CONFIG"]
    if debug:
        configure_logging("DEBUG")

    server = create_server(config)
    try:
        anyio.run(serve_stdio, server)
    except KeyboardInterrupt:
        pass


@cli.command("health-check")
@click.pass_context
def health_check(ctx):
    """Run the Gemini CLI health check once and print the result."""
    prober = create_prober(ctx.obj["CONFIG"])
    result = asyncio.run(prober.probe())

    console.print(format_probe_result(result), markup=False, highlight=False)
    if result.strategy:
        console.print(f"[dim]strategy: {result.strategy}[/dim]")
    sys.exit(0 if result.success else 1)


@cli.command()
@click.pass_context
def tools(ctx):
    """List the tools the server exposes."""
    server = create_server(ctx.obj["CONFIG"])
    for definition in server.tool_service.list_tools():
        console.print(f"[bold blue]{definition['name']}[/bold blue]: {definition['description']}")


if __name__ == "__main__":
    cli()
