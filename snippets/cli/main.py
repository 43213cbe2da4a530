"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from snippets import __version__
from snippets.cli.config import load_config
from snippets.cli.download import fetch_snippet_body
from snippets.core.models import Snippet, now_iso
from snippets.storage import BaseBackend, create_backend

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """\b
Examples:
  echo "code" | snippets save "Cool pattern"
  snippets save "Cool pattern" --download "https://example.com/snippet.txt"
  snippets read "Cool pattern"
  snippets delete "Cool pattern"

\b
Environment:
  SNIPPETS_APP_STORAGE=JSON:/path/to/snippets.json
  SNIPPETS_APP_STORAGE=SQLITE:/path/to/snippets.sqlite
  SNIPPETS_APP_LOG_LEVEL=debug
"""


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    err_console: Console
    storage: str
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


def setup_logging(
    level_name: str = "info",
    verbose: bool = False,
    quiet: bool = False,
    debug: bool = False,
) -> None:
    """Configure logging from the configured level and CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, str(level_name).upper(), None)
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("snippets").setLevel(level)


def create_console(no_color: bool = False, stderr: bool = False) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        stderr=stderr,
        no_color=no_color,
        highlight=False,
        color_system=None if no_color else "auto",
    )


def open_backend(ctx: click.Context) -> BaseBackend:
    """Create the configured backend, closed when the command finishes."""
    logger.debug("Opening storage %s", ctx.obj.storage)
    return ctx.with_resource(create_backend(ctx.obj.storage))


def validate_name(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Reject empty snippet names."""
    if not value:
        raise click.BadParameter("snippet name must not be empty")
    return value


class SnippetsGroup(click.Group):
    """Custom group that reports errors and handles KeyboardInterrupt."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            click.echo("Interrupted", err=True)
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            logger.debug("Command failed", exc_info=True)
            err_console = getattr(ctx.obj, "err_console", None) if ctx.obj else None
            if err_console:
                err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=SnippetsGroup, epilog=USAGE_EXAMPLES)
@click.option(
    "--storage",
    "-s",
    metavar="KIND:LOCATION",
    help="Storage specifier, e.g. JSON:snippets.json or SQLITE:snippets.sqlite",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.version_option(
    version=__version__, prog_name="snippets", message="snippets version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    storage: str | None,
    config: Path | None,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
) -> None:
    """Save, read and delete named code snippets.

    Snippets are kept in a JSON file or a SQLite database chosen by the
    storage specifier.
    """
    try:
        config_data = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    setup_logging(
        config_data.get("log_level", "info"), verbose=verbose, quiet=quiet, debug=debug
    )

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        err_console=create_console(no_color=no_color, stderr=True),
        storage=storage or config_data["storage"],
        config=config_data,
        debug=debug,
    )


@cli.command()
@click.argument("name", callback=validate_name)
@click.option(
    "--download",
    "-d",
    "url",
    metavar="URL",
    help="Fetch the snippet body from URL instead of stdin",
)
@click.option(
    "--timeout",
    type=float,
    help="Download timeout in seconds",
)
@click.pass_context
def save(ctx: click.Context, name: str, url: str | None, timeout: float | None) -> None:
    """Save a snippet read from stdin (or downloaded) under NAME."""
    backend = open_backend(ctx)

    if url:
        if timeout is None:
            timeout = float(ctx.obj.config.get("download_timeout", 30.0))
        logger.info("Downloading snippet body from URL: %s", url)
        code = fetch_snippet_body(url, timeout=timeout)
    else:
        logger.info("Reading snippet body from stdin")
        code = click.get_text_stream("stdin").read()

    snippet = Snippet(name=name, code=code, created_at=now_iso())
    logger.info("Saving snippet '%s'", name)
    backend.save(snippet)
    ctx.obj.console.print(f"Snippet '{escape(name)}' saved.")


@cli.command()
@click.argument("name", callback=validate_name)
@click.option("--pretty", "-p", is_flag=True, help="Syntax-highlight the snippet")
@click.pass_context
def read(ctx: click.Context, name: str, pretty: bool) -> None:
    """Print the code of the snippet called NAME."""
    backend = open_backend(ctx)

    logger.info("Reading snippet '%s'", name)
    snippet = backend.get(name)
    if snippet is None:
        ctx.obj.err_console.print(f"Snippet '{escape(name)}' not found.")
        ctx.exit(1)

    if pretty:
        lexer = Syntax.guess_lexer(name, code=snippet.code)
        ctx.obj.console.print(Syntax(snippet.code, lexer, line_numbers=True))
    else:
        click.echo(snippet.code, nl=not snippet.code.endswith("\n"))


@cli.command()
@click.argument("name", callback=validate_name)
@click.pass_context
def delete(ctx: click.Context, name: str) -> None:
    """Delete the snippet called NAME (no error if it does not exist)."""
    backend = open_backend(ctx)

    logger.info("Deleting snippet '%s'", name)
    backend.delete(name)
    ctx.obj.console.print(f"Snippet '{escape(name)}' deleted (if it existed).")


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
