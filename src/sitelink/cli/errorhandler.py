"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from sitelink.config.exceptions import ConfigError
from sitelink.exceptions import SitelinkError, UnknownEntityError
from sitelink.infra.exceptions import StoreError

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Turn package errors into a short message and exit code 1.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except StoreError as e:
        if debug:
            raise
        console.print(f"[bold red]Store error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except UnknownEntityError as e:
        if debug:
            raise
        console.print(f"[bold red]Not found:[/bold red] {e}")
        raise typer.Exit(1) from e
    except SitelinkError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e
