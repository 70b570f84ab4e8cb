"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from jinja2 import TemplateError
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel

from terraformer.errors import LoaderError, MalformedTypeError, TerraformerError
from terraformer.validation.validator import ValidationError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(func: Callable[..., T]) -> Callable[..., T]:
    """Report exceptions raised by a CLI command and exit with code 1.

    Full tracebacks are shown when the command was invoked with
    ``verbose=True``.
    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> T:
        verbose = bool(kwargs.get("verbose", False))
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ValidationError as e:
            _handle_validation_error(e)
        except PydanticValidationError as e:
            _handle_pydantic_error(e, verbose)
        except LoaderError as e:
            _handle_panel("Could not load service file", e, verbose)
        except MalformedTypeError as e:
            _handle_panel("Malformed type", e, verbose)
        except TemplateError as e:
            _handle_panel("Template rendering failed", e, verbose)
        except (TerraformerError, OSError) as e:
            _handle_panel("Generation failed", e, verbose)
        except Exception as e:
            _handle_panel("An unexpected error occurred", e, verbose)
        raise typer.Exit(1)

    return wrapper


def _handle_validation_error(error: ValidationError) -> None:
    """Handle semantic validation errors."""
    from terraformer.cli.error_formatter import ErrorTable

    table = ErrorTable(console)
    table.print_result(error.result)
    table.print_summary(error.result)


def _handle_pydantic_error(error: PydanticValidationError, verbose: bool) -> None:
    """Handle Pydantic validation errors."""
    from terraformer.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    console.print("[red bold]Service File Validation Failed[/red bold]")
    console.print()

    for err in error.errors():
        location = format_pydantic_location(err["loc"])
        msg = translate_pydantic_error(err)
        suggestion = get_suggestion_for_error(err)

        console.print(f"[red]✗[/red] {location}")
        console.print(f"  {msg}")
        console.print(f"  [dim]({err['type']})[/dim]")

        if suggestion:
            console.print(f"  [green]{suggestion}[/green]")

        console.print()

    if verbose:
        console.print("[dim]Full error:[/dim]")
        console.print(str(error))


def _handle_panel(title: str, error: Exception, verbose: bool) -> None:
    """Print an error in a red panel, with the traceback when verbose."""
    console.print(
        Panel(
            f"[red]{error}[/red]",
            title=title,
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
