"""Command-line interface for the terraformer code generator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from terraformer import __version__
from terraformer.cli.exception_handler import handle_exceptions
from terraformer.config import GeneratorConfig
from terraformer.models import ServiceFile, load_service_file, validate_service_file

# Create Typer app
app = typer.Typer(
    name="terraformer",
    help="Generate Rust client modules from kRPC JSON service definitions.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"terraformer version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate Rust client modules from kRPC JSON service definitions.

    Each service becomes one module named after the service in snake case.
    Procedures named <Class>_<Method> become methods of <Class>.
    """


def _service_files(input_path: Path, extension: str) -> list[Path]:
    """Resolve the command input to the list of service files to process."""
    from terraformer.emit import find_service_files

    if input_path.is_dir():
        return find_service_files(input_path, extension)
    return [input_path]


@app.command()
@handle_exceptions
def generate(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Service file, or directory of service files, to compile.",
            exists=True,
            file_okay=True,
            dir_okay=True,
            readable=True,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for generated modules.",
            file_okay=False,
            resolve_path=True,
        ),
    ] = Path("."),
    no_index: Annotated[
        bool,
        typer.Option(
            "--no-index",
            help="Do not write the index module declaring every generated module.",
        ),
    ] = False,
    templates: Annotated[
        Path | None,
        typer.Option(
            "--templates",
            "-t",
            help="Directory with templates overriding the built-in ones.",
            exists=True,
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    extension: Annotated[
        str,
        typer.Option(
            "--extension",
            "-e",
            help="Extension of generated files.",
        ),
    ] = ".rs",
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Refuse to generate when semantic validation reports warnings.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Render everything without writing files.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging and full tracebacks.",
        ),
    ] = False,
) -> None:
    """Compile service files into Rust modules.

    Examples
    --------
        terraformer generate KRPC.SpaceCenter.json -o src/services
        terraformer generate services/ -o src/services
        terraformer generate services/ --dry-run
        terraformer generate services/ --templates my_templates/

    """
    from terraformer.emit import DocumentGenerator, generate_documents
    from terraformer.validation import ServiceFileValidator

    configure_logging(verbose)
    config = GeneratorConfig(
        output_extension=extension,
        write_index=not no_index,
        template_dir=templates,
    )

    paths = _service_files(input_path, config.source_extension)
    if not paths:
        error_console.print(f"\n✗ No {config.source_extension} files found in {input_path}\n")
        raise typer.Exit(code=1)

    documents: list[ServiceFile] = [load_service_file(path) for path in paths]

    if strict:
        validator = ServiceFileValidator(strict=True, check_documentation=False)
        for document in documents:
            validator.validate_and_raise(document)

    if dry_run:
        for document in documents:
            for name, text in DocumentGenerator(document, config=config).render_all().items():
                console.print(f"  [dim]{name}[/dim] ({len(text.encode()):,} bytes)")
        console.print(f"\n[bold green]✓ Would write to {output}[/bold green]\n")
        return

    output.mkdir(parents=True, exist_ok=True)
    written = generate_documents(documents, output, config)
    console.print(f"\n[bold green]✓ Wrote {len(written)} file(s) to {output}[/bold green]\n")


@app.command()
@handle_exceptions
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Service file to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output errors, no success messages.",
        ),
    ] = False,
) -> None:
    """Validate a service file.

    Checks the file against the service-definition model, then runs
    semantic checks (type arity, references, method receivers).

    Examples
    --------
        terraformer validate KRPC.SpaceCenter.json
        terraformer validate KRPC.SpaceCenter.json --quiet

    """
    from terraformer.cli.error_formatter import ErrorTable
    from terraformer.validation import ServiceFileValidator

    errors = validate_service_file(input_file)

    if errors:
        error_console.print(f"\n✗ Validation failed for {input_file.name}\n")

        table = Table(title="Validation Errors", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Location", style="cyan")
        table.add_column("Error", style="red")

        for i, error in enumerate(errors, 1):
            if ": " in error:
                loc, msg = error.split(": ", 1)
            else:
                loc, msg = "", error
            table.add_row(str(i), loc, msg)

        console.print(table)
        raise typer.Exit(code=1)

    result = ServiceFileValidator().validate(load_service_file(input_file))

    if result.issues and not (quiet and result.is_valid):
        formatter = ErrorTable(console)
        formatter.print_result(result)
        formatter.print_summary(result)

    if not result.is_valid:
        raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )
        else:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")


@app.command()
@handle_exceptions
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Service file to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display a per-service summary of a service file.

    Examples
    --------
        terraformer info KRPC.SpaceCenter.json

    """
    from terraformer.transform import extract_dependencies, module_name, partition_procedures

    doc = load_service_file(input_file)

    table = Table(title=f"Services in {input_file.name}")
    table.add_column("Service", style="cyan")
    table.add_column("Module")
    table.add_column("Procedures", justify="right")
    table.add_column("Classes", justify="right")
    table.add_column("Methods", justify="right")
    table.add_column("Enumerations", justify="right")
    table.add_column("Depends on")

    for name, service in doc.iter_services():
        partitioned = partition_procedures(service, name)
        method_count = sum(len(methods) for methods in partitioned.methods.values())
        dependencies = extract_dependencies(service, name)
        table.add_row(
            name,
            module_name(name),
            str(len(partitioned.procedures)),
            str(len(service.classes)),
            str(method_count),
            str(len(service.enumerations)),
            ", ".join(dependencies) or "-",
        )

    console.print(table)


if __name__ == "__main__":
    app()
