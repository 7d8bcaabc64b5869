"""
Command line interface for json-codegen.

Reads one or more json-validate schema documents and writes the generated
code to stdout (or a file). Diagnostics go to stderr.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .core.config import ConfigError, EmitterConfig, get_config_manager, load_config
from .core.emitter import Emitter, GeneratorError
from .core.encoder import Encoder, StructuralError
from .core.schema import Registry, SchemaError
from .logging_config import configure_logging, get_logger
from .registry import (
    RegistryError,
    get_emitter,
    get_language_info,
    get_registry,
    list_supported_languages,
)
from .utils import JSONLoaderError, load_registry

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Diagnostics only; stdout is reserved for generated code
console = Console(stderr=True, soft_wrap=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-codegen",
        description="Generate code from JSON Validate schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-codegen user.json
  json-codegen --lang python -o models.py user.json order.json
  json-codegen --lang ts https://example.com/schemas/user.json
  json-codegen --list-languages
        """.strip(),
    )

    parser.add_argument(
        "schemas", nargs="*", metavar="SCHEMA", help="Schema file paths or URLs"
    )
    parser.add_argument(
        "--lang",
        "-l",
        default="typescript",
        help="Language to output (default: typescript)",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--root-name",
        help="Base name for generated types (default: derived from each schema id)",
    )
    parser.add_argument("--indent-size", type=int, help="Spaces per indentation level")
    parser.add_argument(
        "--comments",
        action="store_true",
        help="Add a comment naming the schema location above each type",
    )
    parser.add_argument(
        "--no-export",
        action="store_true",
        help="Don't export generated TypeScript types",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show a summary of the generated types",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``json-codegen`` command.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, console=console)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not args.schemas:
            console.print("[red]✗[/red] At least one schema file or URL is required")
            return 1

        if not _validate_language(args.lang):
            return 1

        language = get_registry().resolve(args.lang)
        config = _build_config(args, language)
        emitter = get_emitter(language, config)
        registry = load_registry(args.schemas)

        return _generate_and_output(registry, emitter, args)

    except (CLIError, JSONLoaderError, SchemaError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Emitter Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(language, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)
    emitter = get_emitter(language)

    info_text = (
        f"[bold]Language:[/bold] {info['name']}\n"
        f"[bold]File Extension:[/bold] {info['file_extension']}\n"
        f"[bold]Emitter Class:[/bold] {info['class']}\n"
        f"[bold]Module:[/bold] {info['module']}"
    )
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Emitter", border_style="green")
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Type Case", emitter.config.type_case)
    config_table.add_row("Indent Size", str(emitter.config.indent_size))
    config_table.add_row("Export Types", str(emitter.config.export_types))
    config_table.add_row("Add Comments", str(emitter.config.add_comments))
    for key, value in emitter.config.custom.items():
        config_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(config_table)
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if get_registry().is_supported(language):
        return True

    if not silent:
        supported = list_supported_languages()
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
    return False


def _build_config(args: argparse.Namespace, language: str) -> EmitterConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    if args.root_name:
        overrides["root_name"] = args.root_name

    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size

    if args.comments:
        overrides["add_comments"] = True

    if args.no_export:
        overrides["export_types"] = False

    try:
        config = load_config(language, custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config, language):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    return config


def _generate_and_output(
    registry: Registry, emitter: Emitter, args: argparse.Namespace
) -> int:
    """Run the encoder into stdout or the output file."""
    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as out:
                root_names = _run(out, registry, emitter)
            console.print(
                f"[green]✓[/green] Generated {emitter.language_name} code saved to "
                f"[cyan]{args.output}[/cyan]"
            )
        else:
            root_names = _run(sys.stdout, registry, emitter)
            sys.stdout.flush()

    except StructuralError as e:
        console.print(f"[red]✗ Invalid schema structure:[/red] {e}")
        console.print("[dim]Code generated before the error was left in the output[/dim]")
        return 1
    except GeneratorError as e:
        console.print(f"[red]✗ Code generation failed:[/red] {e}")
        return 1
    except OSError as e:
        console.print(f"[red]✗ Failed to write output:[/red] {e}")
        return 1

    if args.verbose:
        summary = Table(
            title="📊 Generated Types",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        summary.add_column("Schema", style="bold")
        summary.add_column("Root Type", style="green", no_wrap=True)

        for schema, name in zip(registry, root_names):
            summary.add_row(schema.id or "<anonymous>", name)

        console.print()
        console.print(summary)

    return 0


def _run(out: TextIO, registry: Registry, emitter: Emitter) -> List[str]:
    encoder = Encoder(out, registry, emitter)
    root_names = encoder.run()
    logger.info("Generated %d type(s) for %d schema(s)", len(encoder.emitted), len(registry))
    return root_names
