"""
Command-line interface for crudgen.

Parses options, loads the entity schema, and hands off to the
Materializer; all console output goes through rich.
"""

import argparse
import sys
from typing import Any, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    MalformedSchemaError,
    Materializer,
    MissingInputError,
    load_config,
)
from .codegen.core.config import HOOKS_LAYOUTS, get_config_manager
from .logging_config import configure_logging, get_logger
from .utils import JSONLoaderError, load_json, parse_json_text

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the crudgen command."""
    parser = argparse.ArgumentParser(
        prog="crudgen",
        description="Generate a TypeScript client, types and react-query hooks for an entity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  crudgen --entity-name User --entity-properties '{"id": {"name": "id", "type": "string"}}'
  crudgen --entity-name User --schema-file user.json --output-dir src/entities
  crudgen --entity-name User --schema-file user.json --hooks-layout per_operation
  crudgen --entity-name User --schema-file user.json --dry-run
        """.strip(),
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--entity-name",
        "--entityName",
        dest="entity_name",
        required=True,
        metavar="NAME",
        help="Name of the entity, in the casing used for types (e.g. User)",
    )

    # Input options (mutually exclusive)
    input_group = parser.add_argument_group("schema input")
    sources = input_group.add_mutually_exclusive_group()
    sources.add_argument(
        "--entity-properties",
        "--entityProperties",
        dest="entity_properties",
        metavar="JSON",
        help="Entity fields as an inline JSON object",
    )
    sources.add_argument(
        "--schema-file", metavar="FILE", help="JSON file holding the entity fields"
    )
    sources.add_argument(
        "--schema-url", metavar="URL", help="URL to fetch the entity fields from"
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Target root for generated files (default: current directory)",
    )
    output_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated files instead of writing them",
    )

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    gen_group.add_argument(
        "--hooks-layout",
        choices=HOOKS_LAYOUTS,
        help="One hooks module, or one file per hook",
    )
    gen_group.add_argument(
        "--http-module",
        metavar="MODULE",
        help="Module exporting BASE_URL and httpClient (default: @shared)",
    )
    gen_group.add_argument(
        "--query-package",
        metavar="PACKAGE",
        help="Package providing useQuery/useMutation (default: react-query)",
    )
    gen_group.add_argument(
        "--extension", metavar="EXT", help="Generated file extension (default: ts)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging and generation metadata",
    )

    return parser


def _load_raw_schema(args: argparse.Namespace) -> Tuple[str, Any]:
    """Get (source, raw field mapping) from whichever source was supplied."""
    if args.entity_properties is None and not args.schema_file and not args.schema_url:
        raise MissingInputError(
            "Entity fields required (--entity-properties, --schema-file or --schema-url)"
        )

    try:
        if args.entity_properties is not None:
            source = "--entity-properties"
            return source, parse_json_text(args.entity_properties, source)
        if args.schema_file:
            return load_json(file_path=args.schema_file)
        return load_json(url=args.schema_url)
    except FileNotFoundError as e:
        raise MissingInputError(str(e)) from e
    except JSONLoaderError as e:
        raise MalformedSchemaError(str(e)) from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from a config file plus CLI overrides."""
    overrides = {
        "output_dir": args.output_dir,
        "hooks_layout": args.hooks_layout,
        "http_module": args.http_module,
        "query_package": args.query_package,
        "extension": args.extension,
    }
    return load_config(custom_config=overrides, config_file=args.config)


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle a generation request from parsed CLI arguments.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = _build_config(args)
        source, raw_schema = _load_raw_schema(args)
        console.print(f"📄 Loaded: {source}")

        materializer = Materializer(config)
        result = materializer.plan(args.entity_name, raw_schema)
        result.metadata["source"] = source

        for warning in get_config_manager().validate_config(config) + result.warnings:
            console.print(f"[yellow]⚠️  {warning}[/yellow]")

        if args.dry_run:
            _print_artifacts(result)
        else:
            written = materializer.write(result)
            _print_written(written)
            console.print("[green]✓[/green] Files generated successfully!")

        if args.verbose:
            _print_metadata(result)

        return 0

    except GeneratorError as e:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _print_artifacts(result: GenerationResult):
    """Show every rendered artifact with syntax highlighting."""
    for artifact in result.artifacts:
        console.print(
            Panel(
                Syntax(artifact.content, "typescript", theme="monokai"),
                title=f"📄 {artifact.relative_path}",
                border_style="blue",
            )
        )
    console.print(
        f"[dim]Dry run: {len(result.artifacts)} file(s) not written[/dim]"
    )


def _print_written(paths: List):
    table = Table(title="📁 Generated Files", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Path", style="cyan")

    for index, path in enumerate(paths, start=1):
        table.add_row(str(index), str(path))

    console.print(table)


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the crudgen command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return handle_generate_command(args)


if __name__ == "__main__":
    sys.exit(main())
