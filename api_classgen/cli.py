"""
Command-line interface for api_classgen.

Renders a descriptor document into TypeScript files.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.generator import GenerationResult, generate_code
from .core.references import FolderManager, resolve_references
from .logging_config import configure_logging, get_logger
from .utils import DescriptorLoaderError, load_descriptors

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="api-classgen",
        description="Generate TypeScript classes and interfaces from API descriptors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  api-classgen descriptors.json
  api-classgen descriptors.json --output-dir src/api
  api-classgen --url https://example.com/descriptors.json --stdout
  api-classgen --list-references
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Descriptor JSON file")
    input_group.add_argument("--url", help="URL to fetch the descriptor JSON from")

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Directory for generated files (overrides the configuration)",
    )
    parser.add_argument(
        "--template-dir",
        metavar="DIR",
        help="Directory with custom templates (overrides the configuration)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    parser.add_argument(
        "--list-references",
        action="store_true",
        help="List the well-known references and exit",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the ``api-classgen`` console script.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = create_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = _build_config(args)

        if args.list_references:
            return _list_references(config)

        if not args.file and not args.url:
            raise CLIError("No input given: pass a descriptor file or --url")

        source, document = load_descriptors(file_path=args.file, url=args.url)
        logger.info("Generating from %s", source)

        result = generate_code(document, config)
        return _output_result(result, config, args)

    except (CLIError, ConfigError, DescriptorLoaderError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    overrides = {}
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.template_dir:
        overrides["template_dir"] = args.template_dir

    config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠ {warning}[/yellow]")

    return config


def _list_references(config: GeneratorConfig) -> int:
    table = Table(title="Well-known references", box=box.ROUNDED)
    table.add_column("Key", style="cyan")
    table.add_column("Class")
    table.add_column("File")
    table.add_column("Folder", style="dim")

    for ref_key, reference in resolve_references(FolderManager(config)).items():
        table.add_row(
            ref_key, reference.class_name, reference.file_name, reference.folder_path
        )

    console.print(table)
    return 0


def _output_result(
    result: GenerationResult, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    for warning in result.warnings:
        console.print(f"[yellow]⚠ {warning}[/yellow]")

    if args.stdout:
        for rendered in result.results:
            console.rule(f"{rendered.file_name}{config.file_extension}")
            console.print(Syntax(rendered.text, "typescript", theme="monokai"))
        return 0

    output_dir = Path(config.output_dir)
    for rendered, path in zip(result.results, result.paths):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rendered.text + "\n", encoding="utf-8")
        logger.debug("Wrote %s", path)

    console.print(
        f"[green]✓[/green] Generated {result.metadata['artifact_count']} files "
        f"({result.metadata['class_count']} classes, "
        f"{result.metadata['interface_count']} interfaces) in {output_dir}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
