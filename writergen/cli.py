"""
Command-line interface for writergen.

Loads a model description, runs the writers generator and reports the
result with rich output.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .codegen import RubyWritersGenerator, generate_code
from .codegen.core.config import ConfigError, get_config_manager, load_config
from .codegen.core.naming import NamingCase, NamingError
from .codegen.languages.ruby import create_ruby_deriver
from .logging_config import configure_logging, get_logger
from .model import ModelError, Name, load_model

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="writergen",
        description="Generate Ruby XML writer classes from a type model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  writergen generate model.json --output lib
  writergen generate --url https://example.com/model.json -o lib --module-name My::Sdk
  writergen names VirtualMachine --suffix Writer --directory Writers
        """.strip(),
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--log-file", type=Path, help="Write the full log to this file")

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate the writers of a model")
    input_group = generate.add_mutually_exclusive_group(required=True)
    input_group.add_argument("model", nargs="?", help="JSON model description")
    input_group.add_argument("--url", help="URL to fetch the model description from")
    generate.add_argument("--output", "-o", default=".", help="Output directory (default: .)")
    generate.add_argument("--config", help="Configuration file path (JSON)")
    generate.add_argument("--module-name", help="Ruby module, for example Ovirt::SDK::V4")
    generate.add_argument(
        "--reserved",
        metavar="WORD",
        nargs="+",
        help="Additional reserved words for member names",
    )
    generate.add_argument(
        "--no-comments", action="store_true", help="Don't add header comments"
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be generated without writing them",
    )
    generate.set_defaults(func=_handle_generate)

    names = subparsers.add_parser("names", help="Show the names derived from a name")
    names.add_argument("name", help="Name in any case style, for example VirtualMachine")
    names.add_argument("--suffix", help="Suffix appended to the class and file names")
    names.add_argument("--directory", help="Directory of the file")
    names.add_argument("--config", help="Configuration file path (JSON)")
    names.add_argument("--module-name", help="Ruby module, for example Ovirt::SDK::V4")
    names.set_defaults(func=_handle_names)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (CLIError, ConfigError, ModelError, NamingError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Command failed", exc_info=True)
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_config(args: argparse.Namespace):
    overrides = {"module_name": args.module_name}
    if getattr(args, "reserved", None):
        overrides["extra_reserved_words"] = args.reserved
    if getattr(args, "no_comments", False):
        overrides["add_comments"] = False

    config = load_config(custom_config=overrides, config_file=args.config)
    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️ {warning}[/yellow]")
        logger.warning(warning)
    return config


def _handle_generate(args: argparse.Namespace) -> int:
    config = _build_config(args)
    model = load_model(model_path=args.model, url=args.url)
    generator = RubyWritersGenerator(config)

    out_dir = None if args.dry_run else Path(args.output)
    if out_dir is not None and out_dir.exists() and not out_dir.is_dir():
        raise CLIError(f"Output path is not a directory: {out_dir}")

    result = generate_code(generator, model, out_dir)

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        cause = result.exception.__cause__ if result.exception else None
        if cause is not None:
            console.print(f"[dim]{cause}[/dim]")
        return 1

    for warning in result.warnings:
        console.print(f"[yellow]⚠️ {warning}[/yellow]")

    table = Table(
        title="📄 Generated Files" if out_dir else "📄 Files (dry run)",
        box=box.ROUNDED,
        title_style="bold cyan",
    )
    table.add_column("File", style="bold green")
    table.add_column("Class", style="cyan")
    table.add_column("Lines", justify="right", style="dim")
    for document in result.documents:
        table.add_row(document.path, document.class_name or "-", str(len(document.lines)))
    console.print(table)

    if out_dir is not None:
        console.print(
            f"[green]✓[/green] Wrote {len(result.metadata['written_paths'])} files "
            f"to [bold]{out_dir}[/bold]"
        )
    return 0


def _handle_names(args: argparse.Namespace) -> int:
    config = _build_config(args)
    deriver = create_ruby_deriver(config)

    base = Name.parse(args.name)
    suffix = Name.parse(args.suffix) if args.suffix else None
    directory = Name.parse(args.directory) if args.directory else None
    qualified = deriver.build_name(base, suffix, directory)

    info_text = (
        f"[bold]Words:[/bold] {', '.join(base.words)}\n"
        f"[bold]Class:[/bold] {qualified.class_name}\n"
        f"[bold]Module:[/bold] {qualified.module_name}\n"
        f"[bold]File:[/bold] {qualified.file_name}.rb\n"
        f"[bold]Member:[/bold] {deriver.member_style_name(base)}\n"
        f"[bold]Constant:[/bold] {deriver.style(base, NamingCase.SCREAMING_SNAKE)}"
    )
    console.print(Panel(info_text, title=f"🔧 {args.name}", border_style="green"))
    return 0
