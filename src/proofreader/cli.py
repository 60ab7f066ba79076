"""Command-line interface for proofreader."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from . import __version__
from .core.proofreader import Proofreader
from .errors import ConfigurationError, DictionaryLoadError
from .logging_config import setup_logging
from .models.config import ProofreaderConfig
from .models.results import has_suggestions
from .output import ConsoleReporter, JsonReporter
from .output.json import DEFAULT_RESULTS_FILE
from .sources.loader import SourceLoader

EXIT_OK = 0
EXIT_SUGGESTIONS = 1
EXIT_CONFIG_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="proofreader",
        description="Spell and style check HTML and Markdown documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Proofread a local Markdown or HTML file
  proofreader -f README.md

  # Proofread a web page
  proofreader -u https://example.com/blog/post.html

  # Proofread every file listed in files.txt and save JSON results
  proofreader -l files.txt -o json

  # Use custom selectors, dictionaries and style settings
  proofreader -f index.html -c settings.json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "-u",
        "--url",
        metavar="URL",
        help="URL to website that should be proofread",
    )
    source_group.add_argument(
        "-f",
        "--file",
        metavar="PATH",
        help="Path to HTML or Markdown file that should be proofread",
    )
    source_group.add_argument(
        "-l",
        "--file-list",
        type=Path,
        metavar="PATH",
        help="Path to a list of files (or URLs) that should be proofread",
    )

    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        metavar="PATH",
        help="Path to a custom configuration file (JSON or YAML)",
    )

    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "-o",
        "--output",
        choices=["print", "json"],
        default="print",
        help="Print the results or save them as JSON (default: print)",
    )
    output_group.add_argument(
        "--output-file",
        type=Path,
        default=Path(DEFAULT_RESULTS_FILE),
        metavar="PATH",
        help=f"JSON results file (default: {DEFAULT_RESULTS_FILE})",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )
    output_group.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write log messages to this file",
    )

    return parser


def load_config(config_file: Optional[Path]) -> ProofreaderConfig:
    """Load the given configuration file or the bundled defaults."""
    if config_file is not None:
        return ProofreaderConfig.from_file(config_file)
    return ProofreaderConfig.default()


def run_proofreader(args: argparse.Namespace) -> int:
    """Run the proofreader with given arguments."""
    console = Console(stderr=True)

    try:
        config = load_config(args.config_file)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_CONFIG_ERROR

    log_level = config.log_level
    if args.verbose:
        log_level = "DEBUG"
    elif args.quiet:
        log_level = "ERROR"
    setup_logging(level=log_level, log_file=args.log_file, force=True)

    loader = SourceLoader()
    if args.url or args.file:
        loader.add(args.url or args.file)
    else:
        try:
            loader.add_list(args.file_list)
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot read file list {args.file_list}: {e}")
            return EXIT_CONFIG_ERROR

    try:
        proofreader = Proofreader.from_config(config)
    except (ConfigurationError, DictionaryLoadError) as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_CONFIG_ERROR

    async def run() -> int:
        async with proofreader:
            sources = await loader.load()
            file_results = await proofreader.proofread_sources(sources)

        failed = [s for s in sources if s.error is not None]
        if args.output == "json":
            JsonReporter(args.output_file).report(file_results, failed)
        else:
            ConsoleReporter().report(file_results, failed)

        return EXIT_SUGGESTIONS if has_suggestions(file_results) else EXIT_OK

    return asyncio.run(run())


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_proofreader(args)


if __name__ == "__main__":
    sys.exit(main())
