"""
Command-line interface for typedraft.
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="typedraft",
        description="typedraft - Verify JSON corpora and generate field type drafts",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Verify a corpus and write report and type draft")
    run_parser.add_argument("directory", help="Directory tree holding the JSON documents")
    run_parser.add_argument(
        "-c", "--config",
        help="YAML file overriding the draft metadata and output paths",
    )
    run_parser.add_argument(
        "--report",
        help="Verification report output path (default: verification.json)",
    )
    run_parser.add_argument(
        "--draft",
        help="Type draft output path (default: brand-type.json)",
    )
    run_parser.add_argument("--key", help="Type draft key (default: Brand)")
    run_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress bars",
    )

    # Schema command
    schema_parser = subparsers.add_parser("schema", help="Print the inferred fields without writing files")
    schema_parser.add_argument("directory", help="Directory tree holding the JSON documents")
    schema_parser.add_argument("-c", "--config", help="YAML config file (for the field delimiter)")

    # Count command
    count_parser = subparsers.add_parser("count", help="Compare flattened and streamed leaf counts per file")
    count_parser.add_argument("directory", help="Directory tree holding the JSON documents")

    args = parser.parse_args(argv)

    if args.version:
        from typedraft import __version__
        console.print(f"typedraft version {__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    # Import here to avoid slow startup for --help
    from typedraft.config import load_config
    from typedraft.errors import TypedraftError
    from typedraft.pipeline import run_pipeline, write_outputs
    from typedraft.reader import JsonCorpus

    try:
        if args.command == "run":
            config = load_config(args.config).with_overrides(
                report_path=args.report,
                draft_path=args.draft,
                key=args.key,
            )
            corpus = JsonCorpus(args.directory, show_progress=not args.no_progress)
            result = run_pipeline(corpus, config)
            write_outputs(result, config)

        elif args.command == "schema":
            config = load_config(args.config)
            corpus = JsonCorpus(args.directory)
            corpus.print_schema(config.delimiter)

        elif args.command == "count":
            corpus = JsonCorpus(args.directory)
            corpus.print_leaf_counts()

    except (FileNotFoundError, NotADirectoryError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1
    except TypedraftError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
