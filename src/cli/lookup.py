"""CLI for batch company lookups.

Usage::

    # Unified social credit codes, one name per line in a file
    python -m src.cli uscc --file companies.txt

    # Comma-separated names on the command line, exact-name matches only
    python -m src.cli uscc "甲公司,乙公司" --sep , --strict-name

    # Stock code and latest top shareholders, bypassing the cache
    python -m src.cli cninfo --file companies.txt --no-read-cache

Results go to stdout in input order; logs and the progress bar go to
stderr.  Cache files live in ``$CGD_DATA`` (default ``~/cgd``), which must
already exist.

Exit codes: 0 on completion (individual lookups may still have failed),
1 on a fatal error (data directory, input file, cache I/O), 2 on usage
errors.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from src.cli.progress import RichProgressSink
from src.config.settings import Settings
from src.models.outcome import CachePolicy
from src.utils.errors import CacheStoreError, ConfigurationError
from src.utils.logging import configure_logging
from src.utils.text_normalizer import split_query_keys

__version__ = "0.1.0"

_EXIT_OK = 0
_EXIT_FATAL = 1
_EXIT_USAGE = 2

# Subcommand names kept from earlier releases.
_COMMAND_ALIASES = {"tyxym": "uscc"}


def _fail(message: str) -> int:
    """Print a fatal diagnostic to stderr and return the fatal exit code."""
    print(f"Error: {message}", file=sys.stderr)
    return _EXIT_FATAL


def _unescape_sep(sep: str) -> str:
    """Let ``--sep '\\t'`` and ``--sep '\\n'`` mean tab and newline."""
    return sep.replace("\\n", "\n").replace("\\t", "\t")


def _read_names(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return args.names or ""


# ---------------------------------------------------------------------------
# Subcommand handler
# ---------------------------------------------------------------------------


async def _handle_lookup(
    args: argparse.Namespace,
    keys: list[str],
    app_settings: Settings,
    data_dir: Path,
) -> int:
    """Run one batch for the ``uscc`` or ``cninfo`` subcommand."""
    from src.main import run_batch

    policy = CachePolicy(read=args.read_cache, write=args.write_cache)
    progress = RichProgressSink(
        description=f"Resolving ({args.command})",
        disabled=args.no_progress or not sys.stderr.isatty(),
    )

    try:
        batch, _summary = await run_batch(
            keys,
            args.command,
            app_settings,
            data_dir,
            policy,
            strict_name=getattr(args, "strict_name", False),
            result_num=getattr(args, "result_num", 3),
            a_share_only=getattr(args, "a_share_only", True),
            progress=progress,
        )
    except CacheStoreError as exc:
        return _fail(str(exc))

    if batch.cache_write_error:
        return _fail(f"results were not all cached: {batch.cache_write_error}")
    return _EXIT_OK


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the lookup CLI."""
    parser = argparse.ArgumentParser(
        prog="cgd",
        description="Look up Chinese company identifiers and listings in batch.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress details to stderr"
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Do not draw the progress bar"
    )

    # Options shared by every lookup subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("names", nargs="?", help="Company names separated by --sep")
    common.add_argument("-f", "--file", help="Read company names from a text file")
    common.add_argument(
        "-s", "--sep", default="\n", help="Separator between company names (default: newline)"
    )
    common.add_argument(
        "-R",
        "--no-read-cache",
        dest="read_cache",
        action="store_false",
        help="Do not answer from the cache file",
    )
    common.add_argument(
        "-W",
        "--no-write-cache",
        dest="write_cache",
        action="store_false",
        help="Do not write new results to the cache file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Lookup commands")

    # -- uscc --
    uscc_parser = subparsers.add_parser(
        "uscc",
        aliases=["tyxym"],
        parents=[common],
        help="Look up unified social credit codes (Credit China)",
    )
    uscc_parser.add_argument(
        "-n",
        "--strict-name",
        action="store_true",
        help="Require the registered name to equal the query exactly",
    )

    # -- cninfo --
    cninfo_parser = subparsers.add_parser(
        "cninfo",
        parents=[common],
        help="Look up stock codes and top shareholders (CNINFO)",
    )
    cninfo_parser.add_argument(
        "-n",
        "--result-num",
        type=int,
        default=3,
        help="Number of search results to request (default: 3)",
    )
    cninfo_parser.add_argument(
        "-a",
        "--a-share-only",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Only consider A-share listings (default: on)",
    )

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for batch lookups."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    args.command = _COMMAND_ALIASES.get(args.command, args.command)

    if args.command is None:
        parser.print_help()
        sys.exit(_EXIT_USAGE)
    if not args.file and not args.names:
        parser.error("give company names or --file")

    app_settings = Settings()
    configure_logging(
        log_level="INFO" if args.verbose else app_settings.log_level,
        json_output=(app_settings.app_env == "production"),
    )

    try:
        data_dir = app_settings.resolve_data_dir()
    except ConfigurationError as exc:
        sys.exit(_fail(str(exc)))

    try:
        text = _read_names(args)
    except (OSError, UnicodeDecodeError) as exc:
        sys.exit(_fail(f"cannot read {args.file}: {exc}"))

    keys = split_query_keys(text, _unescape_sep(args.sep))
    if not keys:
        print("Error: no company names to look up", file=sys.stderr)
        sys.exit(_EXIT_USAGE)

    print(f"Resolving {len(keys)} companies", file=sys.stderr)
    exit_code = asyncio.run(_handle_lookup(args, keys, app_settings, data_dir))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
