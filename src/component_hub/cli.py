"""CLI/bootstrap helpers for the Component Hub application."""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from component_hub.action_messages import build_actionable_error
from component_hub.catalog import CatalogError, CatalogStore, load_catalog_file
from component_hub.config import CONFIG_APP_NAME, load_config
from component_hub.export import format_bulk
from component_hub.models import ALL_CATEGORIES, CATEGORY_FILTERS, CatalogEntry, UserConfig
from component_hub.query import query_catalog
from component_hub.seed import build_seed_catalog

logger = logging.getLogger(__name__)

ResolveCatalogResult = list[CatalogEntry] | int


def _resolve_input_file(input_path: Path) -> ResolveCatalogResult:
    """Validate and parse an explicit catalog file. Returns entries or exit code."""
    catalog_file = input_path.resolve()
    if not catalog_file.exists():
        print(f"Error: {catalog_file} not found", file=sys.stderr)
        return 1
    if catalog_file.is_dir():
        print(f"Error: {catalog_file} is a directory, not a file", file=sys.stderr)
        return 1
    if not os.access(catalog_file, os.R_OK):
        print(f"Error: {catalog_file} is not readable (permission denied)", file=sys.stderr)
        return 1
    try:
        return load_catalog_file(catalog_file)
    except CatalogError as e:
        print(
            build_actionable_error(
                f"load catalog {catalog_file.name}",
                why=str(e),
                next_step="fix the file or omit -i to browse the built-in catalog",
            ),
            file=sys.stderr,
        )
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read {catalog_file}: {e}", file=sys.stderr)
        return 1


def _resolve_catalog(args: argparse.Namespace) -> ResolveCatalogResult:
    """Pick the catalog source: an explicit -i file, else the built-in samples."""
    if args.input is not None:
        return _resolve_input_file(args.input)
    return build_seed_catalog()


def _print_listing(store: CatalogStore, search_term: str, category_filter: str) -> int:
    """Print the grouped catalog view for non-interactive use."""
    view = query_catalog(store.entries, search_term, category_filter)
    if not any(view.values()):
        print(
            build_actionable_error(
                "list components",
                why="no component matches the current search and category",
                next_step="try a shorter --search term or --category all",
            ),
            file=sys.stderr,
        )
        return 1
    for category, entries in view.items():
        print(f"{category} ({len(entries)})")
        for entry in entries:
            tags = ", ".join(entry.tags)
            print(f"  [{entry.id}] {entry.name}  v{entry.version}  {tags}")
            for variant in entry.variants or ():
                print(f"      - {variant.name}  {variant.file_path}")
    return 0


def _print_export(store: CatalogStore, entry_ids: list[str], language: str) -> int:
    """Print the bulk export payload for the given ids, in catalog order."""
    unknown = [entry_id for entry_id in entry_ids if entry_id not in store]
    if unknown:
        print(
            build_actionable_error(
                "export components",
                why=f"unknown component id(s): {', '.join(unknown)}",
                next_step="run --list to see the available ids",
            ),
            file=sys.stderr,
        )
        return 1
    print(format_bulk(store.entries_for_ids(entry_ids), language))
    return 0


def _configure_logging(debug: bool) -> None:
    """Configure logging. When debug=True, logs to file at DEBUG level."""
    if not debug:
        # Default: suppress all logging (TUI captures stderr)
        logging.disable(logging.CRITICAL)
        return

    log_dir = Path(user_config_dir(CONFIG_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "debug.log"

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)


def _configure_color_mode(color_mode: str) -> None:
    """Configure environment hints for terminal color behavior."""
    if color_mode == "never":
        os.environ["NO_COLOR"] = "1"
        os.environ.pop("FORCE_COLOR", None)
        return
    if color_mode == "always":
        os.environ["FORCE_COLOR"] = "1"
        os.environ.pop("NO_COLOR", None)
        return
    os.environ.pop("FORCE_COLOR", None)


def _validate_interactive_tty() -> bool:
    """Return True when stdin/stdout are interactive terminals."""
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="component-hub",
        description="Browse a catalog of reusable components and export them for LLM prompts",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        default=None,
        help="JSON catalog file (default: built-in sample catalog)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the catalog grouped by category and exit",
    )
    parser.add_argument(
        "--export",
        nargs="+",
        metavar="ID",
        default=None,
        help="Print the LLM-ready Markdown export of these component ids and exit",
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Initial search term (matches names and tags, case-insensitive)",
    )
    parser.add_argument(
        "--category",
        choices=CATEGORY_FILTERS,
        default=None,
        help="Initial category filter (default: all, or the restored session's)",
    )
    parser.add_argument(
        "--no-restore",
        action="store_true",
        help="Start with a fresh session (ignore saved search, category, and selection)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to file (~/.config/component-hub/debug.log)",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output mode for terminal UI (default: auto)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable terminal colors (equivalent to --color never)",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Use ASCII-only icons for compatibility with limited terminals",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    load_config_fn: Callable[[], UserConfig] = load_config,
    resolve_catalog_fn: Callable[[argparse.Namespace], ResolveCatalogResult] = _resolve_catalog,
    configure_logging_fn: Callable[[bool], None] = _configure_logging,
    configure_color_mode_fn: Callable[[str], None] = _configure_color_mode,
    validate_interactive_tty_fn: Callable[[], bool] = _validate_interactive_tty,
    app_factory: Callable[..., Any] | None = None,
) -> int:
    """Main entry point. Returns exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.list and args.export:
        print("Error: --list cannot be combined with --export", file=sys.stderr)
        return 1

    color_mode = "never" if args.no_color else args.color
    configure_color_mode_fn(color_mode)
    configure_logging_fn(args.debug)
    logger.debug("component-hub starting, cwd=%s", Path.cwd())

    result = resolve_catalog_fn(args)
    if isinstance(result, int):
        return result
    entries = result
    if not entries:
        print(
            build_actionable_error(
                "start component-hub",
                why="the catalog contains no components",
                next_step="add components to the file or omit -i",
            ),
            file=sys.stderr,
        )
        return 1

    try:
        store = CatalogStore(entries)
    except CatalogError as e:
        print(
            build_actionable_error(
                "start component-hub",
                why=str(e),
                next_step="fix the catalog so ids and page names are unique",
            ),
            file=sys.stderr,
        )
        return 1

    config = load_config_fn()

    if args.list:
        return _print_listing(store, args.search or "", args.category or ALL_CATEGORIES)
    if args.export:
        return _print_export(store, args.export, config.export_language)

    if not validate_interactive_tty_fn():
        print(
            "Error: component-hub requires an interactive TTY for the full UI.",
            file=sys.stderr,
        )
        print("Next steps:", file=sys.stderr)
        print("  - Run component-hub directly in a terminal session", file=sys.stderr)
        print("  - Use --list or --export ID for non-interactive output", file=sys.stderr)
        print("  - Use --help for command documentation", file=sys.stderr)
        return 2

    if app_factory is None:
        from component_hub.app import ComponentHub as _ComponentHub

        app_factory = _ComponentHub

    app = app_factory(
        store,
        config=config,
        restore_session=not args.no_restore,
        ascii_icons=args.ascii,
        initial_search=args.search,
        initial_category=args.category,
    )
    app.run()
    return 0


__all__ = [
    "_configure_color_mode",
    "_configure_logging",
    "_print_export",
    "_print_listing",
    "_resolve_catalog",
    "_resolve_input_file",
    "_validate_interactive_tty",
    "main",
]
