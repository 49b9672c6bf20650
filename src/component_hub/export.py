"""Export formatting for single-entry copy and bulk Markdown code blocks."""

from __future__ import annotations

import re
from collections.abc import Sequence

from component_hub.models import DEFAULT_EXPORT_LANGUAGE, CatalogEntry

# Default subdirectory in the home folder for file exports
DEFAULT_EXPORT_DIR = "component-hub-exports"

_BACKTICK_RUN_RE = re.compile(r"`{3,}")


def format_single(code: str) -> str:
    """Return the resolved code unchanged for a single-entry clipboard copy."""
    return code


def code_fence_for(code: str) -> str:
    """Return a backtick fence longer than any backtick run inside code.

    Plain code gets the usual three backticks.
    """
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(code)), default=0)
    return "`" * max(3, longest + 1)


def format_code_block(file_path: str, code: str, language: str = DEFAULT_EXPORT_LANGUAGE) -> str:
    """Format one export block: bold path header, fenced code, blank separator."""
    fence = code_fence_for(code)
    return f"**{file_path}**\n{fence}{language}\n{code}\n{fence}\n\n"


def format_entry_blocks(
    entry: CatalogEntry, language: str = DEFAULT_EXPORT_LANGUAGE
) -> list[str]:
    """Blocks for one entry: one per variant in order, or one for a plain entry."""
    if entry.variants:
        return [
            format_code_block(variant.file_path, variant.code, language)
            for variant in entry.variants
        ]
    return [format_code_block(entry.file_path, entry.code, language)]


def format_bulk(
    entries: Sequence[CatalogEntry], language: str = DEFAULT_EXPORT_LANGUAGE
) -> str:
    """Serialize entries, in the given order, into one clipboard payload.

    Trailing whitespace is trimmed from the result. An empty sequence
    yields an empty string.
    """
    blocks: list[str] = []
    for entry in entries:
        blocks.extend(format_entry_blocks(entry, language))
    return "".join(blocks).rstrip()


__all__ = [
    "DEFAULT_EXPORT_DIR",
    "code_fence_for",
    "format_bulk",
    "format_code_block",
    "format_entry_blocks",
    "format_single",
]
