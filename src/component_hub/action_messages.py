"""UI-facing copy builders for errors and copy/export notifications."""

from __future__ import annotations


def _ensure_sentence(text: str) -> str:
    """Return text with terminal sentence punctuation."""
    cleaned = text.strip()
    if not cleaned:
        return ""
    if cleaned.endswith((".", "!", "?")):
        return cleaned
    return f"{cleaned}."


def build_actionable_error(
    action: str,
    *,
    next_step: str,
    why: str | None = None,
) -> str:
    """Build a 2-3 line actionable error message."""
    lines = [f"Could not {action.strip()}."]
    if why:
        lines.append(f"Why: {_ensure_sentence(why)}")
    lines.append(build_next_step_hint(next_step))
    return "\n".join(lines)


def build_next_step_hint(next_step: str) -> str:
    """Build a canonical next-step guidance line."""
    return f"Next step: {_ensure_sentence(next_step)}"


def build_actionable_warning(
    message: str,
    *,
    next_step: str,
    why: str | None = None,
) -> str:
    """Build a 2-3 line actionable warning message."""
    lines = [_ensure_sentence(message)]
    if why:
        lines.append(f"Why: {_ensure_sentence(why)}")
    lines.append(build_next_step_hint(next_step))
    return "\n".join(lines)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return "1 component" / "3 components" style counts."""
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"


def build_copy_code_notification() -> tuple[str, str]:
    """(title, description) shown after copying one entry's code."""
    return ("Code copied!", "The component code has been copied to your clipboard.")


def build_bulk_copy_notification(entry_count: int) -> tuple[str, str]:
    """(title, description) shown after a bulk copy of entry_count entries."""
    return (
        "Components copied!",
        f"{entry_count} components copied to clipboard in LLM format.",
    )


def build_file_export_notification(entry_count: int, filename: str) -> tuple[str, str]:
    """(title, description) shown after exporting selected entries to a file."""
    return ("Components exported!", f"{pluralize(entry_count, 'component')} written to {filename}.")


def build_empty_selection_warning() -> tuple[str, str]:
    """(title, description) shown when a bulk action runs with nothing selected."""
    return (
        "No components selected",
        build_next_step_hint("press space on a component to select it first"),
    )


def build_clipboard_failure_error() -> tuple[str, str]:
    """(title, description) shown when the platform clipboard write fails."""
    return (
        "Copy failed",
        build_actionable_error(
            "write to the clipboard",
            why="no clipboard tool (pbcopy, xclip, xsel, clip) accepted the text",
            next_step="install xclip or xsel, or export to a file with E",
        ),
    )


__all__ = [
    "build_actionable_error",
    "build_actionable_warning",
    "build_bulk_copy_notification",
    "build_clipboard_failure_error",
    "build_copy_code_notification",
    "build_empty_selection_warning",
    "build_file_export_notification",
    "build_next_step_hint",
    "pluralize",
]
