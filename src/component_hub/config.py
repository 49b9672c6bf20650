"""Configuration persistence: load and save UI preferences and session state."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from component_hub.models import (
    ALL_CATEGORIES,
    CATEGORY_FILTERS,
    CONFIG_APP_NAME,
    DEFAULT_EXPORT_LANGUAGE,
    SessionState,
    UserConfig,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration Persistence
# ============================================================================
#
# Validation contract: _dict_to_config() guarantees valid output for any input:
#
#   Field                    Rule                         Handler
#   ───────────────────────  ───────────────────────────  ─────────────────────
#   session.category_filter  in CATEGORY_FILTERS          _parse_session_state
#   export_language          non-empty, no whitespace     _parse_export_language
#   scalar fields            type-checked via _safe_get() _dict_to_config
#
# Catalog data never passes through here; only UI preferences and the
# session needed to restore filters and the cursor.
#
CONFIG_FILENAME = "config.json"


def get_config_path() -> Path:
    """Get the path to the configuration file.

    Uses platformdirs for cross-platform config directory:
    - Linux: ~/.config/component-hub/config.json
    - macOS: ~/Library/Application Support/component-hub/config.json
    - Windows: %APPDATA%/component-hub/config.json
    """
    config_dir = Path(user_config_dir(CONFIG_APP_NAME))
    return config_dir / CONFIG_FILENAME


def _config_to_dict(config: UserConfig) -> dict[str, Any]:
    """Serialize UserConfig to a JSON-compatible dictionary."""
    return {
        "version": config.version,
        "theme_name": config.theme_name,
        "export_language": config.export_language,
        "export_dir": config.export_dir,
        "ascii_icons": config.ascii_icons,
        "show_preview": config.show_preview,
        "session": {
            "search_term": config.session.search_term,
            "category_filter": config.session.category_filter,
            "highlighted_id": config.session.highlighted_id,
        },
    }


def _safe_get(data: dict, key: str, default: Any, expected_type: type) -> Any:
    """Safely get a value from dict with type validation.

    Returns the default if key is missing or value has wrong type.
    """
    value = data.get(key, default)
    if not isinstance(value, expected_type):
        return default
    return value


def _parse_export_language(raw: Any) -> str:
    """Validate the fence language tag; it must be a single bare word."""
    if not isinstance(raw, str) or not raw or any(ch.isspace() for ch in raw):
        return DEFAULT_EXPORT_LANGUAGE
    return raw


def _parse_session_state(data: dict[str, Any]) -> SessionState:
    """Parse the session state section from config data."""
    session_data = data.get("session", {})
    if not isinstance(session_data, dict):
        session_data = {}

    category_filter = _safe_get(session_data, "category_filter", ALL_CATEGORIES, str)
    if category_filter not in CATEGORY_FILTERS:
        logger.warning("Invalid saved category filter %r, defaulting to 'all'", category_filter)
        category_filter = ALL_CATEGORIES

    highlighted_raw = session_data.get("highlighted_id")

    return SessionState(
        search_term=_safe_get(session_data, "search_term", "", str),
        category_filter=category_filter,
        highlighted_id=highlighted_raw if isinstance(highlighted_raw, str) else None,
    )


def _dict_to_config(data: dict[str, Any]) -> UserConfig:
    """Deserialize a dictionary to UserConfig with type validation."""
    return UserConfig(
        session=_parse_session_state(data),
        theme_name=_safe_get(data, "theme_name", "monokai", str),
        export_language=_parse_export_language(data.get("export_language")),
        export_dir=_safe_get(data, "export_dir", "", str),
        ascii_icons=_safe_get(data, "ascii_icons", False, bool),
        show_preview=_safe_get(data, "show_preview", True, bool),
        version=_safe_get(data, "version", 1, int),
    )


def _backup_corrupt_config(config_path: Path) -> None:
    """Move an unreadable config aside so the next save starts clean."""
    backup = config_path.with_name(config_path.name + ".corrupt")
    try:
        os.replace(config_path, backup)
    except OSError as e:
        logger.warning("Could not back up corrupt config file: %s", e)


def load_config() -> UserConfig:
    """Load configuration from disk.

    Returns default config if file doesn't exist or is corrupted. A
    corrupted file is renamed to ``config.json.corrupt`` and the returned
    config has ``config_defaulted`` set so the UI can warn once.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return UserConfig()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Config file is not valid UTF-8 JSON, using defaults: %s", e)
        _backup_corrupt_config(config_path)
        return UserConfig(config_defaulted=True)
    except OSError as e:
        logger.warning("Could not read config file, using defaults: %s", e)
        return UserConfig()

    if not isinstance(data, dict):
        logger.warning("Config file root is %s, not an object; using defaults", type(data).__name__)
        _backup_corrupt_config(config_path)
        return UserConfig(config_defaulted=True)
    return _dict_to_config(data)


def save_config(config: UserConfig) -> bool:
    """Save configuration to disk atomically.

    Uses write-to-tempfile + os.replace() to prevent partial writes
    on crash/interrupt from corrupting the config file.

    Creates the config directory if it doesn't exist.
    Returns True on success, False on failure.
    """
    config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = _config_to_dict(config)
        json_str = json.dumps(data, indent=2, ensure_ascii=False)
        fd, tmp_path = tempfile.mkstemp(dir=config_path.parent, suffix=".tmp", prefix=".config-")
        closed = False
        try:
            os.write(fd, json_str.encode("utf-8"))
            os.close(fd)
            closed = True
            os.replace(tmp_path, config_path)
        except BaseException:
            if not closed:
                os.close(fd)
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        return True
    except OSError as e:
        logger.error("Failed to save config: %s", e)
        return False


__all__ = [
    "CONFIG_APP_NAME",
    "CONFIG_FILENAME",
    "get_config_path",
    "load_config",
    "save_config",
]
