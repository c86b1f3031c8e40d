"""
Plot style persistence (platformdirs + JSON).

Persisted items (schema v1):
- style: PlotStyle dict representation

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches -> defaults are used (with a warning)
- Unknown keys in loaded JSON are ignored with warnings
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from monsterstats.plotting.plot_style import PlotStyle
from monsterstats.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

APP_NAME = "monsterstats"
DEFAULT_FILENAME = "plot_style.json"


@dataclass
class StyleConfigData:
    """JSON-serializable config payload."""
    schema_version: int = SCHEMA_VERSION
    style: Dict[str, Any] = field(default_factory=lambda: PlotStyle().to_dict())

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "style": self.style,
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "StyleConfigData":
        """Tolerant loader: ignores unknown keys, tolerates a missing style."""
        try:
            schema_version = int(d.get("schema_version", -1))
        except (TypeError, ValueError):
            logger.warning(f"Invalid schema_version {d.get('schema_version')!r} in style config")
            schema_version = -1
        style = d.get("style", {})
        if not isinstance(style, dict):
            logger.warning("style is not a dict, using defaults")
            style = {}

        for key in d.keys():
            if key not in {"schema_version", "style"}:
                logger.warning(f"Unknown key '{key}' in style config, ignoring")

        return cls(schema_version=schema_version, style=dict(style))


class StyleConfig:
    """Manager for loading/saving the default PlotStyle to disk."""

    def __init__(self, *, path: Path, data: Optional[StyleConfigData] = None):
        self.path = path
        self.data = data if data is not None else StyleConfigData()

    @staticmethod
    def default_config_path(
        app_name: str = APP_NAME,
        filename: str = DEFAULT_FILENAME,
        app_author: str | None = None,
    ) -> Path:
        """
        OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/monsterstats/plot_style.json
        Linux:   ~/.config/monsterstats/plot_style.json
        Windows: %APPDATA%\\monsterstats\\plot_style.json
        """
        return Path(user_config_dir(app_name, app_author)) / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = APP_NAME,
        filename: str = DEFAULT_FILENAME,
        schema_version: int = SCHEMA_VERSION,
    ) -> "StyleConfig":
        """
        Load config from disk.

        Missing file, invalid JSON, a non-dict payload or a schema mismatch
        all fall back to defaults.
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename)
        default_data = StyleConfigData(schema_version=schema_version)

        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"Style config file not found at {path}, using defaults")
            return cls(path=path, data=default_data)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Style config file at {path} could not be read: {e}, using defaults")
            return cls(path=path, data=default_data)

        if not isinstance(parsed, dict):
            logger.warning(f"Style config file at {path} does not contain a dict, using defaults")
            return cls(path=path, data=default_data)

        loaded = StyleConfigData.from_json_dict(parsed)
        if loaded.schema_version != schema_version:
            logger.warning(
                f"Style config schema version mismatch: loaded={loaded.schema_version}, "
                f"expected={schema_version}, resetting to defaults"
            )
            return cls(path=path, data=default_data)
        return cls(path=path, data=loaded)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.data.to_json_dict(), indent=2), encoding="utf-8")
            logger.info(f"Saved style config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving style config to {self.path}: {e}")
            raise

    def get_style(self) -> PlotStyle:
        """Stored style, or defaults if the stored values are invalid."""
        try:
            return PlotStyle.from_dict(self.data.style)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid style in config: {e}, using defaults")
            return PlotStyle()

    def set_style(self, style: PlotStyle) -> None:
        self.data.style = style.to_dict()
