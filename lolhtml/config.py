"""Workspace configuration support for the lolhtml CLI."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


CONFIG_FILENAMES = ("lolhtml.toml", ".lolhtmlrc")


class ConfigError(Exception):
    """Raised when a workspace configuration file is missing or malformed."""

    def __init__(
        self,
        message: str,
        *,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.context = context or {}


@dataclass
class WorkspaceDefaults:
    """Defaults applied to every build unless overridden on the command line."""

    out_dir: Optional[Path] = None
    open_browser: bool = False
    browser: Optional[str] = None
    source_suffix: str = ".lol"


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    defaults: WorkspaceDefaults = field(default_factory=WorkspaceDefaults)
    path: Optional[Path] = None


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _parse_defaults(data: Dict[str, Any], root: Path) -> WorkspaceDefaults:
    defaults_section = data.get("defaults") or {}
    if not isinstance(defaults_section, dict):
        raise ConfigError(
            "The [defaults] section must be a table",
            hint="Use key = value pairs under [defaults]",
        )

    out_dir_raw = defaults_section.get("out_dir")
    out_dir: Optional[Path] = None
    if out_dir_raw:
        out_dir = Path(str(out_dir_raw))
        if not out_dir.is_absolute():
            out_dir = (root / out_dir).resolve()

    browser_raw = defaults_section.get("browser")
    suffix = str(defaults_section.get("source_suffix") or WorkspaceDefaults.source_suffix)
    if not suffix.startswith("."):
        suffix = f".{suffix}"

    return WorkspaceDefaults(
        out_dir=out_dir,
        open_browser=bool(defaults_section.get("open_browser", WorkspaceDefaults.open_browser)),
        browser=str(browser_raw) if browser_raw else None,
        source_suffix=suffix,
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        if not explicit.exists():
            raise ConfigError(
                f"Configuration file not found: {explicit}",
                hint="Check the --config path",
            )
        return explicit
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig()

    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(
            f"Invalid configuration file {config_path}: {exc}",
            context={"path": str(config_path)},
        ) from exc

    return WorkspaceConfig(
        defaults=_parse_defaults(data, root),
        path=config_path,
    )


__all__ = [
    "CONFIG_FILENAMES",
    "ConfigError",
    "WorkspaceDefaults",
    "WorkspaceConfig",
    "locate_config_file",
    "load_workspace_config",
]
