"""
CLI context and workspace configuration resolution.
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import ConfigError, WorkspaceConfig, load_workspace_config
from .errors import CLIConfigError

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """
    Shared context resolved from workspace configuration.

    Attributes:
        workspace_root: Root directory of the workspace
        config: Parsed workspace configuration
    """

    workspace_root: Path
    config: WorkspaceConfig


def load_cli_config(workspace_root: Path, config_path: Optional[Path] = None) -> WorkspaceConfig:
    """Load workspace configuration, converting failures into CLI errors."""
    try:
        config = load_workspace_config(workspace_root, config_path)
    except ConfigError as exc:
        raise CLIConfigError(exc.message, hint=exc.hint, context=exc.context) from exc
    if config.path is not None:
        logger.info("Loaded configuration from %s", config.path)
    return config


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """
    Retrieve CLIContext from parsed arguments.

    The context is attached to ``args`` by :func:`lolhtml.cli.main` before
    command execution.

    Raises:
        CLIConfigError: If context was not initialized
    """
    ctx = getattr(args, "cli_context", None)
    if ctx is None:
        raise CLIConfigError(
            "CLI context was not initialized before command execution",
            hint="This is an internal error - please report it",
            code="CLI_CONTEXT_NOT_INITIALIZED"
        )
    return ctx
