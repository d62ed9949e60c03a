"""Centralized path management for receiptscan.

This module provides a single source of truth for all project paths,
so modules don't resolve config and output locations on their own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory (RECEIPTSCAN_ROOT or cwd)."""
    env_root = os.environ.get("RECEIPTSCAN_ROOT")
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for all project-related paths.

    All paths are computed relative to the project root, so callers agree on
    locations regardless of which module asks.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        # Ensure root is resolved to absolute path
        self.root = self.root.resolve()

    # --- Source code paths ---
    @property
    def src(self) -> Path:
        """Installed receiptscan package directory."""
        return Path(__file__).resolve().parents[1]

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def merchant_rules(self) -> Path:
        """Project-level merchant identity matcher TOML file."""
        return self.config / "merchant_rules.toml"

    @property
    def default_merchant_rules(self) -> Path:
        """Bundled default merchant identity matchers."""
        return self.src / "receipt" / "rules" / "default_merchant_rules.toml"

    # --- Receipt output paths ---
    @property
    def receipts(self) -> Path:
        """Root receipts directory."""
        return self.root / "receipts"

    @property
    def receipts_ocr_json(self) -> Path:
        """Raw OCR results (JSON)."""
        return self.receipts / "ocr_json"


# Module-level singleton
_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance.

    Returns:
        The global ProjectPaths instance.
    """
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Drop the cached ProjectPaths so the root is resolved again."""
    global _paths
    _paths = None
