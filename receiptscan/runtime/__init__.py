"""Runtime infrastructure for receiptscan.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Merchant matcher loading via load_merchant_matchers()

Usage:
    from receiptscan.runtime import get_logger, get_paths

    logger = get_logger(__name__)
    paths = get_paths()
    print(paths.root, paths.receipts)
"""

from receiptscan.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from receiptscan.runtime.merchant_rules import build_merchant_matchers, load_merchant_matchers
from receiptscan.runtime.paths import (
    ProjectPaths,
    get_paths,
    reset_paths,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "build_merchant_matchers",
    "load_merchant_matchers",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
