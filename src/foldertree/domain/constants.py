from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the tree-text grammar tokens shared by the validator, parser
and renderer, together with the built-in ignore table applied during
directory scans.
"""

from typing import Tuple

APP_NAME = "FolderTree"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE-TEXT GRAMMAR TOKENS
# -----------------------------------------------------------------------------

BRANCH_CONNECTOR = "├──"
LAST_CONNECTOR = "└──"
CONNECTORS: Tuple[str, str] = (BRANCH_CONNECTOR, LAST_CONNECTOR)

VERTICAL_BAR = "│"
FILLER_CHARS = " " + VERTICAL_BAR

# Width of one nesting level in rendered output
INDENT_UNIT = 4
BRANCH_PREFIX = VERTICAL_BAR + " " * (INDENT_UNIT - 1)
LAST_PREFIX = " " * INDENT_UNIT

DIRECTORY_SUFFIX = "/"

# -----------------------------------------------------------------------------
# DEFAULT IGNORE TABLE
# -----------------------------------------------------------------------------

DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = (
    # Version control
    ".git/",
    ".svn/",
    ".hg/",
    # Dependencies
    "node_modules/",
    "bower_components/",
    ".venv/",
    "venv/",
    "__pycache__/",
    # IDE / editors
    ".idea/",
    ".vscode/",
    "*.swp",
    "*.swo",
    # Build and cache output
    "dist/",
    "build/",
    ".cache/",
    ".next/",
    ".pytest_cache/",
    "*.pyc",
    # OS artifacts
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
    # Logs
    "*.log",
    "logs/",
    # Coverage
    "coverage/",
    ".nyc_output/",
    "htmlcov/",
    # Environment and secrets
    ".env",
    ".env.*",
    "*.pem",
    "*.key",
)
