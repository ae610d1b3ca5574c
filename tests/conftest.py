from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for tree-text documents and sample directory layouts.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def basic_tree_text() -> str:
    """Canonical two-folder example document."""
    return (
        "├── folder1/\n"
        "│   ├── file1.txt\n"
        "│   └── file2.txt\n"
        "└── folder2/\n"
        "    └── subfolder/\n"
        "        └── file3.txt\n"
    )


@pytest.fixture
def nested_tree_text() -> str:
    """Deeper document mixing branch and last connectors."""
    return (
        "├── api/\n"
        "│   ├── Dockerfile\n"
        "│   ├── requirements.txt\n"
        "│   └── app/\n"
        "│       ├── __init__.py\n"
        "│       ├── models/\n"
        "│       │   ├── __init__.py\n"
        "│       │   └── user.py\n"
        "│       └── routes/\n"
        "│           ├── __init__.py\n"
        "│           └── auth.py\n"
    )


@pytest.fixture
def make_tree() -> Callable[[Path, Dict[str, Optional[dict]]], None]:
    """
    Return a helper that materializes a nested dict on disk.

    Keys are names; a None value is an empty file, a dict is a directory.
    """
    def _make(base: Path, structure: Dict[str, Optional[dict]]) -> None:
        for name, content in structure.items():
            target = base / name
            if content is None:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("", encoding="utf-8")
            else:
                target.mkdir(parents=True, exist_ok=True)
                _make(target, content)

    return _make
