from __future__ import annotations

"""
Directory Tree Generator.

Orchestrates the generation path: build the ignore matcher for the run,
scan the source directory, render the tree and optionally persist it.
"""

import logging
import os
from typing import List, Optional, Sequence

from foldertree.core.analysis.scanner import scan_directory
from foldertree.core.analysis.tree_renderer import render_tree_structure
from foldertree.core.filtering.ignore_rules import IgnoreMatcher
from foldertree.domain.errors import FolderTreeIOError
from foldertree.infra.fs import DEFAULT_ENCODING, write_text_file

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_matcher(
        source_dir: str,
        include_hidden: bool = False,
        gitignore_paths: Optional[Sequence[str]] = None,
        use_source_gitignore: bool = False,
) -> IgnoreMatcher:
    """
    Assemble a fresh IgnoreMatcher for one generation run.

    Rule order: built-in defaults (unless include_hidden), then each
    explicit pattern file, then the source directory's own .gitignore.

    Args:
        source_dir: Directory being scanned.
        include_hidden: Disable the built-in default table.
        gitignore_paths: Extra gitignore-style files, applied in order.
        use_source_gitignore: Also load '<source_dir>/.gitignore'.

    Returns:
        IgnoreMatcher: Configured matcher.
    """
    matcher = IgnoreMatcher(include_hidden=include_hidden)
    for path in gitignore_paths or []:
        matcher.load_rules(path)
    if use_source_gitignore:
        local = os.path.join(os.path.abspath(source_dir), ".gitignore")
        if os.path.abspath(local) not in [os.path.abspath(p) for p in gitignore_paths or []]:
            matcher.load_rules(local)
    return matcher


def generate_directory_tree(
        input_path: str,
        matcher: Optional[IgnoreMatcher] = None,
        print_to_log: bool = False,
        save_path: str = "",
        encoding: str = DEFAULT_ENCODING,
) -> List[str]:
    """
    Generate the tree-text lines describing a directory.

    Args:
        input_path: Source directory for the scan.
        matcher: Ignore rules; defaults to the built-in table.
        print_to_log: Whether to log the output to INFO.
        save_path: Optional file path to persist the tree.
        encoding: Text encoding of the saved file.

    Raises:
        NotFoundError: If the source directory is missing.
        FolderTreeIOError: If scanning or saving fails.

    Returns:
        List[str]: Visual lines of the generated tree.
    """
    logger.info(f"Generating directory tree for: {input_path}")

    tree_structure = scan_directory(input_path, matcher)

    lines: List[str] = []
    render_tree_structure(tree_structure, lines)

    if print_to_log:
        logger.info("Tree Preview:\n" + "\n".join(lines))

    if save_path:
        _save_tree_to_disk(save_path, lines, encoding)

    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _save_tree_to_disk(save_path: str, lines: List[str], encoding: str = DEFAULT_ENCODING) -> None:
    """Persist tree lines; an empty tree produces an empty file."""
    try:
        write_text_file(save_path, "".join(f"{line}\n" for line in lines), encoding=encoding)
    except (OSError, UnicodeEncodeError, LookupError) as e:
        raise FolderTreeIOError(f"Failed to save tree to '{save_path}'", e) from e
    logger.info(f"Tree saved to file: {save_path}")
