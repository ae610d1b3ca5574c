from __future__ import annotations

"""
Filesystem Materializer.

Replays parsed tree entries against a target root. Creation is
idempotent: directories that exist are left alone and existing files are
never truncated. A failure on one entry is logged and recorded, and the
replay carries on with the next one.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List

from foldertree.domain.pipeline_models import MaterializeFailure
from foldertree.domain.tree_models import TreeEntry
from foldertree.infra.fs import path_exists, touch_if_missing

logger = logging.getLogger(__name__)


@dataclass
class MaterializeReport:
    """Mutable accumulator filled during a replay."""
    created: List[str] = field(default_factory=list)
    existing: List[str] = field(default_factory=list)
    failures: List[MaterializeFailure] = field(default_factory=list)


def resolve_entry_path(target_root: str, entry: TreeEntry) -> str:
    """Join a forward-slash relative path onto the target root."""
    return os.path.join(target_root, *entry.relative_path.split("/"))


def is_within_root(target_root: str, path: str) -> bool:
    """
    Check that path stays inside target_root once '..' segments and
    symlinks are resolved.
    """
    root_real = os.path.realpath(target_root)
    path_real = os.path.realpath(path)
    return path_real == root_real or path_real.startswith(root_real.rstrip(os.sep) + os.sep)


def materialize_entries(entries: Iterable[TreeEntry], target_root: str) -> MaterializeReport:
    """
    Create directories and empty files for every entry.

    Args:
        entries: Parsed entries in document order.
        target_root: Existing root directory to build under.

    Returns:
        MaterializeReport: Created, pre-existing and failed paths.
    """
    report = MaterializeReport()

    for entry in entries:
        full_path = resolve_entry_path(target_root, entry)
        try:
            if not is_within_root(target_root, full_path):
                raise PermissionError(f"Entry '{entry.relative_path}' resolves outside the target directory")
            if entry.is_dir:
                created = _create_directory(full_path)
            else:
                created = _create_file(full_path)
        except OSError as e:
            logger.error(f"Error creating {full_path}: {e}")
            report.failures.append(MaterializeFailure(path=full_path, error=str(e)))
            continue

        if created:
            logger.debug(f"Created {'directory' if entry.is_dir else 'file'}: {full_path}")
            report.created.append(full_path)
        else:
            report.existing.append(full_path)

    return report


def _create_directory(path: str) -> bool:
    if path_exists(path):
        if not os.path.isdir(path):
            raise FileExistsError(f"A file already exists at directory path '{path}'")
        return False
    os.makedirs(path, exist_ok=True)
    return True


def _create_file(path: str) -> bool:
    parent = os.path.dirname(path)
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, exist_ok=True)
    return touch_if_missing(path)
