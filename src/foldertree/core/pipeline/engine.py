from __future__ import annotations

"""
Core Orchestration Pipeline.

Entry points used by the interface layer. Each run normalizes the
configuration, resolves paths, delegates to FolderStructureManager and
converts domain errors into failed result objects so the caller only has
to inspect result.ok.
"""

import logging
import os
from typing import Any, Dict, Optional

from foldertree.core.pipeline.config_validator import validate_config
from foldertree.core.services.structure_service import FolderStructureManager
from foldertree.domain.errors import FolderTreeError
from foldertree.domain.pipeline_models import (
    CreationResult,
    GenerationResult,
    create_creation_error,
    create_generation_error,
)
from foldertree.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_create(
        input_path: str,
        target_dir: str,
        config: Optional[Dict[str, Any]] = None,
) -> CreationResult:
    """
    Execute the creation path for a tree-text file.

    Args:
        input_path: Tree-text document.
        target_dir: Root directory for the new structure.
        config: Raw configuration; only 'encoding' is relevant here.

    Returns:
        CreationResult: ok=False with the aggregated error on failure.
    """
    cfg = _normalized_config(config)

    cwd = os.getcwd()
    input_abs = normalize_path(input_path, cwd)
    target_abs = normalize_path(target_dir, cwd)
    logger.info(f"Creating structure from {input_abs} into {target_abs}")

    manager = FolderStructureManager(encoding=cfg["encoding"])
    try:
        return manager.create_from_text(input_abs, target_abs)
    except FolderTreeError as e:
        return create_creation_error(str(e), input_abs, target_abs)


def run_generate(
        source_dir: str,
        output_path: Optional[str],
        config: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Execute the generation path for a directory.

    Args:
        source_dir: Directory to scan.
        output_path: Destination file; empty or None keeps the text in memory.
        config: Raw configuration (include_hidden, gitignore_paths, ...).

    Returns:
        GenerationResult: ok=False with the error message on failure.
    """
    cfg = _normalized_config(config)

    cwd = os.getcwd()
    source_abs = normalize_path(source_dir, cwd)
    output_abs = normalize_path(output_path, cwd) if output_path else ""

    manager = FolderStructureManager(
        include_hidden=cfg["include_hidden"],
        use_source_gitignore=cfg["use_source_gitignore"],
        encoding=cfg["encoding"],
    )
    for path in cfg["gitignore_paths"]:
        manager.load_ignore_rules(normalize_path(path, cwd))

    try:
        return manager.generate_text(
            source_abs,
            output_abs or None,
            print_to_log=cfg["print_tree"],
        )
    except FolderTreeError as e:
        logger.error(str(e))
        return create_generation_error(str(e), source_abs, output_abs, cfg["include_hidden"])


def _normalized_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")
    return cfg
