from __future__ import annotations

"""
Folder Structure Service.

Public operation surface tying both directions together:

* creation path:   tree text -> validator -> parser -> materializer -> disk
* generation path: disk -> scanner (+ ignore rules) -> renderer -> tree text

Operations raise typed domain errors; per-entry materialization failures
are reported on the returned result instead.
"""

import logging
import os
from typing import List, Optional

from foldertree.core.analysis.tree_generator import build_matcher, generate_directory_tree
from foldertree.core.builder.materializer import materialize_entries
from foldertree.core.builder.parser import parse_tree_text
from foldertree.core.grammar.validator import validate_structure
from foldertree.domain.errors import FolderTreeIOError
from foldertree.domain.pipeline_models import (
    CreationResult,
    GenerationResult,
    create_creation_success,
    create_generation_success,
)
from foldertree.infra.fs import DEFAULT_ENCODING, read_text_file, safe_mkdir

logger = logging.getLogger(__name__)


class FolderStructureManager:
    """
    Creates folder structures from tree text and renders directories back.

    Ignore rule files registered with load_ignore_rules() are remembered and
    a fresh matcher is built for every generate_text() call.
    """

    def __init__(
            self,
            include_hidden: bool = False,
            use_source_gitignore: bool = True,
            encoding: str = DEFAULT_ENCODING,
    ):
        """
        Args:
            include_hidden: Disable the built-in default ignore table.
            use_source_gitignore: Also honor '<source>/.gitignore' when generating.
            encoding: Text encoding of tree-text input and output files.
        """
        self.include_hidden = include_hidden
        self.use_source_gitignore = use_source_gitignore
        self.encoding = encoding
        self._gitignore_paths: List[str] = []

    # -------------------------------------------------------------------------
    # IGNORE RULES
    # -------------------------------------------------------------------------

    @property
    def gitignore_paths(self) -> List[str]:
        return list(self._gitignore_paths)

    def load_ignore_rules(self, gitignore_path: str) -> None:
        """
        Register a gitignore-style file for subsequent generations.

        A missing or unreadable file is silently skipped at generation time.
        """
        self._gitignore_paths.append(os.path.abspath(gitignore_path))

    # -------------------------------------------------------------------------
    # CREATION PATH
    # -------------------------------------------------------------------------

    def validate_file(self, input_path: str) -> bool:
        """
        Validate a tree-text file without touching the filesystem.

        Raises:
            NotFoundError: If the input file does not exist.
            FolderTreeIOError: If the input file cannot be read or decoded.
            StructureValidationError: If the content is malformed.
        """
        return validate_structure(read_text_file(input_path, self.encoding))

    def create_from_text(self, input_path: str, target_dir: str) -> CreationResult:
        """
        Build the structure described by a tree-text file.

        Args:
            input_path: Tree-text file.
            target_dir: Root to create the structure under; created if missing.

        Raises:
            NotFoundError: If the input file does not exist.
            StructureValidationError: If the content is malformed. Nothing is
                created in that case.
            FolderTreeIOError: If the input file cannot be read or decoded, or
                the target root cannot be created.

        Returns:
            CreationResult: Created, existing and failed entries.
        """
        input_abs = os.path.abspath(input_path)
        document = read_text_file(input_abs, self.encoding)
        return self._create(document, target_dir, input_abs)

    def create_from_string(self, document: str, target_dir: str) -> CreationResult:
        """Same as create_from_text() for an in-memory document."""
        return self._create(document, target_dir, "")

    def _create(self, document: str, target_dir: str, input_path: str) -> CreationResult:
        validate_structure(document)

        target_abs = os.path.abspath(target_dir)
        ok, err = safe_mkdir(target_abs)
        if not ok:
            raise FolderTreeIOError(f"Cannot create target directory '{target_abs}': {err}")

        entries = parse_tree_text(document)
        report = materialize_entries(entries, target_abs)

        if report.failures:
            logger.warning(
                f"{len(report.failures)} of {len(entries)} entries could not be created "
                f"under {target_abs}."
            )
        logger.info(f"Structure created in {target_abs}")

        return create_creation_success(
            input_path=input_path,
            target_dir=target_abs,
            entries=entries,
            created=report.created,
            existing=report.existing,
            failures=report.failures,
        )

    # -------------------------------------------------------------------------
    # GENERATION PATH
    # -------------------------------------------------------------------------

    def generate_text(
            self,
            source_dir: str,
            output_path: Optional[str] = None,
            include_hidden: Optional[bool] = None,
            print_to_log: bool = False,
    ) -> GenerationResult:
        """
        Render a directory as tree text.

        Args:
            source_dir: Directory to scan.
            output_path: File to write the text to; skipped when empty.
            include_hidden: Per-call override of the manager setting.
            print_to_log: Log the rendered tree at INFO.

        Raises:
            NotFoundError: If the source directory does not exist.
            FolderTreeIOError: If scanning or writing fails.

        Returns:
            GenerationResult: Rendered lines and the output location.
        """
        hidden = self.include_hidden if include_hidden is None else include_hidden
        source_abs = os.path.abspath(source_dir)

        matcher = build_matcher(
            source_abs,
            include_hidden=hidden,
            gitignore_paths=self._gitignore_paths,
            use_source_gitignore=self.use_source_gitignore,
        )

        output_abs = os.path.abspath(output_path) if output_path else ""
        lines = generate_directory_tree(
            source_abs,
            matcher=matcher,
            print_to_log=print_to_log,
            save_path=output_abs,
            encoding=self.encoding,
        )

        return create_generation_success(
            source_dir=source_abs,
            tree_lines=lines,
            output_path=output_abs,
            include_hidden=hidden,
            ignore_sources=matcher.sources,
        )

    def generate_structure_text(self, source_dir: str, output_path: str) -> GenerationResult:
        """Scan source_dir and write its tree text to output_path."""
        return self.generate_text(source_dir, output_path)
