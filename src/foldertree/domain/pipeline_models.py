from __future__ import annotations

"""
Operation Result Data Models.

Defines the result structures and factory functions used to communicate
execution outcomes between the service layer and the interface (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from foldertree.domain.tree_models import TreeEntry

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MaterializeFailure:
    """
    An entry that could not be created during materialization.

    Attributes:
        path: Absolute path that failed.
        error: Description of the underlying OS error.
    """
    path: str
    error: str


@dataclass(frozen=True)
class CreationResult:
    """
    Outcome of building a filesystem structure from tree text.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Tree-text document that was read (empty for in-memory input).
        target_dir: Absolute root the structure was created under.
        entries: Parsed entries in document order.
        created: Absolute paths newly created.
        existing: Absolute paths that were already present and left untouched.
        failures: Entries that could not be created.
        summary: Execution counters.
    """
    ok: bool
    error: str

    input_path: str
    target_dir: str

    entries: List[TreeEntry] = field(default_factory=list)
    created: List[str] = field(default_factory=list)
    existing: List[str] = field(default_factory=list)
    failures: List[MaterializeFailure] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of rendering a directory into tree text.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        source_dir: Absolute directory that was scanned.
        output_path: File the text was written to (empty when not persisted).
        tree_lines: Rendered lines.
        include_hidden: Whether the default ignore table was disabled.
        ignore_sources: Pattern files that contributed rules.
        summary: Execution counters.
    """
    ok: bool
    error: str

    source_dir: str
    output_path: str = ""

    tree_lines: List[str] = field(default_factory=list)
    include_hidden: bool = False
    ignore_sources: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.tree_lines)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_creation_error(
        error: str,
        input_path: str,
        target_dir: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CreationResult:
    """Create a failed creation result instance."""
    return CreationResult(
        ok=False,
        error=error,
        input_path=input_path,
        target_dir=target_dir,
        summary=summary_extra or {},
    )


def create_creation_success(
        input_path: str,
        target_dir: str,
        entries: List[TreeEntry],
        created: List[str],
        existing: List[str],
        failures: List[MaterializeFailure],
) -> CreationResult:
    """
    Create a successful creation result instance.

    Per-entry failures do not flip the result to failed; they are reported
    alongside the created paths.
    """
    return CreationResult(
        ok=True,
        error="",
        input_path=input_path,
        target_dir=target_dir,
        entries=list(entries),
        created=list(created),
        existing=list(existing),
        failures=list(failures),
        summary={
            "entries": len(entries),
            "directories": sum(1 for e in entries if e.is_dir),
            "files": sum(1 for e in entries if not e.is_dir),
            "created": len(created),
            "existing": len(existing),
            "errors": len(failures),
        },
    )


def create_generation_error(
        error: str,
        source_dir: str,
        output_path: str = "",
        include_hidden: bool = False,
) -> GenerationResult:
    """Create a failed generation result instance."""
    return GenerationResult(
        ok=False,
        error=error,
        source_dir=source_dir,
        output_path=output_path,
        include_hidden=include_hidden,
    )


def create_generation_success(
        source_dir: str,
        tree_lines: List[str],
        output_path: str = "",
        include_hidden: bool = False,
        ignore_sources: Optional[List[str]] = None,
) -> GenerationResult:
    """Create a successful generation result instance."""
    return GenerationResult(
        ok=True,
        error="",
        source_dir=source_dir,
        output_path=output_path,
        tree_lines=list(tree_lines),
        include_hidden=include_hidden,
        ignore_sources=list(ignore_sources or []),
        summary={
            "lines": len(tree_lines),
            "directories": sum(1 for line in tree_lines if line.endswith("/")),
            "files": sum(1 for line in tree_lines if not line.endswith("/")),
        },
    )
