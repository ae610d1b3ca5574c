from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted file, command-line overrides), dispatch to the
pipeline and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from foldertree.core.grammar.validator import validate_structure_file
from foldertree.core.pipeline.config_validator import validate_config
from foldertree.core.pipeline.engine import run_create, run_generate
from foldertree.domain.config import get_config_path, get_default_config, load_config, save_config
from foldertree.domain.errors import FolderTreeError
from foldertree.domain.pipeline_models import CreationResult, GenerationResult
from foldertree.infra.logging import LoggingConfig, configure_logging, get_logger
from foldertree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    base_conf = get_default_config() if args.use_defaults else load_config()
    conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    if args.save_config:
        _save_effective_config(conf)

    kind = cli_args.command_kind(args.command)
    try:
        if kind == "create":
            return _run_create(args, conf)
        if kind == "generate":
            return _run_generate(args, conf)
        return _run_validate(args, conf)
    except KeyboardInterrupt:
        print("Operation interrupted by user.", file=sys.stderr)
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_create(args: Any, conf: Dict[str, Any]) -> int:
    if not os.path.isfile(args.input_file):
        return _not_found(args.input_file)

    result = run_create(args.input_file, args.target_dir, conf)
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_creation_summary(result)
    return EXIT_OK if result.ok else EXIT_FAILURE


def _run_generate(args: Any, conf: Dict[str, Any]) -> int:
    if not os.path.isdir(args.source_dir):
        return _not_found(args.source_dir)

    result = run_generate(args.source_dir, args.output_file, conf)
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_generation_summary(result, echo=bool(conf.get("print_tree")) or not args.output_file)
    return EXIT_OK if result.ok else EXIT_FAILURE


def _run_validate(args: Any, conf: Dict[str, Any]) -> int:
    if not os.path.isfile(args.input_file):
        return _not_found(args.input_file)

    try:
        cfg, _ = validate_config(conf)
        validate_structure_file(args.input_file, cfg["encoding"])
    except FolderTreeError as e:
        if args.json_output:
            print(json.dumps({"ok": False, "error": str(e)}, ensure_ascii=False, indent=2))
        else:
            print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.json_output:
        print(json.dumps({"ok": True, "error": ""}, indent=2))
    else:
        print(f"Structure file is valid: {os.path.abspath(args.input_file)}")
    return EXIT_OK


def _not_found(path: str) -> int:
    msg = f"Path does not exist: {os.path.abspath(path)}"
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return EXIT_NOT_FOUND

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k in ("include_hidden", "gitignore_paths", "use_source_gitignore", "print_tree", "encoding"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _save_effective_config(conf: Dict[str, Any]) -> None:
    """Persist the merged options so later runs start from them."""
    path = get_config_path()
    if save_config(conf, path):
        logger.info(f"Configuration saved to {path}")

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_creation_summary(result: CreationResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Structure created successfully in {result.target_dir}")
    summary = result.summary
    print(f"Directories: {summary.get('directories', 0)}, files: {summary.get('files', 0)}")
    print(f"Created: {summary.get('created', 0)}, already present: {summary.get('existing', 0)}")
    if result.failures:
        print("Entries that could not be created:", file=sys.stderr)
        for failure in result.failures:
            print(f"  - {failure.path}: {failure.error}", file=sys.stderr)


def _print_generation_summary(result: GenerationResult, echo: bool) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if echo:
        sys.stdout.write(result.text)
    if result.output_path:
        print(f"Structure file generated successfully at {result.output_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
