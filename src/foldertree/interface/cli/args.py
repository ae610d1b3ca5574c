from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (subcommands, aliases, flags) and the
translation of parsed namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

CREATE_COMMANDS = ("create", "create-folders", "c")
GENERATE_COMMANDS = ("generate", "generate-file", "g")
VALIDATE_COMMANDS = ("validate", "v")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the foldertree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="foldertree",
        description="Create folder structures from ASCII tree text, or generate tree text from a directory.",
        epilog=(
            "examples:\n"
            "  foldertree create ./structure.txt ./my-project\n"
            "  foldertree generate ./my-project ./output-structure.txt"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Diagnostics and Output Format ---
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    p.add_argument("--json", dest="json_output", action="store_true", help="Print the result as JSON.")
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of tree-text files (default: utf-8).",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective options as the new defaults.",
    )

    sub = p.add_subparsers(dest="command", metavar="command")
    sub.required = True

    # --- Creation ---
    create = sub.add_parser(
        CREATE_COMMANDS[0],
        aliases=list(CREATE_COMMANDS[1:]),
        help="Create folder structure from input file.",
    )
    create.add_argument("input_file", help="Tree-text file describing the structure.")
    create.add_argument("target_dir", help="Directory to create the structure in.")

    # --- Generation ---
    generate = sub.add_parser(
        GENERATE_COMMANDS[0],
        aliases=list(GENERATE_COMMANDS[1:]),
        help="Generate structure text file from existing directory.",
    )
    generate.add_argument("source_dir", help="Directory to describe.")
    generate.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="File to write the tree text to (stdout when omitted).",
    )
    generate.add_argument(
        "--include-hidden",
        action="store_true",
        default=None,
        help="Do not apply the built-in ignore patterns (.git, node_modules, ...).",
    )
    generate.add_argument(
        "--gitignore",
        dest="gitignore_paths",
        action="append",
        default=None,
        metavar="PATH",
        help="Extra gitignore-style pattern file (repeatable).",
    )
    generate.add_argument(
        "--no-source-gitignore",
        action="store_true",
        help="Do not read the .gitignore found in the source directory.",
    )
    generate.add_argument(
        "--print",
        dest="print_tree",
        action="store_true",
        default=None,
        help="Also print the generated tree to stdout.",
    )

    # --- Validation ---
    validate = sub.add_parser(
        VALIDATE_COMMANDS[0],
        aliases=list(VALIDATE_COMMANDS[1:]),
        help="Check a tree-text file without creating anything.",
    )
    validate.add_argument("input_file", help="Tree-text file to check.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only flags that were actually given produce a non-None value.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "include_hidden": getattr(args, "include_hidden", None),
        "gitignore_paths": getattr(args, "gitignore_paths", None),
        "print_tree": getattr(args, "print_tree", None),
        "use_source_gitignore": None,
        "encoding": getattr(args, "encoding", None),
    }
    if getattr(args, "no_source_gitignore", False):
        overrides["use_source_gitignore"] = False
    return overrides


def command_kind(command: str) -> str:
    """Resolve a subcommand or alias to 'create', 'generate' or 'validate'."""
    if command in CREATE_COMMANDS:
        return "create"
    if command in GENERATE_COMMANDS:
        return "generate"
    if command in VALIDATE_COMMANDS:
        return "validate"
    raise ValueError(f"Unknown command: {command}")
