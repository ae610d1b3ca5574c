from __future__ import annotations

"""
Unit tests for FolderStructureManager.

Covers both directions of the operation surface, the validate-before-write
guarantee and ignore rule registration.
"""

from pathlib import Path

import pytest

from foldertree.core.services.structure_service import FolderStructureManager
from foldertree.domain.errors import (
    EmptyInputError,
    FolderTreeIOError,
    NotFoundError,
    StructureValidationError,
)

# -----------------------------------------------------------------------------
# CREATION PATH
# -----------------------------------------------------------------------------

def test_create_from_text(tmp_path: Path, basic_tree_text):
    structure_file = tmp_path / "structure.txt"
    structure_file.write_text(basic_tree_text, encoding="utf-8")
    target = tmp_path / "out"

    result = FolderStructureManager().create_from_text(str(structure_file), str(target))

    assert result.ok is True
    assert result.target_dir == str(target)
    assert result.input_path == str(structure_file)
    assert (target / "folder1" / "file1.txt").is_file()
    assert (target / "folder2" / "subfolder" / "file3.txt").is_file()
    assert result.summary == {
        "entries": 6, "directories": 3, "files": 3,
        "created": 6, "existing": 0, "errors": 0,
    }


def test_create_from_string_nested(tmp_path: Path, nested_tree_text):
    result = FolderStructureManager().create_from_string(nested_tree_text, str(tmp_path))

    assert result.ok is True
    for rel in [
        "api/Dockerfile", "api/requirements.txt", "api/app/__init__.py",
        "api/app/models/__init__.py", "api/app/models/user.py",
        "api/app/routes/__init__.py", "api/app/routes/auth.py",
    ]:
        assert (tmp_path / rel).is_file(), rel


def test_create_twice_is_idempotent(tmp_path: Path, basic_tree_text):
    manager = FolderStructureManager()
    manager.create_from_string(basic_tree_text, str(tmp_path))
    (tmp_path / "folder1" / "file2.txt").write_text("content", encoding="utf-8")

    result = manager.create_from_string(basic_tree_text, str(tmp_path))

    assert result.failures == []
    assert result.created == []
    assert (tmp_path / "folder1" / "file2.txt").read_text(encoding="utf-8") == "content"


def test_create_missing_input_raises_not_found(tmp_path: Path):
    with pytest.raises(NotFoundError, match="non-existent-file.txt"):
        FolderStructureManager().create_from_text(
            str(tmp_path / "non-existent-file.txt"), str(tmp_path / "out")
        )


def test_invalid_input_creates_nothing(tmp_path: Path):
    structure_file = tmp_path / "structure.txt"
    structure_file.write_text("├── good/\ninvalid format\n", encoding="utf-8")
    target = tmp_path / "out"

    with pytest.raises(StructureValidationError, match="Invalid characters"):
        FolderStructureManager().create_from_text(str(structure_file), str(target))

    assert not target.exists()


def test_empty_input_raises(tmp_path: Path):
    with pytest.raises(EmptyInputError):
        FolderStructureManager().create_from_string("\n\n", str(tmp_path))


def test_target_creation_failure_raises(tmp_path: Path, basic_tree_text):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(FolderTreeIOError):
        FolderStructureManager().create_from_string(basic_tree_text, str(blocker / "sub"))


def test_validate_file(tmp_path: Path, basic_tree_text):
    structure_file = tmp_path / "structure.txt"
    structure_file.write_text(basic_tree_text, encoding="utf-8")
    assert FolderStructureManager().validate_file(str(structure_file)) is True

# -----------------------------------------------------------------------------
# GENERATION PATH
# -----------------------------------------------------------------------------

@pytest.fixture
def ignore_project(tmp_path: Path, make_tree) -> Path:
    root = tmp_path / "test-structure"
    root.mkdir()
    make_tree(root, {
        ".git": {"hooks": {}, "config": None},
        "node_modules": {"test-package": {"package.json": None}},
        "src": {"index.js": None, "components": {"Button.js": None}},
        "dist": {"bundle.js": None},
        "build": {"output.js": None},
        ".vscode": {"settings.json": None},
        "coverage": {"lcov.info": None},
        "logs": {"error.log": None},
        ".env": None,
        ".env.local": None,
        ".DS_Store": None,
        "package.json": None,
        "README.md": None,
    })
    return root


def test_generate_excludes_default_patterns(ignore_project: Path, tmp_path: Path):
    output_file = tmp_path / "output.txt"
    FolderStructureManager().generate_structure_text(str(ignore_project), str(output_file))

    output = output_file.read_text(encoding="utf-8")
    for hidden in [".git", "node_modules", ".vscode", "dist", "build", "coverage",
                   "logs", ".DS_Store", ".env"]:
        assert hidden not in output, hidden
    for shown in ["src/", "index.js", "Button.js", "package.json", "README.md"]:
        assert shown in output, shown


def test_generate_include_hidden(ignore_project: Path, tmp_path: Path):
    output_file = tmp_path / "output.txt"
    FolderStructureManager(include_hidden=True).generate_text(str(ignore_project), str(output_file))

    output = output_file.read_text(encoding="utf-8")
    for shown in [".git/", "node_modules/", ".vscode/", "dist/", "build/", "coverage/",
                  "logs/", ".DS_Store", ".env", "src/", "package.json", "README.md"]:
        assert shown in output, shown


def test_generate_respects_custom_gitignore(ignore_project: Path, tmp_path: Path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text(
        "# Custom ignore patterns\n*.test.js\ntemp/**\ncustom-dir/\nsrc/secret.js\n*.tmp",
        encoding="utf-8",
    )
    (ignore_project / "temp").mkdir()
    (ignore_project / "custom-dir").mkdir()
    (ignore_project / "src" / "component.test.js").write_text("")
    (ignore_project / "src" / "secret.js").write_text("")
    (ignore_project / "data.tmp").write_text("")

    manager = FolderStructureManager()
    manager.load_ignore_rules(str(gitignore))
    result = manager.generate_text(str(ignore_project))

    output = result.text
    for hidden in ["component.test.js", "temp", "custom-dir", "secret.js", "data.tmp"]:
        assert hidden not in output, hidden
    for shown in ["src/", "index.js", "Button.js"]:
        assert shown in output, shown
    assert str(gitignore) in result.ignore_sources


def test_generate_nested_ignored_entries(ignore_project: Path):
    nested = ignore_project / "nested"
    nested.mkdir()
    (nested / ".git").mkdir()
    (nested / "node_modules").mkdir()
    (nested / ".env").write_text("")
    (nested / "package.json").write_text("")

    output = FolderStructureManager().generate_text(str(ignore_project)).text

    assert "nested/" in output
    assert ".git" not in output
    assert "node_modules" not in output
    assert ".env" not in output


def test_missing_gitignore_keeps_defaults(ignore_project: Path):
    manager = FolderStructureManager()
    manager.load_ignore_rules("non-existent-gitignore")

    output = manager.generate_text(str(ignore_project)).text

    assert ".git" not in output
    assert "src/" in output


def test_empty_gitignore_keeps_defaults(ignore_project: Path, tmp_path: Path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("", encoding="utf-8")
    manager = FolderStructureManager()
    manager.load_ignore_rules(str(gitignore))

    output = manager.generate_text(str(ignore_project)).text

    assert ".git" not in output
    assert "src/" in output


def test_generate_per_call_include_hidden_override(ignore_project: Path):
    manager = FolderStructureManager()
    result = manager.generate_text(str(ignore_project), include_hidden=True)

    assert result.include_hidden is True
    assert ".git/" in result.text
    assert manager.include_hidden is False


def test_generate_empty_directory(tmp_path: Path):
    source = tmp_path / "src"
    source.mkdir()
    output_file = tmp_path / "out.txt"

    result = FolderStructureManager().generate_text(str(source), str(output_file))

    assert result.tree_lines == []
    assert output_file.read_text(encoding="utf-8").strip() == ""


def test_generate_missing_source_raises(tmp_path: Path):
    with pytest.raises(NotFoundError):
        FolderStructureManager().generate_text(str(tmp_path / "missing"))


def test_source_gitignore_applies_by_default(tmp_path: Path, make_tree):
    source = tmp_path / "project"
    make_tree(source, {"keep.txt": None, "secret.txt": None})
    (source / ".gitignore").write_text("secret.txt\n", encoding="utf-8")

    default_lines = FolderStructureManager().generate_text(str(source)).tree_lines
    disabled_lines = FolderStructureManager(use_source_gitignore=False).generate_text(str(source)).tree_lines

    assert not any("secret.txt" in line for line in default_lines)
    assert any("secret.txt" in line for line in disabled_lines)


def test_create_refuses_entries_outside_target(tmp_path: Path):
    target = tmp_path / "target"

    result = FolderStructureManager().create_from_string("└── ../escape.txt\n", str(target))

    assert not (tmp_path / "escape.txt").exists()
    assert result.summary["errors"] == 1


def test_create_undecodable_input_raises_io_error(tmp_path: Path):
    structure_file = tmp_path / "structure.txt"
    structure_file.write_bytes(b"\xff\xfe\x00\x80")

    with pytest.raises(FolderTreeIOError):
        FolderStructureManager().create_from_text(str(structure_file), str(tmp_path / "out"))

    assert not (tmp_path / "out").exists()


def test_manager_encoding_round_trip(tmp_path: Path, make_tree):
    source = tmp_path / "source"
    make_tree(source, {"src": {"main.py": None}})
    tree_file = tmp_path / "tree.txt"
    manager = FolderStructureManager(encoding="utf-16")

    manager.generate_text(str(source), str(tree_file))
    manager.create_from_text(str(tree_file), str(tmp_path / "rebuilt"))

    assert (tmp_path / "rebuilt" / "src" / "main.py").is_file()
