"""
Tests that enforce coding standards.

Strata modules import modules, never names: 'import X as _x' for external
packages and 'import strata.x as x' for internal ones. Re-exports in
__init__.py files and TYPE_CHECKING-only imports are exempt.
"""

import pathlib as _pathlib

import pytest as _pytest

ROOT_DIR = _pathlib.Path(__file__).parent.parent
SRC_DIR = ROOT_DIR / "src" / "strata"
TESTS_DIR = ROOT_DIR / "tests"


def _find_from_imports(content: str) -> list[tuple[int, str]]:
    """
    Return (line_number, line) for each 'from X import Y' statement.

    Skips 'from __future__' imports and anything indented under an
    'if TYPE_CHECKING:' block.
    """
    found: list[tuple[int, str]] = []
    in_type_checking = False

    for number, line in enumerate(content.split("\n"), start=1):
        stripped = line.strip()
        if stripped.startswith(("if TYPE_CHECKING:", "if _typing.TYPE_CHECKING:")):
            in_type_checking = True
            continue
        if in_type_checking and stripped and not line[0].isspace():
            in_type_checking = False
        if in_type_checking:
            continue
        if stripped.startswith("from ") and " import " in stripped:
            if stripped.startswith("from __future__ import"):
                continue
            found.append((number, stripped))

    return found


def _checked_files() -> list[_pathlib.Path]:
    files = list(SRC_DIR.rglob("*.py")) + list(TESTS_DIR.rglob("*.py"))
    return sorted(
        path
        for path in files
        if path.name != "__init__.py" and path.name != "test_coding_standards.py"
    )


@_pytest.mark.parametrize(
    "path",
    _checked_files(),
    ids=lambda p: str(p.relative_to(ROOT_DIR)),
)
def test_no_from_imports(path: _pathlib.Path) -> None:
    """Modules should import modules, not names."""
    violations = _find_from_imports(path.read_text(encoding="utf-8"))
    if violations:
        lines = "\n".join(f"  {path}:{n}: {line}" for n, line in violations)
        _pytest.fail(
            f"Found forbidden 'from X import Y' imports:\n{lines}\n\n"
            "Use 'import X as _x' (external) or 'import X as x' (internal) instead."
        )


class TestImportDetection:
    """Tests for the import detection helper itself."""

    def test_detects_from_import(self) -> None:
        """A plain from-import is reported with its line number."""
        assert _find_from_imports("import os\nfrom pathlib import Path") == [
            (2, "from pathlib import Path")
        ]

    def test_allows_future_imports(self) -> None:
        """__future__ imports are allowed."""
        assert _find_from_imports("from __future__ import annotations") == []

    def test_type_checking_block_is_exempt(self) -> None:
        """Imports under TYPE_CHECKING are allowed, later ones are not."""
        content = (
            "import typing as _typing\n"
            "\n"
            "if _typing.TYPE_CHECKING:\n"
            "    from allowed import Type\n"
            "\n"
            "from forbidden import Other\n"
        )
        assert _find_from_imports(content) == [(6, "from forbidden import Other")]
