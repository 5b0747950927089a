from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.files import write_file


@pytest.fixture
def proj(tmp_path: Path) -> Path:
    """A small C# tree: two root files, one nested library and some noise."""
    root = tmp_path / "proj"
    write_file(root / "b.cs", "class B {}\n")
    write_file(root / "a.cs", "class A {}\n")
    write_file(root / "README.md", "# proj\n")
    write_file(root / "lib" / "z.cs", "class Z {}\n")
    write_file(root / "lib" / "notes.txt", "not code\n")
    write_file(root / "docs" / "guide.md", "# guide\n")
    return root
