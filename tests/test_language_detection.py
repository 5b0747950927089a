"""Tests for mdgen.language_detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdgen.language_detection import (
    build_category_spec,
    get_language_from_path,
    matches_category,
)
from mdgen.models import Category


@pytest.mark.parametrize(
    ("name", "tag"),
    [
        ("Program.cs", "csharp"),
        ("MainWindow.xaml", "xml"),
        ("App.csproj", "xml"),
        ("data.xml", "xml"),
        ("package.json", "json"),
        ("app.js", "javascript"),
        ("index.html", "html"),
        ("site.css", "css"),
        ("tool.py", "python"),
        ("Main.java", "java"),
        ("engine.cpp", "cpp"),
        ("engine.h", "cpp"),
        ("README.md", "markdown"),
        ("notes.txt", "text"),
        ("schema.sql", "sql"),
        ("api.proto", "protobuf"),
        ("main.rs", "rust"),
    ],
)
def test_language_table(name: str, tag: str) -> None:
    assert get_language_from_path(Path(name)) == tag


def test_language_lookup_ignores_case() -> None:
    assert get_language_from_path("SCHEMA.SQL") == "sql"
    assert get_language_from_path(Path("/src/Lib.Rs")) == "rust"


def test_unknown_extension_has_empty_tag() -> None:
    assert get_language_from_path("Dockerfile") == ""
    assert get_language_from_path("style.scss") == ""


def test_category_matching_ignores_case() -> None:
    spec = build_category_spec(Category.CSHARP)
    assert matches_category("Program.cs", spec)
    assert matches_category("PROGRAM.CS", spec)
    assert not matches_category("App.csproj", spec)
    assert not matches_category("Program.cs.bak", spec)


def test_cpp_filter_skips_headers() -> None:
    spec = build_category_spec(Category.CPP)
    assert matches_category("engine.cpp", spec)
    assert not matches_category("engine.h", spec)


def test_sql_dialects_share_one_filter() -> None:
    for category in (Category.MSSQL, Category.MYSQL, Category.SQLITE):
        spec = build_category_spec(category)
        assert matches_category("schema.sql", spec)
        assert not matches_category("schema.sqlite", spec)


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_category_specs_compile_without_deprecation_warnings(tmp_path: Path) -> None:
    from mdgen.file_operations import get_combined_spec

    for category in Category:
        assert matches_category(f"x{category.patterns[0][1:]}", build_category_spec(category))
    assert get_combined_spec(tmp_path).match_file(".git/")
