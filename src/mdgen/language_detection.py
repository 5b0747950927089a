"""Language tag and category filter utilities."""

import pathlib

import pathspec

from mdgen.constants import LANGUAGE_MAP
from mdgen.models import Category, file_extension


def get_language_from_path(file_path: pathlib.Path | str) -> str:
    """Determines the code fence tag from the file extension.

    Args:
        file_path: Path (or bare file name) of the file

    Returns:
        Tag from LANGUAGE_MAP, or an empty string for unknown extensions

    Examples:
        >>> get_language_from_path(pathlib.Path("main.rs"))
        'rust'
        >>> get_language_from_path("Program.CS")
        'csharp'
        >>> get_language_from_path("notes.rst")
        ''
    """
    name = pathlib.PurePath(file_path).name
    return LANGUAGE_MAP.get(file_extension(name).lower(), "")


def build_category_spec(category: Category) -> pathspec.PathSpec:
    """Compile the category's glob patterns into a PathSpec.

    Patterns are lower-cased here and names are lower-cased in
    matches_category, so extension matching ignores case.
    """
    patterns = [pattern.lower() for pattern in category.patterns]
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def matches_category(file_name: str, category_spec: pathspec.PathSpec) -> bool:
    """Check a bare file name against a compiled category filter.

    Examples:
        >>> spec = build_category_spec(Category.CSHARP)
        >>> matches_category("Program.CS", spec)
        True
        >>> matches_category("App.csproj", spec)
        False
    """
    return category_spec.match_file(file_name.lower())
