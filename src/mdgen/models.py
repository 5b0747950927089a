"""Data models for mdgen."""

import enum
import pathlib
from collections.abc import Iterator
from dataclasses import dataclass

from mdgen.constants import CATEGORY_PATTERNS


class Category(enum.Enum):
    """Which kind of source file a run collects.

    The value is the command-line spelling, the label is the display name.
    """

    CSHARP = ("cs", "C#")
    CPP = ("cpp", "C++")
    MSSQL = ("mssql", "MSSQL")
    MYSQL = ("mysql", "MySQL")
    SQLITE = ("sqlite", "SQLite")
    PROTOBUF = ("proto", "Protocol-Buffers")
    RUST = ("rust", "Rust")

    def __init__(self, cli_value: str, label: str):
        self.cli_value = cli_value
        self.label = label

    @property
    def patterns(self) -> tuple[str, ...]:
        """Glob patterns a file name must match to be collected."""
        return CATEGORY_PATTERNS[self.cli_value]

    @classmethod
    def from_value(cls, value: str) -> "Category":
        """Look up a category by its command-line value or its label.

        Args:
            value: e.g. ``"cs"``, ``"C#"`` or ``"protocol-buffers"``

        Returns:
            The matching Category

        Raises:
            ValueError: If nothing matches
        """
        needle = value.strip().lower()
        for category in cls:
            if needle in (category.cli_value, category.label.lower()):
                return category
        raise ValueError(f"Unknown category: {value!r}")

    @classmethod
    def cli_values(cls) -> list[str]:
        return [category.cli_value for category in cls]

    def __str__(self) -> str:
        return self.label


def file_extension(name: str) -> str:
    """Text from the last dot of a file name on, dot included."""
    dot = name.rfind(".")
    return name[dot:] if dot != -1 else ""


@dataclass(frozen=True)
class FileEntry:
    """A file that matched the category filter.

    Attributes:
        path: Absolute path to the file
        name: File name without directories
        extension: Text from the last dot on (dot included), or ``""``
    """

    path: pathlib.Path
    name: str
    extension: str

    @classmethod
    def from_path(cls, path: pathlib.Path) -> "FileEntry":
        return cls(path=path, name=path.name, extension=file_extension(path.name))


@dataclass(frozen=True)
class DirectoryGroup:
    """A non-root directory with at least one matching file.

    Attributes:
        path: Absolute path to the directory
        files: Matching files directly inside it, sorted by name
    """

    path: pathlib.Path
    files: tuple[FileEntry, ...]

    def relative_to(self, root: pathlib.Path) -> str:
        """Display path of the directory with the root prefix removed."""
        return str(self.path.relative_to(root))


@dataclass(frozen=True)
class DirectoryListing:
    """Everything one traversal found, already in render order.

    Attributes:
        root: The directory the traversal started from
        root_files: Matching files directly inside the root, sorted by name
        groups: Subdirectory groups, sorted by full path
    """

    root: pathlib.Path
    root_files: tuple[FileEntry, ...]
    groups: tuple[DirectoryGroup, ...]

    @property
    def file_count(self) -> int:
        return len(self.root_files) + sum(len(group.files) for group in self.groups)

    def iter_files(self) -> Iterator[FileEntry]:
        """Yield every matching file in the order it is rendered."""
        yield from self.root_files
        for group in self.groups:
            yield from group.files
