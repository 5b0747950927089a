"""Directory traversal and category filtering."""

import os
import pathlib

import pathspec

from mdgen.constants import ALWAYS_IGNORE_PATTERNS
from mdgen.errors import AccessDeniedError, NotFoundError
from mdgen.language_detection import build_category_spec, matches_category
from mdgen.models import Category, DirectoryGroup, DirectoryListing, FileEntry


def get_combined_spec(root_dir: pathlib.Path) -> pathspec.PathSpec:
    """Combines ALWAYS_IGNORE_PATTERNS with patterns from the root .gitignore.

    Args:
        root_dir: Directory the traversal starts from

    Returns:
        PathSpec object combining hardcoded patterns and .gitignore patterns

    Raises:
        AccessDeniedError: If the .gitignore exists but cannot be read
    """
    all_patterns = sorted(ALWAYS_IGNORE_PATTERNS)

    gitignore_path = root_dir / ".gitignore"
    if gitignore_path.is_file():
        try:
            with open(gitignore_path, encoding="utf-8", errors="ignore") as f:
                all_patterns.extend(f.readlines())
        except OSError as e:
            raise AccessDeniedError(f"Could not read {gitignore_path}: {e.strerror}") from e

    return pathspec.GitIgnoreSpec.from_lines(all_patterns)


def _raise_walk_error(error: OSError) -> None:
    """os.walk error hook: abort the whole traversal on the first failure."""
    if isinstance(error, FileNotFoundError):
        raise NotFoundError(f"Directory not found: {error.filename}") from error
    raise AccessDeniedError(
        f"Cannot list directory {error.filename}: {error.strerror}"
    ) from error


def _relative_posix(path: pathlib.Path, root: pathlib.Path) -> str:
    return path.relative_to(root).as_posix()


def collect_files(
    start_path: pathlib.Path | str,
    category: Category,
    ignore_spec: pathspec.PathSpec | None = None,
) -> DirectoryListing:
    """Find every file of the given category under start_path.

    Files directly inside the root are kept apart from the ones in
    subdirectories. Subdirectories without a matching file of their own
    are left out, though their children are still visited.

    Args:
        start_path: Directory to start scanning from
        category: Which extensions to collect
        ignore_spec: Optional PathSpec of paths (relative to the root) to skip

    Returns:
        DirectoryListing with root files sorted by name and groups sorted
        by full path

    Raises:
        NotFoundError: If start_path does not exist or is not a directory
        AccessDeniedError: If any directory cannot be listed
    """
    root = pathlib.Path(start_path).resolve()
    if not root.exists():
        raise NotFoundError(f"Directory not found: {start_path}")
    if not root.is_dir():
        raise NotFoundError(f"Not a directory: {start_path}")

    category_spec = build_category_spec(category)
    root_files: tuple[FileEntry, ...] = ()
    groups: list[DirectoryGroup] = []

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_raise_walk_error):
        current = pathlib.Path(dirpath)

        if ignore_spec is not None:
            # Prune ignored directories; trailing slash matches patterns like "bin/"
            dirnames[:] = [
                d
                for d in dirnames
                if not ignore_spec.match_file(_relative_posix(current / d, root) + "/")
            ]
            filenames = [
                f
                for f in filenames
                if not ignore_spec.match_file(_relative_posix(current / f, root))
            ]

        matched = sorted(
            (
                FileEntry.from_path(current / filename)
                for filename in filenames
                if matches_category(filename, category_spec)
            ),
            key=lambda entry: entry.name,
        )

        if current == root:
            root_files = tuple(matched)
        elif matched:
            groups.append(DirectoryGroup(path=current, files=tuple(matched)))

    groups.sort(key=lambda group: str(group.path))
    return DirectoryListing(root=root, root_files=root_files, groups=tuple(groups))
