"""Markdown output generation utilities."""

import os
import pathlib

import pathspec
import tqdm

from mdgen.errors import ReadFailureError
from mdgen.file_operations import collect_files
from mdgen.language_detection import get_language_from_path
from mdgen.models import Category, DirectoryListing, FileEntry


def display_name(text: str) -> str:
    """File system text with undecodable bytes shown as U+FFFD.

    Examples:
        >>> display_name("d\\udcff") == "d\\ufffd"
        True
    """
    return os.fsencode(text).decode("utf-8", "replace")


def read_source(entry: FileEntry) -> str:
    """Read a matched file as UTF-8 text.

    A leading byte order mark is dropped; line endings are kept as they
    are on disk.

    Args:
        entry: File to read

    Returns:
        The full file content

    Raises:
        ReadFailureError: If the file is gone, unreadable or not valid UTF-8
    """
    try:
        with open(entry.path, encoding="utf-8-sig", newline="") as code_file:
            return code_file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailureError(f"Could not read {entry.path}: {e}") from e


def render_file_block(name: str, language: str, content: str) -> str:
    """Render one file as a bold name line followed by a fenced code block.

    Args:
        name: File name shown above the block
        language: Fence tag, empty for an untagged block
        content: File content, written verbatim

    Returns:
        Markdown text ending with a blank separator line

    Examples:
        >>> render_file_block("main.rs", "rust", "fn main() {}")
        '**`main.rs`**\\n```rust\\nfn main() {}\\n```\\n\\n'
    """
    parts = [f"**`{name}`**\n", f"```{language}\n", content]
    if not content.endswith("\n"):
        parts.append("\n")
    parts.append("```\n\n")
    return "".join(parts)


def render_markdown(listing: DirectoryListing, progress: bool = False) -> str:
    """Read every file in the listing and assemble the Markdown document.

    Root files come first, then one ``###`` section per directory group
    headed by its path relative to the root. Nothing is returned unless
    every file was read.

    Args:
        listing: Output of collect_files
        progress: Whether to show a tqdm progress bar on stderr

    Returns:
        The complete Markdown text

    Raises:
        ReadFailureError: If any file cannot be read
    """
    sections: list[str] = []

    with tqdm.tqdm(
        total=listing.file_count, desc="Reading", unit="file", disable=not progress
    ) as pbar:

        def render_entry(entry: FileEntry) -> None:
            content = read_source(entry)
            sections.append(
                render_file_block(
                    display_name(entry.name), get_language_from_path(entry.name), content
                )
            )
            pbar.update(1)

        for entry in listing.root_files:
            render_entry(entry)

        for group in listing.groups:
            sections.append(f"### {display_name(group.relative_to(listing.root))}\n\n")
            for entry in group.files:
                render_entry(entry)

    return "".join(sections)


def create_markdown(
    target_dir: pathlib.Path | str,
    category: Category,
    ignore_spec: pathspec.PathSpec | None = None,
    progress: bool = False,
) -> str:
    """Run the whole pipeline: traverse, filter, read and render.

    Args:
        target_dir: Directory to scan
        category: Which extensions to collect
        ignore_spec: Optional PathSpec of paths to skip
        progress: Whether to show a progress bar while reading

    Returns:
        The Markdown document
    """
    listing = collect_files(target_dir, category, ignore_spec)
    return render_markdown(listing, progress)
