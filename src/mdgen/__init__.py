"""mdgen: concatenate a directory's source files into one Markdown document.

This package walks a directory tree, keeps the files of one language
category, and renders them as fenced code blocks grouped by directory.
"""

from mdgen.cli import main
from mdgen.errors import AccessDeniedError, MdgenError, NotFoundError, ReadFailureError
from mdgen.file_operations import collect_files
from mdgen.models import Category, DirectoryGroup, DirectoryListing, FileEntry
from mdgen.output_generators import create_markdown, render_markdown
from mdgen.session import GenerationSession

__version__ = "0.1.0"
__all__ = [
    "main",
    "AccessDeniedError",
    "Category",
    "DirectoryGroup",
    "DirectoryListing",
    "FileEntry",
    "GenerationSession",
    "MdgenError",
    "NotFoundError",
    "ReadFailureError",
    "collect_files",
    "create_markdown",
    "render_markdown",
]
