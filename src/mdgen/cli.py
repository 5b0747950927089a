"""Command-line interface for mdgen."""

import argparse
import io
import pathlib
import sys

from mdgen.errors import MdgenError
from mdgen.file_operations import collect_files, get_combined_spec
from mdgen.models import Category
from mdgen.output_generators import render_markdown


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdgen",
        description=(
            "Concatenate the source files of one language under a directory "
            "into a single Markdown document."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--root", required=True, help="The directory to scan for source files."
    )
    parser.add_argument(
        "--type",
        dest="category",
        required=True,
        choices=Category.cli_values(),
        help="Which kind of source file to collect.",
    )
    parser.add_argument(
        "--out",
        type=pathlib.Path,
        help="Write the Markdown to this file instead of standard output.",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip paths matched by the root .gitignore and common tool directories.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="List every collected file.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress status messages and the progress bar.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the mdgen CLI.

    Status lines go to stderr so stdout carries only the document.
    """
    args = _build_parser().parse_args(argv)
    category = Category.from_value(args.category)

    # Status text may hold emoji or undecodable path bytes on a narrow console.
    if isinstance(sys.stderr, io.TextIOWrapper):
        sys.stderr.reconfigure(errors="backslashreplace")

    def status(message: str) -> None:
        if not args.quiet:
            print(message, file=sys.stderr)

    try:
        root = pathlib.Path(args.root)
        ignore_spec = get_combined_spec(root.resolve()) if args.gitignore else None

        status(f"📂 Scanning directory: {root.resolve()} ({category.label})")
        listing = collect_files(root, category, ignore_spec)
        status(f"✓ Found {listing.file_count} files to process")
        if args.verbose and not args.quiet:
            for entry in listing.iter_files():
                print(f"  ✓ {entry.path.relative_to(listing.root)}", file=sys.stderr)

        markdown = render_markdown(listing, progress=not args.quiet)
    except MdgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.out is None:
        # The document is UTF-8 whatever the console encoding is.
        sys.stdout.flush()
        sys.stdout.buffer.write(markdown.encode("utf-8"))
        sys.stdout.buffer.flush()
    else:
        output_path = args.out.resolve()
        status(f"📝 Writing to {output_path}...")
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "wb") as md_file:
                md_file.write(markdown.encode("utf-8"))
        except OSError as e:
            print(f"Error: Could not write to {output_path}: {e}", file=sys.stderr)
            return 1

    status(f"✅ Success! Converted {listing.file_count} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
