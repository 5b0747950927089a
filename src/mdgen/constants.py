"""Lookup tables for language tags, category filters and ignore patterns."""

# Fence tag per file extension. Anything missing renders an untagged block.
LANGUAGE_MAP: dict[str, str] = {
    # .NET
    ".cs": "csharp",
    ".xaml": "xml",
    ".xml": "xml",
    ".csproj": "xml",
    # Web
    ".json": "json",
    ".js": "javascript",
    ".html": "html",
    ".css": "css",
    # General purpose
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".h": "cpp",
    ".rs": "rust",
    # Data & schemas
    ".sql": "sql",
    ".proto": "protobuf",
    # Docs
    ".md": "markdown",
    ".txt": "text",
}

# Glob patterns selected by each category value (see models.Category).
# The three SQL dialects share one filter.
CATEGORY_PATTERNS: dict[str, tuple[str, ...]] = {
    "cs": ("*.cs",),
    "cpp": ("*.cpp",),
    "mssql": ("*.sql",),
    "mysql": ("*.sql",),
    "sqlite": ("*.sql",),
    "proto": ("*.proto",),
    "rust": ("*.rs",),
}

ALWAYS_IGNORE_PATTERNS: set[str] = {
    # Version Control
    ".git/",
    ".svn/",
    ".hg/",
    ".bzr/",
    # Dependencies
    "node_modules/",
    "bower_components/",
    "vendor/",
    # Build outputs
    "bin/",
    "obj/",
    "target/",
    "__pycache__/",
    ".venv/",
    # IDEs
    ".idea/",
    ".vs/",
    ".vscode/",
}
