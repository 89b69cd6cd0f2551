"""Decides whether a changed file is worth sending for documentation."""

import re
from pathlib import PurePosixPath
from typing import Pattern, Sequence

# Any match excludes the path, whatever its extension.
SKIP_PATTERNS: Sequence[Pattern[str]] = tuple(
    re.compile(pattern)
    for pattern in (
        # dependencies, build output and caches
        r"node_modules",
        r"^dist/",
        r"^build/",
        r"\.next/",
        r"\.cache/",
        r"^coverage/",
        # VCS and IDE metadata
        r"\.git",
        r"\.DS_Store",
        r"\.vscode/",
        r"\.idea/",
        r"\.github/",
        # lockfiles, env files and logs
        r"package-lock\.json",
        r"yarn\.lock",
        r"\.env",
        r"\.log$",
        # generated artifacts
        r"\.map$",
        r"\.min\.(js|css)$",
        r"\.d\.ts$",
        # tests
        r"^__tests__/",
        r"^test/",
        r"^tests/",
        r"\.test\.",
        r"\.spec\.",
        # tool configuration
        r"\.config\.",
        r"\.eslintrc",
        r"\.prettierrc",
        r"\.babelrc",
        r"tsconfig",
        r"webpack",
        r"rollup",
        r"jest",
        r"karma",
        r"cypress",
        # images and fonts
        r"\.svg$",
        r"\.png$",
        r"\.jpg$",
        r"\.jpeg$",
        r"\.gif$",
        r"\.ico$",
        r"\.woff",
        r"\.ttf",
        r"\.eot",
        r"\.otf",
    )
)

DOCUMENTABLE_EXTENSIONS = frozenset(
    {
        ".js",
        ".jsx",
        ".ts",
        ".tsx",
        ".py",
        ".java",
        ".go",
        ".rb",
        ".php",
        ".cs",
        ".c",
        ".cpp",
        ".h",
        ".swift",
        ".kt",
        ".rs",
        ".html",
        ".css",
        ".scss",
        ".less",
        ".json",
        ".yml",
        ".yaml",
        ".sh",
        ".bash",
        ".zsh",
        ".ps1",
    }
)


def is_skipped(path: str) -> bool:
    return any(pattern.search(path) for pattern in SKIP_PATTERNS)


def file_extension(path: str) -> str:
    """Lowercased text from the last dot of the file name, or "" when there is none."""
    name = PurePosixPath(path).name
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def should_document(path: str) -> bool:
    """
    Return True when the file at `path` should be sent for documentation.

    Skip patterns are checked first and always win; a path that survives them
    is accepted only when its extension is in DOCUMENTABLE_EXTENSIONS.
    """
    if not path or is_skipped(path):
        return False
    return file_extension(path) in DOCUMENTABLE_EXTENSIONS
