"""
Exceptions raised while reading blog content from disk.

A post that cannot be found by key is not an error; lookups return ``None``.
"""

from pathlib import Path
from typing import List, Optional


class ContentError(Exception):
    """Base class for content loading failures."""


class NotFoundError(ContentError, FileNotFoundError):
    """The configured content directory does not exist."""

    def __init__(self, path: Path, message: Optional[str] = None):
        self.path = Path(path)
        super().__init__(message or f"Content directory not found: {self.path}")


class MalformedDocumentError(ContentError, ValueError):
    """A markdown file has missing or invalid frontmatter fields."""

    def __init__(self, path: Path, problems: List[str]):
        self.path = Path(path)
        self.problems = list(problems)
        super().__init__(f"Malformed document {self.path.name}: {'; '.join(self.problems)}")
