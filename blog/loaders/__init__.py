"""
Loaders for reading markdown posts into BlogPost models.

Used by the site and by the content CLI; provides a single place for
"file path → post" so both stay consistent.
"""

from .post_loader import (
    ContentLoader,
    calculate_read_time,
    load_post,
    parse_frontmatter,
    parse_published_at,
)

__all__ = [
    "ContentLoader",
    "calculate_read_time",
    "load_post",
    "parse_frontmatter",
    "parse_published_at",
]
