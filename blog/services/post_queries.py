"""
Queries over an already-loaded list of posts.

None of these read from disk; callers pass the list returned by
ContentLoader.load_all() so its newest-first order carries through.
"""

from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from ..models.post import BlogPost

DEFAULT_RELATED_LIMIT = 3
DEFAULT_RECENT_LIMIT = 3


def find_related(
    post: BlogPost,
    posts: Sequence[BlogPost],
    limit: int = DEFAULT_RELATED_LIMIT,
) -> List[BlogPost]:
    """Posts sharing at least one category with ``post``.

    The reference post itself (matched by key) is never included. Order of
    ``posts`` is kept and the result is cut to ``limit`` entries.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    related = [
        other for other in posts
        if other.key != post.key and post.shares_category_with(other)
    ]
    return related[:limit]


def filter_posts_by_query(posts: Sequence[BlogPost], query: str) -> List[BlogPost]:
    """Case-insensitive search over title, excerpt and category names.

    A blank query matches everything. Surrounding whitespace in the query
    is ignored, so a stray space from a search box doesn't hide matches.
    """
    if not query or not query.strip():
        return list(posts)
    needle = query.strip().lower()
    return [
        post for post in posts
        if needle in post.title.lower()
        or needle in post.excerpt.lower()
        or any(needle in cat.lower() for cat in post.categories)
    ]


def filter_posts_by_category(
    posts: Sequence[BlogPost],
    category: Optional[str],
) -> List[BlogPost]:
    """Posts tagged with exactly ``category``; no category matches everything."""
    if not category:
        return list(posts)
    return [post for post in posts if category in post.categories]


def recent_posts(posts: Sequence[BlogPost], limit: int = DEFAULT_RECENT_LIMIT) -> List[BlogPost]:
    if limit < 0:
        raise ValueError("limit must be >= 0")
    return list(posts[:limit])


def format_post_date(value: Union[str, date, datetime]) -> str:
    """Short display date, e.g. ``Mar 1, 2024``."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    return f"{value:%b} {value.day}, {value.year}"
