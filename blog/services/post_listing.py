"""
Blog index views: filter the post list, pick a featured post, and reveal
posts a few at a time ("load more").

With no search or category filter active the newest post is shown as the
featured post and left out of the revealed list; once a filter is applied
there is no featured post and every match is listed.
"""

import logging
from typing import Optional, Sequence

from ..models.listing import PostListing
from ..models.post import BlogPost
from .post_queries import filter_posts_by_category, filter_posts_by_query

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_VISIBLE = 6
DEFAULT_LOAD_MORE_STEP = 3


def build_listing(
    posts: Sequence[BlogPost],
    query: str = "",
    category: Optional[str] = None,
    visible: int = DEFAULT_INITIAL_VISIBLE,
) -> PostListing:
    """Build one view of the blog index.

    Args:
        posts: All posts, newest first.
        query: Free-text search; blank means no search.
        category: Exact category to keep; None or empty means all.
        visible: Number of matching posts revealed so far. The featured
            post counts towards it, as on the index page.

    Returns:
        PostListing with the featured post (if any), the revealed posts and
        whether more remain.
    """
    if visible < 0:
        raise ValueError("visible must be >= 0")

    matches = filter_posts_by_query(filter_posts_by_category(posts, category), query)
    total = len(matches)
    filtered = bool(query and query.strip()) or bool(category)

    featured = None
    start = 0
    if matches and not filtered:
        featured = matches[0]
        start = 1

    revealed = matches[start:visible]
    logger.debug(
        "Listing query=%r category=%r: %d matches, %d revealed",
        query, category, total, len(revealed),
    )
    return PostListing(
        featured=featured,
        posts=revealed,
        total=total,
        visible=min(visible, total),
        has_more=visible < total,
        query=query,
        category=category or None,
    )


def next_visible_count(visible: int, total: int, step: int = DEFAULT_LOAD_MORE_STEP) -> int:
    """How many posts to reveal after one more "load more"."""
    if step <= 0:
        raise ValueError("step must be positive")
    return min(visible + step, total)
