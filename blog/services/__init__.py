"""Queries and index views over loaded blog posts."""

from .post_queries import (
    find_related,
    filter_posts_by_query,
    filter_posts_by_category,
    recent_posts,
    format_post_date,
)
from .post_listing import build_listing, next_visible_count

__all__ = [
    "find_related",
    "filter_posts_by_query",
    "filter_posts_by_category",
    "recent_posts",
    "format_post_date",
    "build_listing",
    "next_visible_count",
]
