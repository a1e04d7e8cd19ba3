"""
Pydantic model for a filtered, partially revealed list of posts.

Mirrors what the blog index shows: an optional featured post, the posts
revealed so far, and whether "load more" has anything left to reveal.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .post import BlogPost


class PostListing(BaseModel):
    """One view of the blog index after filtering."""

    featured: Optional[BlogPost] = Field(
        None,
        description="Newest post, only set when no search or category filter is active.",
    )
    posts: List[BlogPost] = Field(default_factory=list)
    total: int = Field(0, description="Number of posts matching the filters.")
    visible: int = Field(0, description="How many of the matching posts are revealed.")
    has_more: bool = False
    query: str = ""
    category: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.total == 0
