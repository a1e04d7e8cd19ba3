"""Pydantic models for blog posts and index listings."""

from .post import BlogPost
from .listing import PostListing

__all__ = ["BlogPost", "PostListing"]
