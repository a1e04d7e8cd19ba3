"""
Blog content library.

Provides configuration, post models, the markdown content loader,
cover image defaults, and query helpers for the blog index and post pages.
"""

__version__ = "1.0.0"

from .config import Settings
from .errors import ContentError, NotFoundError, MalformedDocumentError
from .models import BlogPost, PostListing
from .loaders import ContentLoader, load_post
from .cover_images import load_cover_image_map, default_cover_image
from .services import find_related, build_listing

__all__ = [
    "Settings",
    "ContentError",
    "NotFoundError",
    "MalformedDocumentError",
    "BlogPost",
    "PostListing",
    "ContentLoader",
    "load_post",
    "load_cover_image_map",
    "default_cover_image",
    "find_related",
    "build_listing",
]
