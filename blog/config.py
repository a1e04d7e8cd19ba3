"""
Settings for the blog content pipeline.

Values come from environment variables (see ``Settings.from_env``) and fall
back to paths inside the project: ``content/blog`` for posts and
``data/cover_images.json`` for the category cover image map.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONTENT_DIR = _PROJECT_ROOT / "content" / "blog"
DEFAULT_COVER_MAP_PATH = _PROJECT_ROOT / "data" / "cover_images.json"
DEFAULT_COVER_IMAGE = "/images/blog/default.jpg"
DEFAULT_WORDS_PER_MINUTE = 200


class Settings(BaseModel):
    """Blog content configuration."""

    content_dir: Path = Field(
        DEFAULT_CONTENT_DIR,
        description="Directory holding the markdown posts.",
    )
    words_per_minute: int = Field(
        DEFAULT_WORDS_PER_MINUTE,
        description="Reading speed used to estimate read time.",
    )
    cover_map_path: Path = Field(
        DEFAULT_COVER_MAP_PATH,
        description="JSON object mapping category name to cover image path.",
    )
    default_cover_image: str = Field(
        DEFAULT_COVER_IMAGE,
        description="Cover image for posts whose first category has no mapping.",
    )
    initial_visible: int = Field(6, description="Posts shown before 'load more'.")
    load_more_step: int = Field(3, description="Posts added by each 'load more'.")

    @field_validator("words_per_minute", "initial_visible", "load_more_step")
    @classmethod
    def positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("default_cover_image")
    @classmethod
    def cover_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("default_cover_image must be non-empty")
        return v

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from ``BLOG_*`` / ``COVER_IMAGE_MAP_PATH`` variables."""
        env = os.environ if environ is None else environ
        mapping = {
            "content_dir": "BLOG_CONTENT_DIR",
            "words_per_minute": "BLOG_WORDS_PER_MINUTE",
            "cover_map_path": "COVER_IMAGE_MAP_PATH",
            "default_cover_image": "BLOG_DEFAULT_COVER_IMAGE",
            "initial_visible": "BLOG_INITIAL_VISIBLE",
            "load_more_step": "BLOG_LOAD_MORE_STEP",
        }
        values = {field: env[var] for field, var in mapping.items() if env.get(var)}
        return cls(**values)
