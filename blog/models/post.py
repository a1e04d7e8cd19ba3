"""
Pydantic model for a single blog post read from a markdown file.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlogPost(BaseModel):
    """A markdown post with its frontmatter and derived fields."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Filename stem; stable identifier used for routing.")
    id: Union[int, str] = Field(..., description="Frontmatter id, or the key when absent.")
    title: str
    excerpt: str
    published_at: datetime = Field(..., description="Publication date (naive, UTC for aware inputs).")
    categories: List[str] = Field(default_factory=list)
    body: str = ""
    cover_image: str
    read_time: str
    source_path: Optional[Path] = None

    @field_validator("key", "title", "excerpt", "cover_image", "read_time")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be non-empty")
        return v

    def shares_category_with(self, other: "BlogPost") -> bool:
        """True if the two posts have at least one category in common."""
        return any(cat in other.categories for cat in self.categories)
