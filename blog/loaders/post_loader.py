"""
Load markdown blog posts (YAML frontmatter + body) from a content directory.

Provides load_post() for a single file and ContentLoader for the whole
directory, so "file → BlogPost" logic lives in one place. Nothing is cached:
every call reads the files again.
"""

import logging
import math
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import frontmatter
import yaml
from pydantic import ValidationError

from ..config import DEFAULT_COVER_IMAGE, DEFAULT_WORDS_PER_MINUTE, Settings
from ..cover_images import default_cover_image, load_cover_image_map
from ..errors import MalformedDocumentError, NotFoundError
from ..models.post import BlogPost

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"
REQUIRED_FIELDS = ("title", "date", "excerpt")


def parse_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a markdown document into (frontmatter dict, body).

    Text without a frontmatter block returns an empty dict and the whole
    text as body.

    Raises:
        yaml.YAMLError: If the frontmatter block is not valid YAML.
        ValueError: If a YAML timestamp is out of range (e.g. ``2024-13-45``).
    """
    post = frontmatter.loads(text)
    return dict(post.metadata), post.content


def calculate_read_time(body: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    """Estimate reading time as ``"N min read"`` (at least 1 minute)."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    word_count = len(body.split())
    minutes = max(1, math.ceil(word_count / words_per_minute))
    return f"{minutes} min read"


def parse_published_at(value: Union[str, date, datetime]) -> datetime:
    """Normalise a frontmatter date to a naive datetime.

    Plain dates become midnight; aware datetimes are converted to UTC so
    every post compares against every other.

    Raises:
        ValueError: If the value is not a date or ISO-8601 string.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"not a date: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _normalise_categories(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"categories must be a list, got {type(value).__name__}")
    categories: List[str] = []
    for item in value:
        if item is None:
            continue
        name = str(item).strip()
        if name and name not in categories:
            categories.append(name)
    return categories


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _missing_fields(meta: Mapping[str, Any]) -> List[str]:
    missing = []
    for field in REQUIRED_FIELDS:
        value = meta.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing


def load_post(
    file_path: Path,
    *,
    cover_images: Optional[Mapping[str, str]] = None,
    default_cover: str = DEFAULT_COVER_IMAGE,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> BlogPost:
    """Load a single markdown file into a BlogPost.

    Args:
        file_path: Path to the ``.md`` file; its stem becomes the post key.
        cover_images: Category → cover image map for posts without ``coverImage``.
        default_cover: Cover used when the first category isn't mapped.
        words_per_minute: Reading speed for posts without ``readTime``.

    Returns:
        BlogPost with read_time and cover_image always set.

    Raises:
        FileNotFoundError: If the path does not exist.
        MalformedDocumentError: If frontmatter is invalid or a required
            field (title, date, excerpt) is missing.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(file_path, [f"not valid UTF-8: {e}"]) from e

    # YAML timestamps are built while parsing, so an out-of-range date
    # surfaces here as ValueError rather than later in parse_published_at.
    try:
        meta, body = parse_frontmatter(text)
    except (yaml.YAMLError, ValueError) as e:
        raise MalformedDocumentError(file_path, [f"invalid frontmatter: {e}"]) from e

    missing = _missing_fields(meta)
    if missing:
        raise MalformedDocumentError(
            file_path, [f"missing required field '{name}'" for name in missing]
        )

    problems = []
    try:
        published_at = parse_published_at(meta["date"])
    except ValueError as e:
        problems.append(f"invalid date {meta['date']!r}: {e}")
    try:
        categories = _normalise_categories(meta.get("categories"))
    except ValueError as e:
        problems.append(str(e))
    if problems:
        raise MalformedDocumentError(file_path, problems)

    key = file_path.stem
    post_id = meta.get("id")
    if post_id is None or post_id == "":
        post_id = key
    elif not isinstance(post_id, (int, str)):
        post_id = str(post_id)

    first_category = categories[0] if categories else None
    try:
        return BlogPost(
            key=key,
            id=post_id,
            title=str(meta["title"]),
            excerpt=str(meta["excerpt"]),
            published_at=published_at,
            categories=categories,
            body=body,
            read_time=_optional_text(meta.get("readTime"))
            or calculate_read_time(body, words_per_minute),
            cover_image=_optional_text(meta.get("coverImage"))
            or default_cover_image(first_category, cover_images or {}, default_cover),
            source_path=file_path,
        )
    except ValidationError as e:
        raise MalformedDocumentError(
            file_path, [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()]
        ) from e


class ContentLoader:
    """Read every post in a content directory and answer lookups over them."""

    def __init__(
        self,
        content_dir: Path,
        cover_images: Optional[Mapping[str, str]] = None,
        default_cover: str = DEFAULT_COVER_IMAGE,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ):
        if words_per_minute <= 0:
            raise ValueError("words_per_minute must be positive")
        self.content_dir = Path(content_dir)
        self.cover_images = dict(cover_images or {})
        self.default_cover = default_cover
        self.words_per_minute = words_per_minute

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentLoader":
        """Loader configured from Settings, with the cover map read from its registry file."""
        return cls(
            settings.content_dir,
            cover_images=load_cover_image_map(settings.cover_map_path),
            default_cover=settings.default_cover_image,
            words_per_minute=settings.words_per_minute,
        )

    def post_files(self) -> List[Path]:
        """Markdown files in the content directory, sorted by filename.

        Raises:
            NotFoundError: If the content directory does not exist.
        """
        if not self.content_dir.is_dir():
            raise NotFoundError(self.content_dir)
        return sorted(
            p for p in self.content_dir.iterdir()
            if p.is_file() and p.suffix.lower() == POST_SUFFIX
        )

    def load_all(self) -> List[BlogPost]:
        """All posts, newest first.

        Posts published at the same moment keep filename order. A file
        whose key repeats an earlier one is skipped with a warning.

        Raises:
            NotFoundError: If the content directory does not exist.
            MalformedDocumentError: On the first file with bad frontmatter;
                nothing is returned for the rest of the directory.
        """
        posts: List[BlogPost] = []
        seen = set()
        for file_path in self.post_files():
            post = load_post(
                file_path,
                cover_images=self.cover_images,
                default_cover=self.default_cover,
                words_per_minute=self.words_per_minute,
            )
            if post.key in seen:
                logger.warning("Skipping %s: duplicate post key '%s'", file_path.name, post.key)
                continue
            seen.add(post.key)
            logger.debug("Loaded post '%s' from %s", post.key, file_path.name)
            posts.append(post)

        posts.sort(key=lambda p: p.published_at, reverse=True)
        logger.info("Loaded %d posts from %s", len(posts), self.content_dir)
        return posts

    def load_by_key(self, key: str) -> Optional[BlogPost]:
        """The post with this key, or None if there is none."""
        if not key or not key.strip():
            return None
        for post in self.load_all():
            if post.key == key:
                return post
        logger.debug("No post with key '%s' in %s", key, self.content_dir)
        return None

    def list_categories(self) -> List[str]:
        """Every category used by any post, de-duplicated and sorted."""
        categories = set()
        for post in self.load_all():
            categories.update(post.categories)
        return sorted(categories)
