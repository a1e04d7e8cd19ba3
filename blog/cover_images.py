"""
Category cover image registry for blog posts.

This module provides:
  - A registry mapping category names to cover image paths.
  - ``default_cover_image()`` to pick a post's cover from its first category.

The registry is loaded from a JSON file (default: data/cover_images.json).
Override with the COVER_IMAGE_MAP_PATH environment variable, or pass a path.

Registry file format: a JSON object, e.g. ``{"React": "/images/blog/react.jpg"}``.
Non-string keys or values are skipped. A missing file falls back to the
built-in table below.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from .config import DEFAULT_COVER_IMAGE, DEFAULT_COVER_MAP_PATH

logger = logging.getLogger(__name__)

BUILTIN_COVER_IMAGES: Dict[str, str] = {
    "React": "/images/blog/react.jpg",
    "JavaScript": "/images/blog/javascript.jpg",
    "TypeScript": "/images/blog/typescript.jpg",
    "Node.js": "/images/blog/nodejs.jpg",
    "CSS": "/images/blog/css.jpg",
    "Next.js": "/images/blog/nextjs.jpg",
    "Web Development": "/images/blog/webdev.jpg",
}

# ---------------------------------------------------------------------------
# Registry cache (keyed by the path it was read from)
# ---------------------------------------------------------------------------
_registry_cache: Optional[Tuple[Path, Dict[str, str]]] = None


def clear_cover_image_cache() -> None:
    """Clear the in-memory registry cache. Used when the map file changes or in tests."""
    global _registry_cache
    _registry_cache = None


def _get_registry_path() -> Path:
    """Resolve path to the cover image map (env override supported)."""
    path = os.environ.get("COVER_IMAGE_MAP_PATH")
    return Path(path) if path else DEFAULT_COVER_MAP_PATH


def load_cover_image_map(
    path: Optional[Path] = None,
    force_reload: bool = False,
) -> Dict[str, str]:
    """Load the category → cover image map.

    The result is cached per path; asking for a different path, or passing
    force_reload=True, re-reads from disk. A copy is returned so callers
    can't mutate the cached table.
    """
    global _registry_cache
    path = Path(path) if path is not None else _get_registry_path()
    if _registry_cache is not None and _registry_cache[0] == path and not force_reload:
        return dict(_registry_cache[1])

    mapping = _read_registry(path)
    _registry_cache = (path, mapping)
    return dict(mapping)


def _read_registry(path: Path) -> Dict[str, str]:
    if not path.exists():
        logger.debug("Cover image map not found at %s; using built-in table.", path)
        return dict(BUILTIN_COVER_IMAGES)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load cover image map from %s: %s", path, e)
        return dict(BUILTIN_COVER_IMAGES)

    if not isinstance(raw, dict):
        logger.warning("Cover image map must be a JSON object; got %s", type(raw).__name__)
        return dict(BUILTIN_COVER_IMAGES)

    mapping: Dict[str, str] = {}
    for category, image in raw.items():
        if not isinstance(image, str) or not image.strip():
            logger.debug("Skipping cover image entry %r: value is not a path string.", category)
            continue
        mapping[category] = image
    return mapping


def default_cover_image(
    category: Optional[str],
    mapping: Mapping[str, str],
    default: str = DEFAULT_COVER_IMAGE,
) -> str:
    """Cover image for a post whose first category is ``category``.

    Falls back to ``default`` when there is no category or it isn't mapped.
    """
    if not category:
        return default
    return mapping.get(category) or default
