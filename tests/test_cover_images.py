"""
Tests for the cover image registry (blog/cover_images.py).
"""

import json
import logging

import pytest

from blog.cover_images import (
    BUILTIN_COVER_IMAGES,
    clear_cover_image_cache,
    default_cover_image,
    load_cover_image_map,
)


@pytest.fixture(autouse=True)
def _fresh_registry(monkeypatch):
    """Each test starts without a cached map or env override."""
    monkeypatch.delenv("COVER_IMAGE_MAP_PATH", raising=False)
    clear_cover_image_cache()
    yield
    clear_cover_image_cache()


class TestDefaultCoverImage:
    """Tests for default_cover_image."""

    def test_mapped_category(self):
        assert default_cover_image("React", BUILTIN_COVER_IMAGES) == "/images/blog/react.jpg"

    def test_unmapped_category_uses_default(self):
        assert default_cover_image("Rust", BUILTIN_COVER_IMAGES, "/d.jpg") == "/d.jpg"

    def test_no_category_uses_default(self):
        assert default_cover_image(None, BUILTIN_COVER_IMAGES, "/d.jpg") == "/d.jpg"
        assert default_cover_image("", BUILTIN_COVER_IMAGES, "/d.jpg") == "/d.jpg"

    def test_builtin_default_path(self):
        assert default_cover_image(None, {}) == "/images/blog/default.jpg"


class TestLoadCoverImageMap:
    """Tests for load_cover_image_map."""

    def test_default_file_matches_builtin_table(self):
        assert load_cover_image_map() == BUILTIN_COVER_IMAGES

    def test_reads_given_file(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps({"Python": "/images/blog/python.jpg"}))
        assert load_cover_image_map(path) == {"Python": "/images/blog/python.jpg"}

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps({"Go": "/go.jpg"}))
        monkeypatch.setenv("COVER_IMAGE_MAP_PATH", str(path))
        assert load_cover_image_map() == {"Go": "/go.jpg"}

    def test_missing_file_falls_back_to_builtin(self, tmp_path):
        assert load_cover_image_map(tmp_path / "missing.json") == BUILTIN_COVER_IMAGES

    def test_invalid_json_falls_back_with_warning(self, tmp_path, caplog):
        path = tmp_path / "covers.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            mapping = load_cover_image_map(path)
        assert mapping == BUILTIN_COVER_IMAGES
        assert "Failed to load cover image map" in caplog.text

    def test_non_object_falls_back(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps(["React"]))
        assert load_cover_image_map(path) == BUILTIN_COVER_IMAGES

    def test_skips_non_string_values(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps({"React": "/r.jpg", "Bad": 3, "Empty": ""}))
        assert load_cover_image_map(path) == {"React": "/r.jpg"}

    def test_cached_until_force_reload(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps({"A": "/a.jpg"}))
        assert load_cover_image_map(path) == {"A": "/a.jpg"}
        path.write_text(json.dumps({"B": "/b.jpg"}))
        assert load_cover_image_map(path) == {"A": "/a.jpg"}
        assert load_cover_image_map(path, force_reload=True) == {"B": "/b.jpg"}

    def test_clear_cache_rereads(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps({"A": "/a.jpg"}))
        load_cover_image_map(path)
        path.write_text(json.dumps({"B": "/b.jpg"}))
        clear_cover_image_cache()
        assert load_cover_image_map(path) == {"B": "/b.jpg"}

    def test_returned_map_is_a_copy(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps({"A": "/a.jpg"}))
        load_cover_image_map(path)["A"] = "/changed.jpg"
        assert load_cover_image_map(path) == {"A": "/a.jpg"}
