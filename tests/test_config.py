"""Tests for graphics_extractor.config."""

import pytest

from graphics_extractor.config import ExtractorConfig


class TestExtractorConfig:
    def test_defaults(self):
        config = ExtractorConfig()
        assert config.graphics_key == "graphics"
        assert config.marker_word == "graphics"
        assert config.max_depth == 200
        assert config.data_dir == "data/graphics_extractor"

    @pytest.mark.parametrize("marker", ["", "ns:graphics", "two words", "1graphics"])
    def test_marker_must_be_identifier(self, marker):
        with pytest.raises(ValueError, match="marker_word"):
            ExtractorConfig(marker_word=marker)

    def test_graphics_key_must_not_be_empty(self):
        with pytest.raises(ValueError, match="graphics_key"):
            ExtractorConfig(graphics_key="")

    def test_quoted_style_graphics_key_allowed(self):
        assert ExtractorConfig(graphics_key="debug-graphics").graphics_key == "debug-graphics"

    def test_max_depth_must_be_positive(self):
        with pytest.raises(ValueError, match="max_depth"):
            ExtractorConfig(max_depth=0)


class TestFromEnv:
    def test_defaults_without_env(self, monkeypatch):
        for name in (
            "GRAPHICS_EXTRACTOR_KEY",
            "GRAPHICS_EXTRACTOR_MARKER",
            "GRAPHICS_EXTRACTOR_MAX_DEPTH",
            "GRAPHICS_EXTRACTOR_DATA_DIR",
        ):
            monkeypatch.delenv(name, raising=False)
        assert ExtractorConfig.from_env() == ExtractorConfig()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GRAPHICS_EXTRACTOR_KEY", "shapes")
        monkeypatch.setenv("GRAPHICS_EXTRACTOR_MARKER", "draw")
        monkeypatch.setenv("GRAPHICS_EXTRACTOR_MAX_DEPTH", "32")
        monkeypatch.setenv("GRAPHICS_EXTRACTOR_DATA_DIR", "/tmp/graphics")

        config = ExtractorConfig.from_env()
        assert config.graphics_key == "shapes"
        assert config.marker_word == "draw"
        assert config.max_depth == 32
        assert config.data_dir == "/tmp/graphics"

    def test_invalid_env_value_rejected(self, monkeypatch):
        monkeypatch.setenv("GRAPHICS_EXTRACTOR_MARKER", "not valid")
        with pytest.raises(ValueError):
            ExtractorConfig.from_env()
