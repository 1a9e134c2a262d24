"""Tests for render configuration."""

import pytest

from guidequill.config import RenderConfig
from guidequill.exceptions import ConfigError
from guidequill.styles.font_utils import normalize_family, resolve_font_variant


class TestRenderConfig:
    def test_defaults_match_a4_layout(self):
        geometry = RenderConfig().geometry()

        assert (geometry.page_width, geometry.page_height) == (210.0, 297.0)
        assert geometry.margin == 20.0
        assert geometry.usable_width == 170.0
        assert geometry.line_height == 7.0
        assert (geometry.break_threshold, geometry.bottom_limit) == (270.0, 280.0)

    def test_letter_preset(self):
        config = RenderConfig(page_size="letter", bottom_limit=270.0)
        assert config.page_dimensions() == (215.9, 279.4)

    def test_bottom_limit_beyond_page_edge(self):
        with pytest.raises(ConfigError) as exc_info:
            RenderConfig(page_size="LETTER")
        assert exc_info.value.message == "bottom_limit must lie on the page"

    def test_from_dict(self):
        config = RenderConfig.from_dict({"margin": 15, "body_font": "Times New Roman"})
        assert config.margin == 15
        assert config.geometry().usable_width == 180.0

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigError) as exc_info:
            RenderConfig.from_dict({"margins": 15, "theme": "dark"})
        assert exc_info.value.details == "margins, theme"

    @pytest.mark.parametrize(
        "options",
        [
            {"page_size": "A3"},
            {"margin": 0},
            {"line_height": -1},
            {"body_size": 0},
            {"break_threshold": 290, "bottom_limit": 280},
            {"margin": 280},
            {"body_font": "Comic Sans"},
        ],
    )
    def test_invalid_values(self, options):
        with pytest.raises(ConfigError):
            RenderConfig(**options)


class TestFontUtils:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Helvetica", "Helvetica"),
            ("arial", "Helvetica"),
            ("Times New Roman", "Times-Roman"),
            ("monospace", "Courier"),
            ("", "Helvetica"),
            (None, "Helvetica"),
        ],
    )
    def test_normalize_family(self, name, expected):
        assert normalize_family(name) == expected

    def test_resolve_variants(self):
        assert resolve_font_variant("Helvetica", True, False) == "Helvetica-Bold"
        assert resolve_font_variant("Helvetica", False, True) == "Helvetica-Oblique"
        assert resolve_font_variant("Times", True, True) == "Times-BoldItalic"
        assert resolve_font_variant("Courier", False, False) == "Courier"
