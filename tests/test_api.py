"""
Tests for the high-level render API.
"""

from datetime import datetime, timezone

import pytest

from guidequill import (
    GeneratedGuide,
    RenderConfig,
    Screenshot,
    render_guide,
    render_markdown,
    save_guide,
    suggested_filename,
)
from guidequill.api import timestamp_millis
from guidequill.exceptions import ParsingError

GUIDE_MARKDOWN = "\n".join([
    "# Getting started",
    "",
    "Open the application and sign in.",
    "## Dashboard",
    "* Check the summary cards",
    "- Open the settings menu",
    "![Home page](home_id)",
    "![Dashboard](dash_id)",
    "![Settings](settings_id)",
    "[SCREENSHOT: billing overview]",
])


@pytest.fixture
def guide(png_bytes, jpeg_data_uri):
    return GeneratedGuide(
        content=GUIDE_MARKDOWN,
        url="https://example.com",
        timestamp="2024-01-01T00:00:00Z",
        screenshots=[
            Screenshot(id="home_id", description="Home page", data=png_bytes),
            Screenshot(id="dash_id", description="Dashboard", data=jpeg_data_uri),
        ],
    )


class TestTimestamps:
    def test_iso_string_with_zulu_suffix(self):
        assert timestamp_millis("2024-01-01T00:00:00Z") == 1704067200000

    def test_datetime_and_int(self):
        moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert timestamp_millis(moment) == 1704067200000
        assert timestamp_millis(1704067200123) == 1704067200123

    def test_now_when_missing(self):
        assert timestamp_millis(None) > 1704067200000

    @pytest.mark.parametrize("value", ["yesterday", True, 12.5])
    def test_invalid_timestamps(self, value):
        with pytest.raises(ParsingError):
            timestamp_millis(value)

    def test_suggested_filename(self):
        assert suggested_filename("2024-01-01T00:00:00Z") == "User_Guide_1704067200000.pdf"


class TestRenderGuide:
    def test_renders_pdf_with_all_block_kinds(self, guide):
        result = render_guide(guide)

        assert result.pdf_bytes.startswith(b"%PDF")
        assert result.filename == "User_Guide_1704067200000.pdf"
        assert result.page_count == 1
        assert result.ok

        content = result.pages[0].text_content()
        assert content[:2] == ["User Guide", "Source: https://example.com"]
        assert "Getting started" in content
        assert "Figure: Home page" in content
        assert "[Image missing: Settings]" in content
        assert "billing overview" in content
        assert [image.resource_id for image in result.pages[0].images] == ["home_id", "dash_id"]
        assert "Figure: Dashboard" in content
        assert len(result.pages[0].rects) == 1

    def test_output_is_deterministic(self, guide):
        assert render_guide(guide).pdf_bytes == render_guide(guide).pdf_bytes

    def test_broken_screenshot_reported_in_diagnostics(self):
        result = render_markdown(
            "![Broken](broken_id)\nStill rendered.",
            url="https://example.com",
            screenshots=[Screenshot(id="broken_id", description="Broken", data=b"\x00\x01")],
            timestamp=0,
        )

        assert not result.ok
        assert result.diagnostics[0].index == 0
        assert "Still rendered." in result.pages[0].text_content()
        assert result.filename == "User_Guide_0.pdf"

    def test_undecodable_data_uri_only_skips_its_block(self, png_bytes):
        result = render_markdown(
            "![Home](home_id)\n![Bad](bad_id)\nStill rendered.",
            url="https://example.com",
            screenshots=[
                Screenshot(id="home_id", description="Home", data=png_bytes),
                Screenshot(id="bad_id", description="Bad", data="data:image/png;base64,@@not-base64@@"),
            ],
            timestamp=0,
        )

        assert result.pdf_bytes.startswith(b"%PDF")
        assert [d.block.resource_id for d in result.diagnostics] == ["bad_id"]
        assert "Invalid base64 image data" in result.diagnostics[0].message
        content = result.pages[0].text_content()
        assert "Figure: Home" in content
        assert "Figure: Bad" not in content
        assert "Still rendered." in content

    def test_long_guide_paginates(self):
        content = "\n".join(f"Step {i}: click the next button." for i in range(80))
        result = render_markdown(content, url="https://example.com", timestamp=0)

        assert result.page_count == 3
        assert len(result.pages) == 3

    def test_custom_title_and_config(self):
        config = RenderConfig(page_size="LETTER", bottom_limit=270.0, body_font="Times")
        result = render_markdown("Body text", url="u", title="Admin Guide", timestamp=0, config=config)

        title, _, body = result.pages[0].texts
        assert title.text == "Admin Guide"
        assert body.style.font_name == "Times-Roman"


class TestSaveGuide:
    def test_writes_under_suggested_filename(self, guide, temp_dir):
        path = save_guide(guide, temp_dir / "out")

        assert path == temp_dir / "out" / "User_Guide_1704067200000.pdf"
        assert path.read_bytes().startswith(b"%PDF")
