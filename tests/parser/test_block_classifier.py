"""Tests for line classification."""

import pytest

from guidequill.models.block import (
    Blank,
    BulletItem,
    Heading1,
    Heading2,
    ImageRef,
    Paragraph,
    Placeholder,
)
from guidequill.parser.block_classifier import classify_line, classify_lines


class TestClassifyLine:
    """Test cases for classify_line."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("![Home Page](screenshot_home)", ImageRef("Home Page", "screenshot_home")),
            ("![](img)", ImageRef("", "img")),
            ("# Getting Started", Heading1("Getting Started")),
            ("## Logging in", Heading2("Logging in")),
            ("* First step", BulletItem("First step")),
            ("- Second step", BulletItem("Second step")),
            ("[SCREENSHOT: dashboard view]", Placeholder("dashboard view")),
            ("", Blank()),
            ("   \t", Blank()),
            ("Hello world.", Paragraph("Hello world.")),
        ],
    )
    def test_basic_kinds(self, line, expected):
        assert classify_line(line) == expected

    def test_heading_wins_over_placeholder(self):
        assert classify_line("# Intro [SCREENSHOT: x]") == Heading1("Intro [SCREENSHOT: x]")

    def test_bullet_wins_over_placeholder(self):
        assert classify_line("- see [SCREENSHOT: menu]") == BulletItem("see [SCREENSHOT: menu]")

    def test_image_must_span_whole_line(self):
        assert classify_line("See ![Alt](id)") == Paragraph("See ![Alt](id)")
        assert classify_line("![Alt](id) below") == Paragraph("![Alt](id) below")

    def test_prefix_requires_space(self):
        assert classify_line("#Title") == Paragraph("#Title")
        assert classify_line("*emphasis*") == Paragraph("*emphasis*")
        assert classify_line("-1 degrees") == Paragraph("-1 degrees")

    def test_empty_heading_and_bullet(self):
        assert classify_line("# ") == Heading1("")
        assert classify_line("- ") == BulletItem("")

    def test_h3_is_paragraph(self):
        assert classify_line("### Deep") == Paragraph("### Deep")

    def test_placeholder_partial_match(self):
        block = classify_line("Insert here: [SCREENSHOT: settings panel] please")
        assert block == Placeholder("Insert here:  settings panel please")

    def test_placeholder_keeps_emphasis_markers(self):
        # Only brackets and the marker word are stripped.
        assert classify_line("*[SCREENSHOT: Login form]*") == Placeholder("* Login form*")

    def test_placeholder_without_colon(self):
        assert classify_line("[SCREENSHOT]") == Placeholder("SCREENSHOT")


class TestClassifyLines:
    def test_preserves_order_and_count(self):
        lines = ["# Title", "", "Hello world.", "![Shot](missing_id)"]
        blocks = classify_lines(lines)
        assert blocks == [
            Heading1("Title"),
            Blank(),
            Paragraph("Hello world."),
            ImageRef("Shot", "missing_id"),
        ]
