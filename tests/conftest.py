"""
Pytest configuration for guidequill
"""

import base64
import logging
import sys
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from guidequill.engine.geometry import PageGeometry
from guidequill.media.resource_registry import ResourceRegistry
from guidequill.models.guide import Screenshot
from guidequill.renderers.pdf_renderer import PdfDrawBackend


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for tests."""
    return Path(tmp_path)


@pytest.fixture
def png_bytes():
    """Small valid PNG image."""
    buffer = BytesIO()
    Image.new("RGB", (40, 24), (30, 120, 200)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def jpeg_data_uri():
    """Small valid JPEG as a base64 data URI, as produced by the crawl stage."""
    buffer = BytesIO()
    Image.new("RGB", (32, 20), (200, 60, 60)).save(buffer, format="JPEG")
    return "data:image/jpeg;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def geometry():
    return PageGeometry()


@pytest.fixture
def backend(geometry):
    return PdfDrawBackend(geometry)


@pytest.fixture
def registry(png_bytes):
    return ResourceRegistry.from_screenshots([
        Screenshot(id="home_id", description="Home page", data=png_bytes),
        Screenshot(id="broken_id", description="Corrupt capture", data=b"definitely not an image"),
    ])
