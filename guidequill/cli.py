"""
Command-line interface for guidequill.

Usage:
    guidequill render guide.md --url https://example.com --screenshots shots/
    guidequill render guide.md --url https://example.com -o out.pdf
    guidequill version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .api import render_guide
from .exceptions import GuideQuillError
from .models.guide import GeneratedGuide, Screenshot
from .utils.logger import configure_logging
from .version import __version__

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="guidequill",
        description="guidequill - render generated user guides to PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  guidequill render guide.md --url https://example.com
  guidequill render guide.md --url https://example.com --screenshots shots/ -o out/
  guidequill version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a markdown guide to PDF")
    render_parser.add_argument("input", help="Markdown guide file")
    render_parser.add_argument("--url", required=True, help="Source URL shown under the title")
    render_parser.add_argument("--title", default="User Guide", help="Document title (default: User Guide)")
    render_parser.add_argument(
        "--screenshots",
        help="Directory of screenshot images; the file stem is the resource id",
    )
    render_parser.add_argument(
        "--timestamp",
        help="Generation time (ISO 8601) used for the output filename (default: now)",
    )
    render_parser.add_argument(
        "-o", "--output",
        help="Output PDF file or directory (default: current directory, suggested filename)",
    )

    subparsers.add_parser("version", help="Show version information")
    return parser


def load_screenshots(directory: Path) -> List[Screenshot]:
    """Read every image file in ``directory`` as a screenshot resource."""
    if not directory.is_dir():
        raise GuideQuillError("Screenshot directory not found", str(directory))

    screenshots = []
    for path in sorted(directory.iterdir()):
        if path.suffix.lower() not in IMAGE_SUFFIXES:
            continue
        screenshots.append(Screenshot(
            id=path.stem,
            description=path.stem.replace("_", " "),
            data=path.read_bytes(),
        ))
    logger.info(f"Loaded {len(screenshots)} screenshots from {directory}")
    return screenshots


def _resolve_output(output: Optional[str], filename: str) -> Path:
    if not output:
        return Path(filename)
    target = Path(output)
    if target.is_dir() or output.endswith(("/", "\\")):
        return target / filename
    return target


def cmd_render(args) -> int:
    """Handle render command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    screenshots = load_screenshots(Path(args.screenshots)) if args.screenshots else []
    guide = GeneratedGuide(
        content=input_path.read_text(encoding="utf-8"),
        url=args.url,
        title=args.title,
        timestamp=args.timestamp,
        screenshots=screenshots,
    )
    result = render_guide(guide)

    output_path = _resolve_output(args.output, result.filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(result.pdf_bytes)

    for diagnostic in result.diagnostics:
        print(f"Warning: block {diagnostic.index + 1} skipped: {diagnostic.message}", file=sys.stderr)
    print(f"Saved: {output_path} ({result.page_count} pages)")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "version":
        print(f"guidequill {__version__}")
        return 0
    if args.command != "render":
        parser.print_help()
        return 1

    try:
        return cmd_render(args)
    except GuideQuillError as exc:
        logger.debug("Render failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
