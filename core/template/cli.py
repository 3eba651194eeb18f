"""
CLI interface for the template normalizer.

Usage:
    template-graph render --in template.json --out fragment.json
    template-graph maps --in template.json
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from core.config import settings
from core.logging_config import configure_logging_from_settings

from .errors import TemplateError
from .json_output import JSONFormatter, fragment_to_dict, maps_to_dict
from .loader import load_template
from .normalizer import normalize, to_maps

logger = logging.getLogger(__name__)


def load_json_file(file_path: str) -> Any:
    """Load and parse a JSON file"""
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"File not found: {file_path}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {file_path}: {e}")
        sys.exit(1)


def write_output(data: Dict[str, Any], file_path: Optional[str]):
    """Write JSON to a file, or to stdout when no file is given"""
    try:
        text = JSONFormatter.to_json_string(data, indent=settings.json_indent)
    except TemplateError as e:
        logger.error(f"Failed to serialize output: {e}")
        sys.exit(1)
    if not file_path:
        sys.stdout.write(text + "\n")
        return
    try:
        with open(file_path, 'w') as f:
            f.write(text + "\n")
        logger.info(f"Output saved to: {file_path}")
    except OSError as e:
        logger.error(f"Failed to save output to {file_path}: {e}")
        sys.exit(1)


def _normalize_file(file_path: str):
    doc = load_json_file(file_path)
    try:
        return normalize(load_template(doc))
    except (TemplateError, ValidationError) as e:
        logger.error(f"Template normalization failed: {e}")
        sys.exit(1)


def render_command(args):
    """Normalize a template into a fragment"""
    logger.info(f"Normalizing template {args.input}...")
    fragment = _normalize_file(args.input)

    if args.summary or settings.include_summary:
        data = JSONFormatter.format_fragment(fragment)
    else:
        data = fragment_to_dict(fragment)
    write_output(data, args.output)

    logger.info(
        f"Normalized {len(fragment.instances)} instances and {len(fragment.props)} props"
    )


def maps_command(args):
    """Normalize a template into id-keyed instances and props"""
    logger.info(f"Normalizing template {args.input} to maps...")
    fragment = _normalize_file(args.input)
    write_output(maps_to_dict(to_maps(fragment)), args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="template-graph",
        description="Template normalizer CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normalize a template into a fragment
  template-graph render --in template.json --out fragment.json

  # Instances and props keyed by id
  template-graph maps --in template.json
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    render_parser = subparsers.add_parser(
        "render",
        help="Normalize a template into a fragment"
    )
    render_parser.add_argument("--in", dest="input", required=True, help="Input template file")
    render_parser.add_argument("--out", dest="output", help="Output file (stdout when omitted)")
    render_parser.add_argument("--summary", action="store_true", help="Wrap output with a summary block")
    render_parser.set_defaults(func=render_command)

    maps_parser = subparsers.add_parser(
        "maps",
        help="Normalize a template into id-keyed instances and props"
    )
    maps_parser.add_argument("--in", dest="input", required=True, help="Input template file")
    maps_parser.add_argument("--out", dest="output", help="Output file (stdout when omitted)")
    maps_parser.set_defaults(func=maps_command)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging_from_settings(settings)

    try:
        args.func(args)
    except KeyboardInterrupt:
        logger.info("Normalization interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
