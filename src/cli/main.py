"""Main CLI entry point for the docs search indexer."""

import argparse
import logging
import sys

from src.cli.commands.build import build_command
from src.cli.commands.patch import patch_command
from src.cli.config import Config
from src.markdown_processor.section_extractor import LEADING_POLICIES
from src.markdown_processor.text_cleaner import FENCE_POLICIES
from src.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--config", help="Path to .env configuration file", default=None)
    parser.add_argument("--docs-dir", help="Directory containing markdown/MDX pages (default: DOCS_DIR or docs/pages)")
    parser.add_argument("--leading-sections", choices=LEADING_POLICIES, help="Policy for text before the first heading")
    parser.add_argument("--fence-policy", choices=FENCE_POLICIES, help="Remove whole code blocks or only fence lines")
    routes = parser.add_mutually_exclusive_group()
    routes.add_argument("--routes-from-dist", metavar="DIR", help="Only index pages rendered into this static output")
    routes.add_argument("--routes-from-config", metavar="FILE", help="Only index pages linked from this site config")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show per-file processing details")


def _apply_common_overrides(pipeline, args):
    if args.docs_dir:
        pipeline.docs_dir = args.docs_dir
    if args.leading_sections:
        pipeline.leading_section_policy = args.leading_sections
    if args.fence_policy:
        pipeline.fence_policy = args.fence_policy
    if args.routes_from_dist:
        pipeline.routes_static_dir = args.routes_from_dist
        pipeline.routes_config_file = None
    if args.routes_from_config:
        pipeline.routes_config_file = args.routes_from_config
        pipeline.routes_static_dir = None
    return pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-search-index",
        description="Docs Search Indexer - build the site search index from markdown pages",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Build command
    build_parser_ = subparsers.add_parser("build", help="Write a flat JSON array of {title, content, url} records")
    _add_common_arguments(build_parser_)
    build_parser_.add_argument(
        "--output", action="append", help="Output file (repeatable, default: RECORDS_OUTPUT_PATHS)"
    )
    cap = build_parser_.add_mutually_exclusive_group()
    cap.add_argument(
        "--content-cap", type=_positive_int, help="Maximum characters of content per record (default: 3000)"
    )
    cap.add_argument("--no-content-cap", action="store_true", help="Do not truncate record content")

    # Patch command
    patch_parser = subparsers.add_parser("patch", help="Overwrite the built MiniSearch index of the static site")
    _add_common_arguments(patch_parser)
    patch_parser.add_argument(
        "--dist-dir", action="append", help="Directory holding search-index-*.json (repeatable, checked in order)"
    )
    patch_parser.add_argument("--mirror-dir", action="append", help="Extra directory to copy the index into (repeatable)")
    patch_parser.add_argument("--no-mirror", action="store_true", help="Do not copy the index anywhere else")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # Both commands are batch jobs and show progress by default
    setup_logging(verbose=True, debug=args.verbose)

    try:
        config = Config(args.config)
    except ValueError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        sys.exit(1)

    if args.command == "build":
        pipeline = _apply_common_overrides(config.records_pipeline(), args)
        if args.output:
            pipeline.output_paths = args.output
        if args.no_content_cap:
            pipeline.content_cap = None
        elif args.content_cap is not None:
            pipeline.content_cap = args.content_cap
        build_command(pipeline)
    elif args.command == "patch":
        pipeline = _apply_common_overrides(config.patch_pipeline(), args)
        if args.dist_dir:
            pipeline.index_dirs = args.dist_dir
        if args.no_mirror:
            pipeline.mirror_dirs = []
        elif args.mirror_dir:
            pipeline.mirror_dirs = args.mirror_dir
        patch_command(pipeline)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
