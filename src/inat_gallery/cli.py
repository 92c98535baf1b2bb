"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import json
import logging
import sys
from pathlib import Path

from inat_gallery import __version__
from inat_gallery.config import get_settings
from inat_gallery.datasources.inaturalist import resolver
from inat_gallery.datasources.inaturalist.client import search_page_url
from inat_gallery.datasources.inaturalist.models import EmptyNameError, NotFound
from inat_gallery.flows.build import build_galleries, new_gallery_id
from inat_gallery.pipeline import resolve_and_fetch, species_name_from
from inat_gallery.renderers.gallery import (
    build_error_html,
    build_gallery_html,
    build_not_found_html,
)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="inat-gallery",
        description="iNaturalist photo galleries and observation maps for species names",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (logs every API URL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'gallery' command - render one gallery fragment
    gallery_parser = subparsers.add_parser("gallery", help="Render a gallery HTML fragment")
    gallery_parser.add_argument(
        "species",
        nargs="?",
        default=None,
        help="Species or provisional name (quoted names are provisional)",
    )
    gallery_parser.add_argument(
        "--page-title",
        type=str,
        default=None,
        help="Fallback name when no species is given (underscores become spaces)",
    )
    gallery_parser.add_argument(
        "--gallery-id",
        type=str,
        default=None,
        help="DOM id namespace for the fragment (default: random)",
    )
    gallery_parser.add_argument(
        "--limit",
        type=positive_int,
        default=None,
        help="Photos shown in the grid (default: display_limit from settings)",
    )
    gallery_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the fragment to this file instead of stdout",
    )

    # 'resolve' command - show what the resolver found
    resolve_parser = subparsers.add_parser("resolve", help="Show how a name resolves")
    resolve_parser.add_argument("species", help="Species or provisional name")

    # 'build' command - build static pages
    build_parser = subparsers.add_parser("build", help="Build gallery pages into the site dir")
    build_parser.add_argument("species", nargs="+", help="One or more species names")
    build_parser.add_argument(
        "--site-dir",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )
    serve_parser.add_argument(
        "--site-dir",
        type=Path,
        default=None,
        help="Directory to serve (default: site_dir from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr at DEBUG or the configured level."""
    level = logging.DEBUG if debug else get_settings().log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def cmd_gallery(args: argparse.Namespace) -> int:
    """Handle the 'gallery' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}", file=sys.stderr)

    name = species_name_from(args.species, args.page_title)
    limit = args.limit if args.limit is not None else settings.display_limit
    gallery_id = args.gallery_id or new_gallery_id()

    exit_code = 0
    try:
        result = resolve_and_fetch(name)
    except EmptyNameError as exc:
        html = build_error_html(str(exc))
        exit_code = 1
    else:
        if isinstance(result, NotFound):
            html = build_not_found_html(result.query)
        else:
            html = build_gallery_html(result, gallery_id, display_limit=limit)

    if args.output is not None:
        args.output.write_text(html, encoding="utf-8")
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        print(html)
    return exit_code


def cmd_resolve(args: argparse.Namespace) -> int:
    """Handle the 'resolve' command: print the resolution summary as JSON."""
    name = species_name_from(args.species)
    try:
        result = resolve_and_fetch(name)
    except EmptyNameError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if isinstance(result, NotFound):
        summary: dict[str, object] = {"query": result.query, "found": False}
    else:
        summary = {
            "query": result.query,
            "found": True,
            "found_by": result.found_by.label,
            "provisional_only": resolver.is_provisional_name(name),
            "total_results": result.total_results,
            "observations_with_photos": result.observation_count,
            "total_photos": result.total_photos,
            "locations": len(result.locations),
            "search_url": search_page_url(result.found_by),
        }
    print(json.dumps(summary, indent=2))
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: write gallery pages to the site dir."""
    result = build_galleries(args.species, site_dir=args.site_dir)
    print(f"Built {result['pages']} pages ({result['found']} with observations).")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Display limit: {settings.display_limit}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(args.site_dir or settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'inat-gallery build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "gallery": cmd_gallery,
        "resolve": cmd_resolve,
        "build": cmd_build,
        "info": cmd_info,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
