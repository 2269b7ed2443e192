# pylint: disable=import-outside-toplevel
"""Main entry point for the gpxkit CLI.

This module provides the command-line interface for gpxkit, allowing users to
list the track points of a GPX file, show its metadata, and access
help/documentation.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()


def main(argv=None):
    """Main function for the gpxkit CLI."""
    parser = argparse.ArgumentParser(description="gpxkit CLI")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    points_parser = subparsers.add_parser("points", help="List the track points of a GPX file")
    points_parser.add_argument("path", type=str, help="Path to a .gpx or .gpx.gz file")
    points_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    metadata_parser = subparsers.add_parser("metadata", help="Show the name, description and author of a GPX file")
    metadata_parser.add_argument("path", type=str, help="Path to a .gpx or .gpx.gz file")
    metadata_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    from gpxkit.appconfig import load_config

    if args.debug or load_config().get("debug", False):
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "points":
        from gpxkit.commands.points import run

        return run(args.path, as_json=args.json)
    elif args.command == "metadata":
        from gpxkit.commands.metadata import run

        return run(args.path, as_json=args.json)
    elif args.command == "help":
        print(
            """
gpxkit - Extract track points and metadata from GPX files.

Usage:
    python -m gpxkit [--debug] <command>

Commands:
    points PATH [--json]     List latitude, longitude, elevation, local time
                             and heart rate of each point in the first track
                             segment
    metadata PATH [--json]   Show the name, description and author from the
                             <metadata> block
    help                     Show this help and usage documentation

Configuration:
    Settings are read from gpxkit_config.json (or the file named by the
    GPXKIT_CONFIG environment variable, which may be set in .env):
        home_timezone      Time zone for timestamps (default: local time)
        timestamp_format   strftime format (default: %Y-%m-%d %H:%M:%S)
        debug              Enable debug logging (default: false)
"""
        )
        return 0
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
