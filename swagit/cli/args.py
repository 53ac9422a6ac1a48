"""Command-line argument parsing for swagit."""

import argparse
from swagit.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="swagit",
        description="Switch, delete and sync git branches",
        epilog="Without flags, pick a branch to check out.",
    )
    parser.add_argument("--version", action="version", version=f"swagit {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-d", "--delete", action="store_true", help="Select branches which you want to delete"
    )
    mode.add_argument(
        "-s",
        "--sync",
        action="store_true",
        help="Pull latest changes and cleanup merged branches",
    )
    parser.add_argument(
        "--remote", default="origin", help="Remote to reconcile against (default: origin)"
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Never open the picker; checkout takes the first branch",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
