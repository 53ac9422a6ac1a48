"""Command-line entry point for swagit"""

import os
import signal
import sys

from rich.console import Console
from rich.markup import escape

from swagit.cli.args import parse_args
from swagit.config import Config
from swagit.core import Swagit
from swagit.logging_config import get_logger, setup_logging

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)


def _signal_handler(signum, frame):
    """Restore the terminal and leave quietly on Ctrl-C."""
    console.show_cursor(True)
    print()  # New line after ^C
    sys.exit(0)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)
    signal.signal(signal.SIGINT, _signal_handler)

    try:
        config = Config(
            remote_name=parsed_args.remote,
            interactive=not parsed_args.no_interactive,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
        logger.debug(f"Configuration: {config.to_dict()}")
        tool = Swagit(os.getcwd(), config)
        tool.show_banner()

        if parsed_args.delete:
            tool.delete()
        elif parsed_args.sync:
            tool.sync()
        else:
            tool.checkout()

        return 0
    except KeyboardInterrupt:
        console.show_cursor(True)
        return 0
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        if parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
