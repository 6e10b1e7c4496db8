#!/usr/bin/env python3
"""
igslurp - Command Line Interface

Query the Instagram scraper API on RapidAPI from the terminal.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

from igslurp import __version__
from igslurp.core import (
    COMMANDS,
    CommandDispatcher,
    CursorPaginator,
    IdentifierResolver,
    InstagramApiClient,
    get_command,
)
from igslurp.formatters import (
    OutputContext,
    format_profile,
    format_reels,
    format_user_id,
    format_user_list,
    print_json,
)
from igslurp.storage import AppConfig, get_config, resolve_credentials
from igslurp.utils import (
    CourtesyDelay,
    IgSlurpError,
    UnknownCommandError,
    ValidationError,
    setup_logger,
)

Renderer = Callable[[OutputContext, Any], None]

RENDERERS: Dict[str, Renderer] = {
    "profile": format_profile,
    "user-id": format_user_id,
    "following": lambda ctx, doc: format_user_list(ctx, doc, "Following"),
    "followers": lambda ctx, doc: format_user_list(ctx, doc, "Followers"),
    "posts": print_json,
    "highlights": print_json,
    "reels": format_reels,
}

EXAMPLES = [
    "profile randomuser123",
    "user-id randomuser123",
    "following randomuser123",
    "followers randomuser123 --auto-paginate",
    "following 1234567890 --max-id 25",
    "profile randomuser123 --json",
    "reels randomuser123",
]


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="igslurp",
        description="Instagram API client for social media intelligence",
    )
    parser.add_argument("command", nargs="?", help="Command to run (" + ", ".join(COMMANDS) + ")")
    parser.add_argument("value", nargs="?", help="Value to search for (username, user_id, etc.)")
    parser.add_argument("-k", "--key", help="RapidAPI key (can also use INSTAGRAM_API_KEY env var)")
    parser.add_argument("-m", "--max-id", dest="max_id", help="Pagination cursor for next page")
    parser.add_argument("-c", "--count", type=_positive_int, help="Number of items to fetch per page")
    parser.add_argument("-j", "--json", action="store_true", dest="as_json",
                        help="Output raw JSON instead of formatted results")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress colored output")
    parser.add_argument("-a", "--auto-paginate", action="store_true", dest="auto_paginate",
                        help="Automatically fetch all pages of results")
    parser.add_argument("--config", type=Path, help="Path to config.json")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


class IgSlurpCLI:
    """Command-line interface for igslurp."""

    def __init__(self, args: argparse.Namespace, config: Optional[AppConfig] = None):
        """
        Initialize CLI application.

        Args:
            args: Parsed command-line arguments
            config: Configuration to use instead of the global one
        """
        self.args = args
        if config is None:
            config = AppConfig.load(args.config) if args.config else get_config()
        self.config = config

        log_level = logging.DEBUG if args.debug else getattr(logging, self.config.log_level)
        self.logger = setup_logger(
            "igslurp",
            log_level=log_level,
            log_dir=self.config.log_dir,
            console_output=False  # rich owns the terminal
        )

        self.output = OutputContext.create(quiet=args.quiet)

    def run(self) -> int:
        """Run one command and return the process exit code."""
        args = self.args

        if not args.command:
            self.show_help()
            return 0

        try:
            command = get_command(args.command)
            if not args.value or not args.value.strip():
                raise ValidationError(f"{command.value_label} is required.")

            load_dotenv(find_dotenv(usecwd=True))
            api_key = resolve_credentials(args.key, key_file=self.config.api_key_file)

            with InstagramApiClient(api_key, self.config) as client:
                dispatcher = CommandDispatcher(
                    client,
                    CursorPaginator(
                        client,
                        delay=CourtesyDelay(self.config.page_delay),
                        max_pages=self.config.max_pages,
                    ),
                    IdentifierResolver(client, status=self.output.status),
                    default_count=self.config.default_count,
                )
                document = dispatcher.dispatch(
                    command.name,
                    args.value,
                    count=args.count,
                    max_id=args.max_id,
                    auto_paginate=args.auto_paginate,
                )

            if args.as_json:
                print_json(self.output, document)
            else:
                RENDERERS[command.name](self.output, document)
            return 0

        except UnknownCommandError as e:
            self.logger.error(str(e))
            self.output.error(str(e))
            self.show_help()
            return e.exit_code
        except IgSlurpError as e:
            self.logger.error(f"{type(e).__name__}: {e}")
            self.output.error(str(e))
            return e.exit_code
        except KeyboardInterrupt:
            self.output.status.print("\n[yellow]Interrupted by user[/yellow]")
            return 1
        except Exception as e:
            self.logger.error(f"Unexpected error: {e}", exc_info=True)
            self.output.error(f"Unexpected error: {e}")
            return 1

    def show_help(self) -> None:
        """Display the command overview."""
        status = self.output.status
        status.print("[bold]Instagram API Client[/bold]\n")
        status.print("[bold]Commands:[/bold]")
        for command in COMMANDS.values():
            status.print(f"  [cyan]{command.name:<12}[/cyan]  {command.description}")
        status.print("\n[bold]Examples:[/bold]")
        for example in EXAMPLES:
            status.print(f"  [green]igslurp {example}[/green]")
        status.print("\n[bold]Options:[/bold]")
        for flags, text in (
            ("-k, --key", "RapidAPI key"),
            ("-m, --max-id", "Pagination cursor"),
            ("-c, --count", "Number of items to fetch"),
            ("-j, --json", "Output raw JSON"),
            ("-q, --quiet", "Suppress colored output"),
            ("-a, --auto-paginate", "Automatically fetch all pages"),
        ):
            status.print(f"  [yellow]{flags:<20}[/yellow]  {text}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI application."""
    args = create_parser().parse_args(argv)
    try:
        cli = IgSlurpCLI(args)
    except IgSlurpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
