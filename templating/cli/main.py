"""Main CLI entry point for the templating tools."""

import argparse
import logging
import sys
from typing import Optional

from .commands import scan_text, check_contains, interpolate_query, report_usages


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the templating CLI."""
    parser = argparse.ArgumentParser(
        prog='templating',
        description='Dashboard variable reference tools'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    scan_parser = subparsers.add_parser('scan', help='List variable references in a string')
    scan_parser.add_argument('text', type=str, help='String to scan')

    contains_parser = subparsers.add_parser(
        'contains',
        help='Check whether a variable is referenced'
    )
    contains_parser.add_argument('name', type=str, help='Variable name')
    contains_parser.add_argument('texts', nargs='+', help='Strings to search')

    interpolate_parser = subparsers.add_parser(
        'interpolate',
        help='Substitute $__searchFilter in a query'
    )
    interpolate_parser.add_argument('query', type=str, help='Query string')
    interpolate_parser.add_argument(
        '--search-filter',
        type=str,
        help='Search term typed by the user'
    )
    interpolate_parser.add_argument(
        '--wildcard',
        type=str,
        default='*',
        help='Wildcard appended to the search term'
    )
    interpolate_parser.add_argument(
        '--quote',
        action='store_true',
        help='Wrap the substituted literal in single quotes'
    )

    usages_parser = subparsers.add_parser(
        'usages',
        help='Report where dashboard variables are referenced'
    )
    usages_parser.add_argument(
        'dashboard',
        type=str,
        help='Path to dashboard YAML or JSON file'
    )
    usages_parser.add_argument(
        '--unused',
        action='store_true',
        help='Only list unused variables'
    )

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Set up logging from --log-level/--quiet/--verbose."""
    log_level = getattr(logging, args.log_level.upper())
    if args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    configure_logging(parsed_args)

    commands = {
        'scan': scan_text,
        'contains': check_contains,
        'interpolate': interpolate_query,
        'usages': report_usages,
    }
    return commands[parsed_args.command](parsed_args)


if __name__ == '__main__':
    sys.exit(main())
