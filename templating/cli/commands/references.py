"""Scan, contains and interpolate commands."""

import logging
from argparse import Namespace

from templating.variables import (
    contains_variable,
    interpolate_search_filter,
    scan,
)


logger = logging.getLogger(__name__)


def scan_text(args: Namespace) -> int:
    """Print one tab separated line per reference: syntax, name, field, format."""
    count = 0
    for reference in scan(args.text):
        print('\t'.join([
            reference.syntax.value,
            reference.name,
            reference.field or '',
            reference.format or '',
        ]))
        count += 1

    logger.info(f"Found {count} reference(s)")
    return 0


def check_contains(args: Namespace) -> int:
    """Print true/false; exit 0 when the variable is referenced, 1 otherwise."""
    found = contains_variable(args.texts, args.name)
    print('true' if found else 'false')
    return 0 if found else 1


def interpolate_query(args: Namespace) -> int:
    """Print the query with its first $__searchFilter substituted."""
    options = {'searchFilter': args.search_filter} if args.search_filter else {}
    print(interpolate_search_filter(
        args.query,
        options,
        wildcard_char=args.wildcard,
        quote_literal=args.quote
    ))
    return 0
