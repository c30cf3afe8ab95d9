"""Usages command: report which variables a dashboard references."""

import logging
from argparse import Namespace
from pathlib import Path

from templating.exceptions import DashboardValidationError
from templating.loader import DashboardLoader
from templating.usage import find_variable_usages


logger = logging.getLogger(__name__)


def report_usages(args: Namespace) -> int:
    """
    Load a dashboard and print its variable usages.

    Returns 2 on validation errors, 1 if --unused was given and unused
    variables exist, else 0.
    """
    dashboard_path = Path(args.dashboard)
    if not dashboard_path.exists():
        logger.error(f"Dashboard file not found: {dashboard_path}")
        return 1

    logger.info(f"Loading dashboard: {dashboard_path}")
    loader = DashboardLoader()
    try:
        dashboard = loader.load(dashboard_path)
    except DashboardValidationError as e:
        for error in e.errors:
            location = f" ({error.path})" if error.path else ""
            logger.error(f"Validation error{location}: {error.message}")
        return e.exit_code

    usages = find_variable_usages(dashboard)

    if args.unused:
        unused = [name for name, found in usages.items() if not found]
        for name in unused:
            print(name)
        return 1 if unused else 0

    for name, found in usages.items():
        print(f"{name}: {', '.join(found) if found else '(unused)'}")
    return 0
