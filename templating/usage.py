"""
Variable usage report for a loaded dashboard.

A variable is used when a panel target, or another variable's query,
regex or definition, references it.
"""

import logging
from typing import Any, Dict, List

from templating.variables.matcher import contains_variable


logger = logging.getLogger(__name__)

DEPENDENCY_FIELDS = ('query', 'regex', 'definition')


def _panel_label(panel: Dict[str, Any], index: int) -> str:
    return panel.get('title') or f"panel[{index}]"


def find_variable_usages(dashboard: Dict[str, Any]) -> Dict[str, List[str]]:
    """
    Map each declared variable name to the places that reference it.

    Args:
        dashboard: Document returned by DashboardLoader.load/validate

    Returns:
        Variable name -> list of panel labels and 'variable:<name>' entries,
        in dashboard order
    """
    variables = dashboard['templating']['list']
    panels = dashboard.get('panels', [])
    usages: Dict[str, List[str]] = {}

    for variable in variables:
        name = variable['name']
        found: List[str] = []

        for index, panel in enumerate(panels):
            targets = panel.get('targets', [])
            if targets and contains_variable(targets, name):
                found.append(_panel_label(panel, index))

        for other in variables:
            if other is variable:
                continue
            texts = [other[key] for key in DEPENDENCY_FIELDS if isinstance(other.get(key), str)]
            if texts and contains_variable(texts, name):
                found.append(f"variable:{other['name']}")

        logger.debug(f"Variable '{name}' referenced by {found}")
        usages[name] = found

    return usages


def unused_variables(dashboard: Dict[str, Any]) -> List[str]:
    """Names of declared variables nothing references."""
    return [name for name, found in find_variable_usages(dashboard).items() if not found]
