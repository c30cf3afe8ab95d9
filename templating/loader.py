"""Dashboard loader and templating validation."""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from templating.exceptions import ValidationError, DashboardValidationError
from templating.variables.types import VARIABLE_TYPES, VariableModel, model_class_for


logger = logging.getLogger(__name__)


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps bare on/off/yes/no as strings instead of booleans."""
    pass


# Drop the implicit bool resolvers keyed on these first characters; true/false still resolve
PreservingLoader.yaml_implicit_resolvers = dict(PreservingLoader.yaml_implicit_resolvers)
for _first_char in "oOyYnN":
    if _first_char in PreservingLoader.yaml_implicit_resolvers:
        PreservingLoader.yaml_implicit_resolvers[_first_char] = [
            (tag, regexp) for tag, regexp in PreservingLoader.yaml_implicit_resolvers[_first_char]
            if tag != "tag:yaml.org,2002:bool"
        ]


class DashboardLoader:
    """Loads dashboard YAML/JSON and validates its templating section."""

    NAME_PATTERN = re.compile(r'\w+', re.ASCII)

    def __init__(self):
        """Initialize loader."""
        self.errors: List[ValidationError] = []

    def load(self, dashboard_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load and validate a dashboard file.

        Returns:
            The dashboard document with 'templating' normalized to
            {'list': [...]}

        Raises:
            DashboardValidationError: If the file cannot be parsed or fails
                validation
        """
        self.errors = []
        dashboard_path = Path(dashboard_path)
        logger.debug(f"Loading dashboard: {dashboard_path}")

        try:
            with open(dashboard_path, 'rb') as f:
                dashboard = yaml.load(f, Loader=PreservingLoader)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load dashboard: {e}")
            self._raise_validation_errors()

        return self.validate(dashboard)

    def validate(self, dashboard: Any) -> Dict[str, Any]:
        """Validate an already parsed dashboard document."""
        self.errors = []

        if dashboard is None or not isinstance(dashboard, dict):
            self._add_error("Dashboard must be a YAML/JSON object")
            self._raise_validation_errors()

        templating = dashboard.get('templating', {'list': []})
        if isinstance(templating, list):
            templating = {'list': templating}
        if not isinstance(templating, dict) or not isinstance(templating.get('list', []), list):
            self._add_error("'templating' must be a list or an object with a 'list' array", "templating")
            variables: List[Any] = []
        else:
            variables = templating.get('list', [])
        dashboard['templating'] = {'list': variables}

        self._validate_variables(variables)
        self._validate_panels(dashboard.get('panels', []))

        if self.errors:
            self._raise_validation_errors()

        return dashboard

    def _validate_variables(self, variables: List[Any]):
        """Validate variable entries and name uniqueness."""
        seen = set()
        for index, variable in enumerate(variables):
            path = f"templating.list[{index}]"
            if not isinstance(variable, dict):
                self._add_error("Variable must be an object", path)
                continue

            name = variable.get('name')
            if not isinstance(name, str) or not self.NAME_PATTERN.fullmatch(name):
                self._add_error(f"Variable name must be a non-empty word string, got {name!r}", path)
            elif name in seen:
                self._add_error(f"Duplicate variable name '{name}'", path)
            else:
                seen.add(name)

            variable_type = variable.get('type', 'query')
            if variable_type not in VARIABLE_TYPES:
                self._add_error(
                    f"Unknown variable type '{variable_type}'. Supported: {sorted(VARIABLE_TYPES)}",
                    path
                )

    def _validate_panels(self, panels: Any):
        """Validate panels and their targets."""
        if not isinstance(panels, list):
            self._add_error("'panels' must be a list", "panels")
            return

        for index, panel in enumerate(panels):
            path = f"panels[{index}]"
            if not isinstance(panel, dict):
                self._add_error("Panel must be an object", path)
                continue
            targets = panel.get('targets', [])
            if not isinstance(targets, list) or not all(isinstance(t, dict) for t in targets):
                self._add_error("'targets' must be a list of objects", f"{path}.targets")

    def variable_models(self, dashboard: Dict[str, Any]) -> List[VariableModel]:
        """Build typed models for the dashboard's variables."""
        return [
            model_class_for(variable.get('type', 'query')).from_dict(variable)
            for variable in dashboard['templating']['list']
        ]

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise DashboardValidationError(self.errors)
