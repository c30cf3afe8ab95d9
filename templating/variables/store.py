"""
In-process variable store.

Holds variable records keyed by integer id and provides the create/read/
update/remove helpers that higher layers call. A transient (unsaved)
record passed to the property helpers is read or written directly and
the store is left untouched.
"""

import copy
import logging
import threading
from typing import Any, Dict, Mapping, Optional, Union

from .model_utils import assign_model_properties, strip_id


logger = logging.getLogger(__name__)

Record = Dict[str, Any]
RecordLike = Union[Mapping[str, Any], Any]


def _as_record(model: RecordLike) -> Record:
    if hasattr(model, 'to_dict'):
        return model.to_dict()
    if isinstance(model, Mapping):
        return dict(model)
    raise TypeError(f"Expected a variable model or mapping, got {type(model).__name__}")


class VariableStore:
    """Variable records keyed by id, with a monotonically increasing last_id."""

    def __init__(self):
        """Initialize an empty store."""
        self._variables: Dict[int, Record] = {}
        self._lock = threading.Lock()
        self.last_id = -1

    def create_variable(self, model: RecordLike, defaults: Optional[RecordLike] = None) -> int:
        """
        Register a new variable record.

        Properties missing from model are filled in from defaults.

        Args:
            model: Variable model or mapping
            defaults: Default property values

        Returns:
            The newly assigned id
        """
        record = copy.deepcopy(_as_record(model))
        if defaults is not None:
            assign_model_properties(record, dict(record), _as_record(defaults))

        with self._lock:
            self.last_id += 1
            variable_id = self.last_id
            record['id'] = variable_id
            self._variables[variable_id] = record

        logger.debug(f"Created variable {record.get('name')!r} with id {variable_id}")
        return variable_id

    def remove_variable(self, variable_id: int) -> None:
        """Delete the record for variable_id. Unknown ids are ignored."""
        with self._lock:
            removed = self._variables.pop(variable_id, None)
        if removed is None:
            logger.debug(f"Remove ignored, no variable with id {variable_id}")

    def _record(self, variable_id: int) -> Record:
        try:
            return self._variables[variable_id]
        except KeyError:
            raise KeyError(f"No variable with id {variable_id}") from None

    def get_variable_prop(self, variable_id: Optional[int], temporary: Optional[RecordLike],
                          prop_name: str) -> Any:
        """
        Read a property from the transient record if given, else from the store.

        Raises:
            KeyError: If no transient record is given and the id is unknown
        """
        if temporary is not None:
            if isinstance(temporary, Mapping):
                return temporary.get(prop_name)
            return getattr(temporary, prop_name, None)
        return self._record(variable_id).get(prop_name)

    def set_variable_prop(self, variable_id: Optional[int], temporary: Optional[RecordLike],
                          prop_name: str, value: Any) -> None:
        """
        Write a property on the transient record if given, else in the store.

        Raises:
            KeyError: If no transient record is given and the id is unknown
        """
        if temporary is not None:
            if isinstance(temporary, dict):
                temporary[prop_name] = value
            else:
                setattr(temporary, prop_name, value)
            return

        with self._lock:
            self._record(variable_id)[prop_name] = value

    def get_variable_model(self, variable_id: Optional[int],
                           temporary: Optional[RecordLike] = None) -> Record:
        """Return a copy of the record with its 'id' removed."""
        if temporary is not None:
            return copy.deepcopy(strip_id(_as_record(temporary)))
        return copy.deepcopy(strip_id(self._record(variable_id)))

    def variables(self) -> Dict[int, Record]:
        """Snapshot of all records."""
        with self._lock:
            return copy.deepcopy(self._variables)


store = VariableStore()


def create_variable_in_state(model: RecordLike, defaults: Optional[RecordLike] = None) -> int:
    return store.create_variable(model, defaults)


def remove_variable_from_state(variable_id: int) -> None:
    store.remove_variable(variable_id)


def get_variable_prop_from_state(variable_id: Optional[int], temporary: Optional[RecordLike],
                                 prop_name: str) -> Any:
    return store.get_variable_prop(variable_id, temporary, prop_name)


def set_variable_prop_in_state(variable_id: Optional[int], temporary: Optional[RecordLike],
                               prop_name: str, value: Any) -> None:
    store.set_variable_prop(variable_id, temporary, prop_name, value)


def get_variable_model(variable_id: Optional[int], temporary: Optional[RecordLike] = None) -> Record:
    return store.get_variable_model(variable_id, temporary)
