"""
Variable model type definitions.

Dataclasses for the templating variable records stored in a dashboard,
plus the registry of known variable types.
"""

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, Dict, List, Literal, Optional, Type, Union, get_args


VariableType = Literal['query', 'adhoc', 'constant', 'datasource', 'interval', 'textbox', 'custom']

VARIABLE_TYPE_NAMES = get_args(VariableType)


class VariableRefresh(IntEnum):
    """When a variable's options are refreshed."""
    NEVER = 0
    ON_DASHBOARD_LOAD = 1
    ON_TIME_RANGE_CHANGED = 2


class VariableHide(IntEnum):
    """How a variable is shown on the dashboard."""
    DONT_HIDE = 0
    HIDE_VARIABLE = 1
    HIDE_LABEL = 2


class VariableSort(IntEnum):
    """Sort order applied to variable options."""
    DISABLED = 0
    ALPHABETICAL_ASC = 1
    ALPHABETICAL_DESC = 2
    NUMERICAL_ASC = 3
    NUMERICAL_DESC = 4
    ALPHABETICAL_CASE_INSENSITIVE_ASC = 5
    ALPHABETICAL_CASE_INSENSITIVE_DESC = 6


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def _key(f) -> str:
    """Dashboard JSON key for a dataclass field."""
    return f.metadata.get('key', _camel(f.name))


def _dump(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, IntEnum):
        return int(value)
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


class _Serializable:
    """to_dict/from_dict over dataclass fields using dashboard JSON keys."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, omitting None values."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[_key(f)] = _dump(value)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create instance from dict, ignoring unknown keys."""
        kwargs = {}
        for f in fields(cls):
            key = _key(f)
            if key not in data:
                continue
            value = data[key]
            loader = f.metadata.get('load')
            kwargs[f.name] = loader(value) if loader and value is not None else value
        return cls(**kwargs)


@dataclass
class VariableTag(_Serializable):
    """Tag attached to query variable options."""
    text: Union[str, List[str]] = ''


@dataclass
class VariableOption(_Serializable):
    """One selectable value of a variable."""
    selected: bool = False
    text: Union[str, List[str]] = ''
    value: Union[str, List[str]] = ''
    is_none: Optional[bool] = None


@dataclass
class AdHocVariableFilter(_Serializable):
    """Key/operator/value filter held by an ad hoc variable."""
    key: str = ''
    operator: str = ''
    value: str = ''
    condition: str = ''


def _load_model(data: Dict[str, Any]) -> 'VariableModel':
    return model_class_for(data.get('type', 'query')).from_dict(data)


@dataclass
class VariableModel(_Serializable):
    """
    Base variable record.

    Attributes:
        id: Store-assigned id, None until the record is created
        type: Variable type key
        name: Name used in references ($name, [[name]], ${name})
        label: Display label
        hide: Visibility setting
        skip_url_sync: Do not sync value to the URL
        use_temporary: Edit a transient copy instead of the stored record
        temporary: Transient copy being edited
    """
    id: Optional[int] = None
    type: str = 'query'
    name: str = ''
    label: str = ''
    hide: VariableHide = field(default=VariableHide.DONT_HIDE, metadata={'load': VariableHide})
    skip_url_sync: bool = False
    use_temporary: Optional[bool] = None
    temporary: Optional['VariableModel'] = field(default=None, metadata={'load': _load_model})


def _load_option(data: Dict[str, Any]) -> VariableOption:
    return VariableOption.from_dict(data)


def _load_options(items: List[Dict[str, Any]]) -> List[VariableOption]:
    return [VariableOption.from_dict(item) for item in items]


@dataclass
class VariableWithOptions(VariableModel):
    """Variable with a current selection and a list of options."""
    current: VariableOption = field(default_factory=VariableOption, metadata={'load': _load_option})
    options: List[VariableOption] = field(default_factory=list, metadata={'load': _load_options})
    query: str = ''


@dataclass
class QueryVariableModel(VariableWithOptions):
    type: str = 'query'
    all_value: Optional[str] = None
    datasource: Optional[str] = None
    definition: str = ''
    include_all: bool = False
    multi: bool = False
    refresh: VariableRefresh = field(default=VariableRefresh.NEVER, metadata={'load': VariableRefresh})
    regex: str = ''
    sort: VariableSort = field(default=VariableSort.DISABLED, metadata={'load': VariableSort})
    tags: List[VariableTag] = field(
        default_factory=list,
        metadata={'load': lambda items: [VariableTag.from_dict(item) for item in items]}
    )
    tags_query: str = ''
    tag_values_query: str = ''
    use_tags: bool = False


@dataclass
class CustomVariableModel(VariableWithOptions):
    type: str = 'custom'
    all_value: Optional[str] = None
    include_all: bool = False
    multi: bool = False


@dataclass
class DataSourceVariableModel(VariableWithOptions):
    type: str = 'datasource'
    include_all: bool = False
    multi: bool = False
    refresh: VariableRefresh = field(default=VariableRefresh.ON_DASHBOARD_LOAD, metadata={'load': VariableRefresh})
    regex: str = ''


@dataclass
class IntervalVariableModel(VariableWithOptions):
    type: str = 'interval'
    auto: bool = False
    auto_min: str = field(default='10s', metadata={'key': 'auto_min'})
    auto_count: int = field(default=30, metadata={'key': 'auto_count'})
    refresh: VariableRefresh = field(default=VariableRefresh.ON_TIME_RANGE_CHANGED, metadata={'load': VariableRefresh})


@dataclass
class TextBoxVariableModel(VariableWithOptions):
    type: str = 'textbox'


@dataclass
class ConstantVariableModel(VariableWithOptions):
    type: str = 'constant'


@dataclass
class AdHocVariableModel(VariableModel):
    type: str = 'adhoc'
    datasource: Optional[str] = None
    filters: List[AdHocVariableFilter] = field(
        default_factory=list,
        metadata={'load': lambda items: [AdHocVariableFilter.from_dict(item) for item in items]}
    )


@dataclass
class VariableTypeInfo:
    """Registry entry for a variable type."""
    name: str
    ctor: Type[VariableModel]
    description: str
    supports_multi: bool = False


VARIABLE_TYPES: Dict[str, VariableTypeInfo] = {
    'query': VariableTypeInfo(
        name='Query',
        ctor=QueryVariableModel,
        description='Variable values are fetched from a datasource query',
        supports_multi=True
    ),
    'custom': VariableTypeInfo(
        name='Custom',
        ctor=CustomVariableModel,
        description='Define variable values manually',
        supports_multi=True
    ),
    'datasource': VariableTypeInfo(
        name='Datasource',
        ctor=DataSourceVariableModel,
        description='Enables you to dynamically switch the datasource for multiple panels',
        supports_multi=True
    ),
    'interval': VariableTypeInfo(
        name='Interval',
        ctor=IntervalVariableModel,
        description='Define a timespan interval (ex 1m, 1h, 1d)'
    ),
    'textbox': VariableTypeInfo(
        name='Text box',
        ctor=TextBoxVariableModel,
        description='Define a textbox variable, where users can enter any arbitrary string'
    ),
    'constant': VariableTypeInfo(
        name='Constant',
        ctor=ConstantVariableModel,
        description='Define a hidden constant variable, useful for metric prefixes in dashboards you want to share'
    ),
    'adhoc': VariableTypeInfo(
        name='Ad hoc filters',
        ctor=AdHocVariableModel,
        description='Add key/value filters on the fly'
    ),
}


def model_class_for(variable_type: str) -> Type[VariableModel]:
    """
    Look up the model class for a variable type key.

    Raises:
        ValueError: If the type is not registered
    """
    info = VARIABLE_TYPES.get(variable_type)
    if info is None:
        raise ValueError(
            f"Unknown variable type '{variable_type}'. Supported: {sorted(VARIABLE_TYPES)}"
        )
    return info.ctor
