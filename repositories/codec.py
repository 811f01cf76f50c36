from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

import dacite

T = TypeVar('T')

DACITE_CONFIG = dacite.Config(
    cast=[Enum, float],
    type_hooks={
        datetime: datetime.fromisoformat,
        date: date.fromisoformat,
    },
)


def _encode_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value

    # datetime is a subclass of date
    if isinstance(value, date):
        return value.isoformat()

    return value


def _dict_factory(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: _encode_value(value) for key, value in items}


def to_record(obj: Any) -> dict[str, Any]:
    """Convert a model dataclass into a JSON-compatible dict."""
    return asdict(obj, dict_factory=_dict_factory)


def from_record(data_class: type[T], data: dict[str, Any]) -> T:
    """Build a model dataclass back from a dict produced by `to_record`."""
    return dacite.from_dict(data_class=data_class, data=data, config=DACITE_CONFIG)
