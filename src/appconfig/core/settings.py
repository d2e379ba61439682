"""Tagged values stored under AppSettings."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class SettingKind(Enum):
    SCALAR = auto()  # string, number, boolean or null
    NESTED = auto()  # JSON object or array, kept as the raw tree


@dataclass(frozen=True)
class AppSetting:
    """A single AppSettings entry.

    Attributes:
        name: Setting name as written in the document
        kind: Whether the value is a scalar or a nested tree
        value: The scalar, or the raw tree for nested settings
    """

    name: str
    kind: SettingKind
    value: Any

    @classmethod
    def from_json(cls, name: str, value: Any) -> "AppSetting":
        if isinstance(value, (dict, list)):
            return cls(name=name, kind=SettingKind.NESTED, value=copy.deepcopy(value))
        return cls(name=name, kind=SettingKind.SCALAR, value=value)

    @property
    def is_nested(self) -> bool:
        return self.kind is SettingKind.NESTED

    def raw(self) -> Any:
        """Return the stored value; nested trees are copied."""
        if self.is_nested:
            return copy.deepcopy(self.value)
        return self.value
