"""Environment variables of a CAN network description."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["AccessType", "EnvironmentVariable", "VarType"]


class VarType(enum.Enum):
    """Kind of value an environment variable holds."""

    INTEGER = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()
    DATA = enum.auto()


class AccessType(enum.Enum):
    """Access rights of an environment variable.

    The underscored variants are the ``0x8000`` forms of the plain ones.
    """

    UNRESTRICTED = enum.auto()
    READ = enum.auto()
    WRITE = enum.auto()
    READ_WRITE = enum.auto()
    UNRESTRICTED_ = enum.auto()
    READ_ = enum.auto()
    WRITE_ = enum.auto()
    READ_WRITE_ = enum.auto()


def _all_found(needles: Iterable[Any], haystack: list[Any]) -> bool:
    return all(item in haystack for item in needles)


@dataclass(eq=False)
class EnvironmentVariable:
    """An environment variable with its range, access nodes and annotations."""

    name: str
    var_type: VarType
    minimum: float
    maximum: float
    unit: str
    initial_value: float
    ev_id: int
    access_type: AccessType
    access_nodes: list[str] = field(default_factory=list)
    value_encoding_descriptions: list[Any] = field(default_factory=list)
    data_size: int = 0
    attribute_values: list[Any] = field(default_factory=list)
    comment: str = ""

    def clone(self) -> EnvironmentVariable:
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvironmentVariable):
            return NotImplemented
        # Collections compare by containment: every item of ``other`` must
        # be present here.
        return (
            self.name == other.name
            and self.var_type == other.var_type
            and self.minimum == other.minimum
            and self.unit == other.unit
            and self.initial_value == other.initial_value
            and self.ev_id == other.ev_id
            and self.access_type == other.access_type
            and _all_found(other.access_nodes, self.access_nodes)
            and _all_found(other.value_encoding_descriptions, self.value_encoding_descriptions)
            and self.data_size == other.data_size
            and _all_found(other.attribute_values, self.attribute_values)
            and self.comment == other.comment
        )

    __hash__ = None  # type: ignore[assignment]