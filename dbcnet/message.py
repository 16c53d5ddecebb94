"""CAN messages of a network description."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["Message", "MessageError", "Multiplexer"]


class Multiplexer(enum.Enum):
    """Role of a signal in message multiplexing."""

    NO_MUX = enum.auto()
    MUX_SWITCH = enum.auto()
    MUX_VALUE = enum.auto()


class MessageError(enum.Enum):
    """Consistency state of a message."""

    NO_ERROR = enum.auto()
    MUX_VALUE_WITHOUT_MUX_SIGNAL = enum.auto()


def _all_found(needles: Iterable[Any], haystack: list[Any]) -> bool:
    return all(item in haystack for item in needles)


def _mux_role(signal: Any) -> Multiplexer:
    return getattr(signal, "multiplexer_indicator", Multiplexer.NO_MUX)


@dataclass(eq=False)
class Message:
    """A CAN message with its signals and annotations.

    Signals are any objects with a ``multiplexer_indicator`` attribute
    holding a :class:`Multiplexer`.
    """

    id: int
    name: str
    message_size: int
    transmitter: str = ""
    message_transmitters: list[str] = field(default_factory=list)
    signals: list[Any] = field(default_factory=list)
    attribute_values: list[Any] = field(default_factory=list)
    comment: str = ""
    signal_groups: list[Any] = field(default_factory=list)

    @property
    def mux_signal(self) -> Optional[Any]:
        """The multiplexer switch signal (the last one, if several), or None."""
        switch = None
        for signal in self.signals:
            if _mux_role(signal) is Multiplexer.MUX_SWITCH:
                switch = signal
        return switch

    @property
    def error(self) -> MessageError:
        """Report multiplexed signals that have no switch signal."""
        has_mux_value = any(_mux_role(s) is Multiplexer.MUX_VALUE for s in self.signals)
        if has_mux_value and self.mux_signal is None:
            return MessageError.MUX_VALUE_WITHOUT_MUX_SIGNAL
        return MessageError.NO_ERROR

    def clone(self) -> Message:
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        # Collections compare by containment: every item of ``other`` must
        # be present here.
        return (
            self.id == other.id
            and self.name == other.name
            and self.transmitter == other.transmitter
            and _all_found(other.message_transmitters, self.message_transmitters)
            and _all_found(other.signals, self.signals)
            and _all_found(other.attribute_values, self.attribute_values)
            and self.comment == other.comment
            and _all_found(other.signal_groups, self.signal_groups)
        )

    __hash__ = None  # type: ignore[assignment]