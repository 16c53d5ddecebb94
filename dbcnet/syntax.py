"""Syntax tree produced by the DBC parser.

Each class mirrors one construct of the DBC file format. Field order follows
the order in which the construct's parts appear in the file, so positional
construction reads like the source line it came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

AttrValue = Union[int, float, str]
"""Value of an attribute: an integer, a float or a quoted string."""


@dataclass
class BitTiming:
    """``BS_:`` line: baud rate and the two bit timing registers."""

    baudrate: int = 0
    btr1: int = 0
    btr2: int = 0


@dataclass
class Node:
    """One node named on the ``BU_:`` line."""

    name: str = ""


@dataclass
class ValueEncodingDescription:
    """A raw value paired with its textual meaning."""

    value: int = 0
    description: str = ""


@dataclass
class ValueTable:
    """``VAL_TABLE_`` definition."""

    name: str = ""
    value_encoding_descriptions: list[ValueEncodingDescription] = field(default_factory=list)


@dataclass
class Signal:
    """``SG_`` line inside a message block."""

    name: str = ""
    multiplexer_indicator: Optional[str] = None
    start_bit: int = 0
    signal_size: int = 0
    byte_order: str = "1"
    value_type: str = "+"
    factor: float = 1.0
    offset: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    unit: str = ""
    receivers: list[str] = field(default_factory=list)


@dataclass
class Message:
    """``BO_`` block: message header and its signals."""

    id: int = 0
    name: str = ""
    size: int = 0
    transmitter: str = ""
    signals: list[Signal] = field(default_factory=list)


@dataclass
class MessageTransmitter:
    """``BO_TX_BU_`` line listing additional transmitters of a message."""

    id: int = 0
    transmitters: list[str] = field(default_factory=list)


@dataclass
class EnvironmentVariable:
    """``EV_`` definition."""

    name: str = ""
    var_type: int = 0
    minimum: float = 0.0
    maximum: float = 0.0
    unit: str = ""
    initial_value: float = 0.0
    id: int = 0
    access_type: str = ""
    access_nodes: list[str] = field(default_factory=list)


@dataclass
class EnvironmentVariableData:
    """``ENVVAR_DATA_`` line giving the data size of an environment variable."""

    name: str = ""
    size: int = 0


@dataclass
class SignalType:
    """``SGTYPE_`` definition."""

    name: str = ""
    size: int = 0
    byte_order: str = "1"
    value_type: str = "+"
    factor: float = 1.0
    offset: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    unit: str = ""
    default_value: float = 0.0
    value_table_name: str = ""


@dataclass
class CommentNetwork:
    """``CM_`` comment on the network itself."""

    comment: str = ""


@dataclass
class CommentNode:
    """``CM_ BU_`` comment on a node."""

    node_name: str = ""
    comment: str = ""


@dataclass
class CommentMessage:
    """``CM_ BO_`` comment on a message."""

    message_id: int = 0
    comment: str = ""


@dataclass
class CommentSignal:
    """``CM_ SG_`` comment on a signal."""

    message_id: int = 0
    signal_name: str = ""
    comment: str = ""


@dataclass
class CommentEnvVar:
    """``CM_ EV_`` comment on an environment variable."""

    env_var_name: str = ""
    comment: str = ""


Comment = Union[CommentNetwork, CommentNode, CommentMessage, CommentSignal, CommentEnvVar]


@dataclass
class AttributeValueTypeInt:
    """``INT min max`` attribute type."""

    minimum: int = 0
    maximum: int = 0


@dataclass
class AttributeValueTypeHex:
    """``HEX min max`` attribute type."""

    minimum: int = 0
    maximum: int = 0


@dataclass
class AttributeValueTypeFloat:
    """``FLOAT min max`` attribute type."""

    minimum: float = 0.0
    maximum: float = 0.0


@dataclass
class AttributeValueTypeString:
    """``STRING`` attribute type."""


@dataclass
class AttributeValueTypeEnum:
    """``ENUM`` attribute type with its allowed values."""

    values: list[str] = field(default_factory=list)


AttributeValueType = Union[
    AttributeValueTypeInt,
    AttributeValueTypeHex,
    AttributeValueTypeFloat,
    AttributeValueTypeString,
    AttributeValueTypeEnum,
]


@dataclass
class AttributeDefinition:
    """``BA_DEF_`` line; ``object_type`` is ``BU_``, ``BO_``, ``SG_``, ``EV_`` or None."""

    object_type: Optional[str] = None
    name: str = ""
    value_type: AttributeValueType = field(default_factory=AttributeValueTypeString)


@dataclass
class Attribute:
    """``BA_DEF_DEF_`` line: default value of an attribute."""

    name: str = ""
    value: AttrValue = 0


@dataclass
class AttributeNetwork:
    """``BA_`` value assigned to the network."""

    attribute_name: str = ""
    value: AttrValue = 0


@dataclass
class AttributeNode:
    """``BA_ ... BU_`` value assigned to a node."""

    attribute_name: str = ""
    node_name: str = ""
    value: AttrValue = 0


@dataclass
class AttributeMessage:
    """``BA_ ... BO_`` value assigned to a message."""

    attribute_name: str = ""
    message_id: int = 0
    value: AttrValue = 0


@dataclass
class AttributeSignal:
    """``BA_ ... SG_`` value assigned to a signal."""

    attribute_name: str = ""
    message_id: int = 0
    signal_name: str = ""
    value: AttrValue = 0


@dataclass
class AttributeEnvVar:
    """``BA_ ... EV_`` value assigned to an environment variable."""

    attribute_name: str = ""
    env_var_name: str = ""
    value: AttrValue = 0


AttributeEntity = Union[
    AttributeNetwork, AttributeNode, AttributeMessage, AttributeSignal, AttributeEnvVar
]


@dataclass
class ValueDescriptionSignal:
    """``VAL_`` line describing the values of a signal."""

    message_id: int = 0
    signal_name: str = ""
    value_descriptions: list[ValueEncodingDescription] = field(default_factory=list)


@dataclass
class ValueDescriptionEnvVar:
    """``VAL_`` line describing the values of an environment variable."""

    env_var_name: str = ""
    value_descriptions: list[ValueEncodingDescription] = field(default_factory=list)


ValueDescription = Union[ValueDescriptionSignal, ValueDescriptionEnvVar]


@dataclass
class SignalExtendedValueType:
    """``SIG_VALTYPE_`` line: 0 integer, 1 float, 2 double."""

    message_id: int = 0
    signal_name: str = ""
    value: int = 0


@dataclass
class Range:
    """Inclusive range of multiplexer switch values."""

    from_: int = 0
    to: int = 0


@dataclass
class SignalMultiplexerValue:
    """``SG_MUL_VAL_`` line for extended multiplexing."""

    message_id: int = 0
    signal_name: str = ""
    switch_name: str = ""
    value_ranges: list[Range] = field(default_factory=list)


@dataclass
class SignalGroup:
    """``SIG_GROUP_`` line."""

    message_id: int = 0
    signal_group_name: str = ""
    repetitions: int = 0
    signal_names: list[str] = field(default_factory=list)


@dataclass
class Network:
    """Whole DBC file, section by section in file order."""

    version: str = ""
    new_symbols: list[str] = field(default_factory=list)
    bit_timing: Optional[BitTiming] = None
    nodes: list[Node] = field(default_factory=list)
    value_tables: list[ValueTable] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    message_transmitters: list[MessageTransmitter] = field(default_factory=list)
    environment_variables: list[EnvironmentVariable] = field(default_factory=list)
    environment_variable_datas: list[EnvironmentVariableData] = field(default_factory=list)
    signal_types: list[SignalType] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    attribute_definitions: list[AttributeDefinition] = field(default_factory=list)
    attribute_defaults: list[Attribute] = field(default_factory=list)
    attribute_values: list[AttributeEntity] = field(default_factory=list)
    value_descriptions: list[ValueDescription] = field(default_factory=list)
    signal_groups: list[SignalGroup] = field(default_factory=list)
    signal_extended_value_types: list[SignalExtendedValueType] = field(default_factory=list)
    signal_multiplexer_values: list[SignalMultiplexerValue] = field(default_factory=list)