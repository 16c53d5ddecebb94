"""Parser that turns DBC text into the tree of :mod:`dbcnet.syntax`.

The sections of a DBC file must appear in a fixed order: version, new
symbols, bit timing, nodes, value tables, messages, message transmitters,
environment variables and their data, signal types, comments, attribute
definitions, attribute defaults, attribute values, value descriptions,
signal groups, extended value types and multiplexer values.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar, Union

from .scanner import DBCParseError, Scanner
from .syntax import (
    Attribute,
    AttributeDefinition,
    AttributeEntity,
    AttributeEnvVar,
    AttributeMessage,
    AttributeNetwork,
    AttributeNode,
    AttributeSignal,
    AttributeValueType,
    AttributeValueTypeEnum,
    AttributeValueTypeFloat,
    AttributeValueTypeHex,
    AttributeValueTypeInt,
    AttributeValueTypeString,
    AttrValue,
    BitTiming,
    Comment,
    CommentEnvVar,
    CommentMessage,
    CommentNetwork,
    CommentNode,
    CommentSignal,
    EnvironmentVariable,
    EnvironmentVariableData,
    Message,
    MessageTransmitter,
    Network,
    Node,
    Range,
    Signal,
    SignalExtendedValueType,
    SignalGroup,
    SignalMultiplexerValue,
    SignalType,
    ValueDescription,
    ValueDescriptionEnvVar,
    ValueDescriptionSignal,
    ValueEncodingDescription,
    ValueTable,
)

__all__ = ["DBCParseError", "load_dbc", "parse_dbc"]

_T = TypeVar("_T")

_WHITESPACE = " \t\n\r\v\f"
_BLANKS = " \t"
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_NEW_SYMBOLS = (
    "SIGTYPE_VALTYPE_",
    "BA_DEF_DEF_REL_",
    "BA_DEF_SGTYPE_",
    "SIG_TYPE_REF_",
    "ENVVAR_DATA_",
    "SIG_VALTYPE_",
    "SG_MUL_VAL_",
    "BA_DEF_DEF_",
    "ENVVAR_DTA_",
    "BA_DEF_REL_",
    "SGTYPE_VAL_",
    "VAL_TABLE_",
    "BA_SGTYPE_",
    "SIG_GROUP_",
    "BU_SG_REL_",
    "BU_EV_REL_",
    "BU_BO_REL_",
    "BO_TX_BU_",
    "NS_DESC_",
    "CAT_DEF_",
    "EV_DATA_",
    "BA_REL_",
    "SGTYPE_",
    "BA_DEF_",
    "FILTER",
    "DEF_",
    "VAL_",
    "CAT_",
    "BA_",
    "CM_",
)

_OBJECT_TYPES = ("BU_", "BO_", "SG_", "EV_")


class _DBCParser:
    """Recursive-descent reader for one DBC document."""

    def __init__(self, text: str) -> None:
        self._sc = Scanner(text)

    # -- helpers -----------------------------------------------------------

    def _fail(self, expected: str) -> DBCParseError:
        return DBCParseError(expected, self._sc.line, self._sc.column)

    def _keyword(self, word: str, *, comments: bool = True) -> bool:
        """Consume ``word`` if it is followed by whitespace (or a comment)."""
        sc = self._sc
        sc.skip()
        text = sc.text
        if not text.startswith(word, sc.pos):
            return False
        end = sc.pos + len(word)
        separated = end < len(text) and text[end] in _WHITESPACE
        if not separated and comments:
            separated = text.startswith(("//", "/*"), end)
        if not separated:
            return False
        sc.pos = end
        return True

    def _repeat(
        self,
        keywords: Union[str, tuple[str, ...]],
        body: Callable[[], _T],
        *,
        comments: bool = True,
    ) -> list[_T]:
        words = (keywords,) if isinstance(keywords, str) else keywords
        items: list[_T] = []
        while any(self._keyword(word, comments=comments) for word in words):
            items.append(body())
        return items

    def _optional(self, read: Callable[[], _T]) -> Optional[_T]:
        start = self._sc.pos
        try:
            return read()
        except DBCParseError:
            self._sc.pos = start
            return None

    def _list(self, read: Callable[[], _T]) -> list[_T]:
        items = [read()]
        while self._sc.accept(","):
            items.append(read())
        return items

    def _char(self, choices: str, expected: str) -> str:
        sc = self._sc
        sc.skip()
        if sc.pos < len(sc.text) and sc.text[sc.pos] in choices:
            char = sc.text[sc.pos]
            sc.pos += 1
            return char
        raise self._fail(expected)

    def _skip_blanks(self, pos: int) -> int:
        text = self._sc.text
        while pos < len(text) and text[pos] in _BLANKS:
            pos += 1
        return pos

    def _line_identifier(self, *, required: bool) -> Optional[str]:
        """Read an identifier on the current line, skipping only blanks."""
        sc = self._sc
        pos = self._skip_blanks(sc.pos)
        match = _IDENTIFIER.match(sc.text, pos)
        if match is None:
            if required:
                sc.pos = pos
                raise self._fail("identifier")
            return None
        sc.pos = match.end()
        return match.group()

    def _value_encoding_descriptions(self) -> list[ValueEncodingDescription]:
        sc = self._sc
        result = []
        while (value := self._optional(sc.signed)) is not None:
            result.append(ValueEncodingDescription(value, sc.quoted_string()))
        return result

    def _attribute_value(self) -> AttrValue:
        number = self._optional(self._sc.number)
        if number is not None:
            return number
        return self._sc.quoted_string()

    # -- sections ----------------------------------------------------------

    def network(self) -> Network:
        net = Network()
        net.version = self._version()
        net.new_symbols = self._new_symbols()
        net.bit_timing = self._bit_timing()
        net.nodes = self._nodes()
        net.value_tables = self._repeat("VAL_TABLE_", self._value_table)
        net.messages = self._repeat("BO_", self._message)
        net.message_transmitters = self._repeat(
            "BO_TX_BU_", self._message_transmitter, comments=False
        )
        net.environment_variables = self._repeat("EV_", self._environment_variable)
        net.environment_variable_datas = self._repeat(
            "ENVVAR_DATA_", self._environment_variable_data, comments=False
        )
        net.signal_types = self._repeat("SGTYPE_", self._signal_type)
        net.comments = self._repeat("CM_", self._comment, comments=False)
        net.attribute_definitions = self._repeat("BA_DEF_", self._attribute_definition)
        net.attribute_defaults = self._repeat(
            ("BA_DEF_DEF_REL_", "BA_DEF_DEF_"), self._attribute_default, comments=False
        )
        net.attribute_values = self._repeat("BA_", self._attribute_value_entity)
        net.value_descriptions = self._repeat("VAL_", self._value_description)
        net.signal_groups = self._repeat("SIG_GROUP_", self._signal_group)
        net.signal_extended_value_types = self._repeat(
            "SIG_VALTYPE_", self._signal_extended_value_type
        )
        net.signal_multiplexer_values = self._repeat(
            "SG_MUL_VAL_", self._signal_multiplexer_value
        )
        if not self._sc.at_end():
            raise self._fail("end of input")
        return net

    def _version(self) -> str:
        if not self._sc.accept("VERSION"):
            raise self._fail("'VERSION'")
        return self._sc.quoted_string()

    def _new_symbols(self) -> list[str]:
        sc = self._sc
        start = sc.pos
        if not (sc.accept("NS_") and sc.accept(":")):
            sc.pos = start
            return []
        symbols = []
        while (symbol := next((w for w in _NEW_SYMBOLS if sc.accept(w)), None)) is not None:
            symbols.append(symbol)
        return symbols

    def _bit_timing(self) -> BitTiming:
        sc = self._sc
        if not sc.accept("BS_"):
            raise self._fail("'BS_'")
        sc.expect(":")

        def values() -> BitTiming:
            baudrate = sc.unsigned()
            sc.expect(":")
            btr1 = sc.unsigned()
            sc.expect(",")
            return BitTiming(baudrate, btr1, sc.unsigned())

        return self._optional(values) or BitTiming()

    def _nodes(self) -> list[Node]:
        sc = self._sc
        if not sc.accept("BU_"):
            raise self._fail("'BU_'")
        sc.expect(":")
        nodes = []
        while (name := self._line_identifier(required=False)) is not None:
            nodes.append(Node(name))
        return nodes

    def _value_table(self) -> ValueTable:
        name = self._sc.identifier()
        descriptions = self._value_encoding_descriptions()
        self._sc.expect(";")
        return ValueTable(name, descriptions)

    def _message(self) -> Message:
        sc = self._sc
        message_id = sc.unsigned()
        name = sc.identifier()
        sc.expect(":")
        size = sc.unsigned()
        transmitter = self._line_identifier(required=True)
        sc.end_of_line()
        signals = self._repeat("SG_", self._signal, comments=False)
        return Message(message_id, name, size, transmitter, signals)

    def _signal(self) -> Signal:
        sc = self._sc
        name = sc.identifier()
        multiplexer = self._optional(sc.identifier)
        sc.expect(":")
        start_bit = sc.unsigned()
        sc.expect("|")
        size = sc.unsigned()
        sc.expect("@")
        byte_order = self._char("01", "byte order")
        value_type = self._char("+-", "value type")
        sc.expect("(")
        factor = sc.number()
        sc.expect(",")
        offset = sc.number()
        sc.expect(")")
        sc.expect("[")
        minimum = sc.number()
        sc.expect("|")
        maximum = sc.number()
        sc.expect("]")
        unit = sc.quoted_string()
        receivers = self._receivers()
        return Signal(
            name, multiplexer, start_bit, size, byte_order, value_type,
            factor, offset, minimum, maximum, unit, receivers,
        )

    def _receivers(self) -> list[str]:
        sc = self._sc
        names = [self._line_identifier(required=True)]
        while True:
            comma = self._skip_blanks(sc.pos)
            if not sc.text.startswith(",", comma):
                break
            sc.pos = comma + 1
            name = self._line_identifier(required=False)
            if name is None:
                sc.pos = comma
                break
            names.append(name)
        sc.end_of_line()
        return names

    def _message_transmitter(self) -> MessageTransmitter:
        sc = self._sc
        message_id = sc.unsigned()
        sc.expect(":")
        transmitters = self._list(sc.identifier)
        sc.expect(";")
        return MessageTransmitter(message_id, transmitters)

    def _environment_variable(self) -> EnvironmentVariable:
        sc = self._sc
        name = sc.identifier()
        sc.expect(":")
        var_type = sc.unsigned()
        sc.expect("[")
        minimum = sc.number()
        sc.expect("|")
        maximum = sc.number()
        sc.expect("]")
        unit = sc.quoted_string()
        initial_value = sc.number()
        ev_id = sc.unsigned()
        access_type = sc.identifier()
        access_nodes = self._list(sc.identifier)
        sc.expect(";")
        return EnvironmentVariable(
            name, var_type, minimum, maximum, unit, initial_value,
            ev_id, access_type, access_nodes,
        )

    def _environment_variable_data(self) -> EnvironmentVariableData:
        sc = self._sc
        name = sc.identifier()
        sc.expect(":")
        size = sc.unsigned()
        sc.expect(";")
        return EnvironmentVariableData(name, size)

    def _signal_type(self) -> SignalType:
        sc = self._sc
        name = sc.identifier()
        sc.expect(":")
        size = sc.unsigned()
        sc.expect("@")
        byte_order = self._char("01", "byte order")
        value_type = self._char("+-", "value type")
        sc.expect("(")
        factor = sc.number()
        sc.expect(",")
        offset = sc.number()
        sc.expect(")")
        sc.expect("[")
        minimum = sc.number()
        sc.expect("|")
        maximum = sc.number()
        sc.expect("]")
        unit = sc.quoted_string()
        default_value = sc.number()
        sc.expect(",")
        value_table_name = sc.identifier()
        sc.expect(";")
        return SignalType(
            name, size, byte_order, value_type, factor, offset,
            minimum, maximum, unit, default_value, value_table_name,
        )

    def _comment(self) -> Comment:
        sc = self._sc
        comment: Comment
        if sc.accept("BU_"):
            comment = CommentNode(sc.identifier(), sc.quoted_string())
        elif sc.accept("BO_"):
            comment = CommentMessage(sc.unsigned(), sc.quoted_string())
        elif sc.accept("SG_"):
            comment = CommentSignal(sc.unsigned(), sc.identifier(), sc.quoted_string())
        elif sc.accept("EV_"):
            comment = CommentEnvVar(sc.identifier(), sc.quoted_string())
        else:
            comment = CommentNetwork(sc.quoted_string())
        sc.expect(";")
        return comment

    def _attribute_definition(self) -> AttributeDefinition:
        sc = self._sc
        object_type = next((w for w in _OBJECT_TYPES if sc.accept(w)), None)
        name = sc.quoted_string()
        value_type = self._attribute_value_type()
        sc.expect(";")
        return AttributeDefinition(object_type, name, value_type)

    def _attribute_value_type(self) -> AttributeValueType:
        sc = self._sc
        if sc.accept("INT"):
            return AttributeValueTypeInt(sc.signed(), sc.signed())
        if sc.accept("HEX"):
            return AttributeValueTypeHex(sc.signed(), sc.signed())
        if sc.accept("FLOAT"):
            return AttributeValueTypeFloat(sc.number(), sc.number())
        if sc.accept("STRING"):
            return AttributeValueTypeString()
        if sc.accept("ENUM"):
            return AttributeValueTypeEnum(self._list(sc.quoted_string))
        raise self._fail("attribute value type")

    def _attribute_default(self) -> Attribute:
        name = self._sc.quoted_string()
        value = self._attribute_value()
        self._sc.expect(";")
        return Attribute(name, value)

    def _attribute_value_entity(self) -> AttributeEntity:
        sc = self._sc
        name = sc.quoted_string()
        entity: AttributeEntity
        if sc.accept("BU_"):
            entity = AttributeNode(name, sc.identifier(), self._attribute_value())
        elif sc.accept("BO_"):
            entity = AttributeMessage(name, sc.unsigned(), self._attribute_value())
        elif sc.accept("SG_"):
            entity = AttributeSignal(name, sc.unsigned(), sc.identifier(), self._attribute_value())
        elif sc.accept("EV_"):
            entity = AttributeEnvVar(name, sc.identifier(), self._attribute_value())
        else:
            entity = AttributeNetwork(name, self._attribute_value())
        sc.expect(";")
        return entity

    def _value_description(self) -> ValueDescription:
        sc = self._sc
        message_id = self._optional(sc.unsigned)
        description: ValueDescription
        if message_id is not None:
            signal_name = sc.identifier()
            description = ValueDescriptionSignal(
                message_id, signal_name, self._value_encoding_descriptions()
            )
        else:
            env_var_name = sc.identifier()
            description = ValueDescriptionEnvVar(
                env_var_name, self._value_encoding_descriptions()
            )
        sc.expect(";")
        return description

    def _signal_group(self) -> SignalGroup:
        sc = self._sc
        message_id = sc.unsigned()
        name = sc.identifier()
        repetitions = sc.unsigned()
        sc.expect(":")
        signal_names = []
        while (signal_name := self._optional(sc.identifier)) is not None:
            signal_names.append(signal_name)
        sc.expect(";")
        return SignalGroup(message_id, name, repetitions, signal_names)

    def _signal_extended_value_type(self) -> SignalExtendedValueType:
        sc = self._sc
        message_id = sc.unsigned()
        signal_name = sc.identifier()
        sc.expect(":")
        value = sc.unsigned()
        sc.expect(";")
        return SignalExtendedValueType(message_id, signal_name, value)

    def _range(self) -> Range:
        sc = self._sc
        start = sc.unsigned()
        sc.expect("-")
        return Range(start, sc.unsigned())

    def _signal_multiplexer_value(self) -> SignalMultiplexerValue:
        sc = self._sc
        message_id = sc.unsigned()
        signal_name = sc.identifier()
        switch_name = sc.identifier()
        ranges = self._list(self._range)
        sc.expect(";")
        return SignalMultiplexerValue(message_id, signal_name, switch_name, ranges)


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def parse_dbc(text: Union[str, bytes]) -> Network:
    """Parse DBC text into a :class:`~dbcnet.syntax.Network`.

    Raises :class:`DBCParseError` when the text does not follow the grammar.
    """
    if isinstance(text, bytes):
        text = _decode(text)
    return _DBCParser(text).network()


def load_dbc(path: Union[str, os.PathLike]) -> Network:
    """Read and parse the DBC file at ``path``.

    The file is decoded as UTF-8, falling back to Latin-1.
    """
    return parse_dbc(Path(path).read_bytes())