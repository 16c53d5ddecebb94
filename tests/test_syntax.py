import dataclasses

from dbcnet.syntax import (
    Attribute,
    AttributeDefinition,
    AttributeMessage,
    AttributeValueTypeEnum,
    AttributeValueTypeInt,
    AttributeValueTypeString,
    BitTiming,
    CommentSignal,
    Message,
    Network,
    Range,
    Signal,
    SignalGroup,
    SignalMultiplexerValue,
    ValueEncodingDescription,
    ValueTable,
)


def _names(cls):
    return [f.name for f in dataclasses.fields(cls)]


def test_signal_field_order_matches_file_layout():
    values = {
        "name": "Speed",
        "multiplexer_indicator": "m3",
        "start_bit": 8,
        "signal_size": 12,
        "byte_order": "0",
        "value_type": "+",
        "factor": 0.25,
        "offset": 1.0,
        "minimum": 0.0,
        "maximum": 250.0,
        "unit": "km/h",
        "receivers": ["ECU", "Dash"],
    }
    sig = Signal(*values.values())
    assert dataclasses.asdict(sig) == values
    assert list(dataclasses.asdict(sig)) == list(values)


def test_network_field_order_matches_sections():
    net = Network("1.0")
    assert net.version == "1.0"
    names = list(dataclasses.asdict(net))
    assert names[0] == "version"
    assert names.index("nodes") < names.index("messages") < names.index("comments")
    assert names[-1] == "signal_multiplexer_values"


def test_positional_signal_construction():
    sig = Signal("Speed", "M", 0, 16, "1", "-", 0.5, -10.0, -10.0, 100.0, "km/h", ["ECU"])
    assert sig.multiplexer_indicator == "M"
    assert sig.signal_size == 16
    assert sig.value_type == "-"
    assert sig.receivers == ["ECU"]
    assert dataclasses.astuple(sig)[10] == "km/h"


def test_default_lists_are_independent():
    a = Network()
    b = Network()
    a.nodes.append("X")
    assert b.nodes == []
    m1, m2 = Message(), Message()
    m1.signals.append(Signal(name="s"))
    assert m2.signals == []


def test_network_defaults_empty():
    net = Network()
    assert net.version == ""
    assert net.bit_timing is None
    assert all(getattr(net, n) == [] for n in _names(Network) if n not in ("version", "bit_timing"))


def test_equality_is_structural():
    table_a = ValueTable("Gear", [ValueEncodingDescription(1, "First")])
    table_b = ValueTable("Gear", [ValueEncodingDescription(1, "First")])
    assert table_a == table_b
    table_b.value_encoding_descriptions[0].description = "Second"
    assert table_a != table_b


def test_attribute_definition_defaults_to_string_type():
    ad = AttributeDefinition(None, "Attr")
    assert ad.value_type == AttributeValueTypeString()
    assert ad.object_type is None


def test_attribute_value_types_distinct():
    assert AttributeValueTypeInt(0, 5) != AttributeValueTypeEnum(["a"])
    assert AttributeValueTypeEnum(["a", "b"]).values == ["a", "b"]


def test_attribute_values_keep_type():
    assert isinstance(Attribute("A", 3).value, int)
    assert isinstance(AttributeMessage("A", 7, 1.5).value, float)
    assert AttributeMessage("A", 7, "txt").message_id == 7


def test_multiplexer_value_ranges():
    smv = SignalMultiplexerValue(1, "s", "sw", [Range(0, 3), Range(5, 5)])
    assert [(r.from_, r.to) for r in smv.value_ranges] == [(0, 3), (5, 5)]


def test_misc_records():
    assert dataclasses.astuple(BitTiming(500, 1, 2)) == (500, 1, 2)
    cs = CommentSignal(10, "sig", "text")
    assert (cs.message_id, cs.signal_name, cs.comment) == (10, "sig", "text")
    sg = SignalGroup(3, "grp", 1, ["a", "b"])
    assert sg.signal_names == ["a", "b"]