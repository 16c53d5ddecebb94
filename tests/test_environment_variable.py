import pytest

from dbcnet.environment_variable import AccessType, EnvironmentVariable, VarType
from dbcnet.syntax import Attribute, ValueEncodingDescription


def _make(**overrides):
    values = dict(
        name="EnvA",
        var_type=VarType.INTEGER,
        minimum=0.0,
        maximum=100.0,
        unit="V",
        initial_value=5.0,
        ev_id=7,
        access_type=AccessType.READ,
        access_nodes=["NodeA", "NodeB"],
        value_encoding_descriptions=[ValueEncodingDescription(1, "On")],
        data_size=0,
        attribute_values=[Attribute("GenEnvVarType", 1)],
        comment="env comment",
    )
    values.update(overrides)
    return EnvironmentVariable(**values)


def test_equal_to_identical():
    first = _make()
    second = _make()
    assert (first == second) is True
    assert (first != second) is False
    assert first.name == "EnvA"
    assert first.ev_id == 7
    assert first.access_nodes == ["NodeA", "NodeB"]


def test_clone_is_equal_and_independent():
    original = _make()
    copy = original.clone()
    assert copy == original
    copy.access_nodes.append("NodeC")
    copy.value_encoding_descriptions[0].description = "Off"
    assert original.access_nodes == ["NodeA", "NodeB"]
    assert original.value_encoding_descriptions[0].description == "On"


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "EnvB"},
        {"var_type": VarType.FLOAT},
        {"minimum": -1.0},
        {"unit": "A"},
        {"initial_value": 6.0},
        {"ev_id": 8},
        {"access_type": AccessType.WRITE},
        {"data_size": 4},
        {"comment": "other"},
    ],
)
def test_scalar_difference_breaks_equality(overrides):
    assert _make() != _make(**overrides)


def test_collections_compare_by_containment():
    full = _make()
    partial = _make(access_nodes=["NodeA"], value_encoding_descriptions=[], attribute_values=[])
    assert full == partial
    assert partial != full


def test_missing_value_description_breaks_equality():
    other = _make(value_encoding_descriptions=[ValueEncodingDescription(2, "Off")])
    assert _make() != other


def test_missing_attribute_breaks_equality():
    other = _make(attribute_values=[Attribute("GenEnvVarType", 2)])
    assert _make() != other


def test_not_equal_to_other_types():
    assert (_make() == "EnvA") is False