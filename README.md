# dbcnet

`dbcnet` reads CAN database files (`.dbc`) and turns them into a syntax tree
made of plain dataclasses. It also has model classes for messages and
environment variables. It uses only the standard library.

## Installation

```
pip install dbcnet
```

## Parsing a DBC file

```python
from dbcnet.parser import load_dbc, parse_dbc

network = load_dbc("vehicle.dbc")
print(network.version)
for message in network.messages:
    print(message.id, message.name, message.size, message.transmitter)
    for signal in message.signals:
        print("  ", signal.name, signal.start_bit, signal.signal_size, signal.unit)
```

`parse_dbc` accepts the file contents as `str` or as `bytes`. `load_dbc`
reads a file from a path. Bytes are decoded as UTF-8, and a byte order mark
is allowed. If that fails, they are decoded as Latin-1.

Sections must appear in the standard DBC order:

1. `VERSION`, `NS_`, `BS_`, `BU_`
2. `VAL_TABLE_`, `BO_` with its `SG_` lines, `BO_TX_BU_`
3. `EV_`, `ENVVAR_DATA_`, `SGTYPE_`, `CM_`
4. `BA_DEF_`, `BA_DEF_DEF_` / `BA_DEF_DEF_REL_`, `BA_`
5. `VAL_`, `SIG_GROUP_`, `SIG_VALTYPE_`, `SG_MUL_VAL_`

`VERSION`, `BS_:` and `BU_:` are required. The others are optional.

The parser skips whitespace, `//` line comments and nested `/* ... */` block
comments between tokens. It raises `dbcnet.scanner.DBCParseError` (a
`ValueError`, also importable from `dbcnet.parser`) in three cases:

- the input does not follow the grammar;
- the input stops early;
- something follows the last recognised section.

The error has `expected`, `line` and `column` attributes.

## Syntax tree

`dbcnet.syntax.Network` has these fields:

- `version`
- `new_symbols`
- `bit_timing`
- one list per kind of section: `nodes`, `value_tables`, `messages`,
  `message_transmitters`, `environment_variables`,
  `environment_variable_datas`, `signal_types`, `comments`,
  `attribute_definitions`, `attribute_defaults`, `attribute_values`,
  `value_descriptions`, `signal_groups`, `signal_extended_value_types` and
  `signal_multiplexer_values`

Each entry is a dataclass, for example `Signal`, `CommentSignal`,
`AttributeDefinition` or `SignalMultiplexerValue`. Union entries come back as
the concrete class that matched. Comments, attribute values and value
descriptions are examples of this, so `isinstance` tells them apart.

A few details of the tree:

- A signal's byte order is kept as the character `"0"` or `"1"`. Its value
  type is kept as `"+"` or `"-"`.
- A signal's multiplexer indicator is the raw identifier, such as `"M"` or
  `"m3"`, or `None` when the signal has none.
- Attribute values are `float` when they are numeric, and `str` otherwise.
- A `BS_:` line without values gives `BitTiming(0, 0, 0)`.

## Low-level scanner

`dbcnet.scanner.Scanner` is the tokenizer that the parser is built on. It
reads identifiers, quoted strings (`\\` and `\"` are unescaped), unsigned and
signed 64-bit integers, floating-point numbers, whole-word keywords and line
ends.

## Model objects

`dbcnet.message.Message` holds the following for one frame:

- the message's signals;
- its additional transmitters;
- its attribute values and signal groups;
- a comment.

Signals can be any objects with a `multiplexer_indicator` attribute that holds
a `dbcnet.message.Multiplexer`. The `mux_signal` property returns the switch
signal, or the last one if there are several. The `error` property returns
`MessageError.MUX_VALUE_WITHOUT_MUX_SIGNAL` when multiplexed signals exist but
no switch does.

`dbcnet.environment_variable.EnvironmentVariable` describes one environment
variable with the `VarType` and `AccessType` enumerations.

Both classes have `clone()`, which returns a deep copy. Equality between them
is one-sided for collections: `a == b` holds when the scalar fields match and
every item in `b`'s lists is also found in `a`'s.

## What it does not do

`dbcnet` only reads DBC files. It does not:

- write a network back out as DBC text;
- generate code;
- decode or encode frame payloads;
- read other database formats.

The parser produces only the `dbcnet.syntax` tree. Nothing converts that tree
into `Message` or `EnvironmentVariable` objects for you.