# jolly

Building blocks for a small game engine, usable on their own:

- `jolly.ryu`: shortest round-trip formatting and parsing of 32-bit floats
  (`format_f32`, `parse_f32`). It relies on the power-of-five tables in
  `jolly.pow5` (`pow5_split`, `digit_pair`) and `jolly.pow5_inv`
  (`pow5_inv_split`).
- `jolly.fmt`: `%`-placeholder string formatting (`format_string`,
  `format_value`) and number parsing (`stoi`, `stof`). The parsers accept
  `_` separators and a sign, and `stoi` also accepts `0x` hexadecimal.
- `jolly.table`: `Table`, an open-addressing robin-hood hash table. It
  stores values densely in insertion order and uses prime-sized capacities
  (`table_size`). When an entry is deleted, the last value moves into its
  place.
- `jolly.jml`: a hierarchical document model (`JmlDoc`, `JmlValue`,
  `JmlTable`, `JmlType`, `jml_vector`). `jml_dump` writes a document out
  as `name=value` lines.
- `jolly.vec`: plain vector and matrix records (`Vec2`, `Vec3`, `Vec4`,
  `Mat2`, `Mat3`, `Mat4`). You can iterate over them.
- `jolly.ui`: UI description records (`UiComponent`, `UiDefaults`) and
  `UiContext`. `UiContext` records the buttons that are declared, and
  `button(name)` returns whether `name` is in its `pressed` set.

## Installation

```
pip install .
```

## Examples

```python
from jolly.fmt import format_string, stoi
from jolly.ryu import format_f32, parse_f32

format_string("% + % = %", 1, 2, 3)   # '1 + 2 = 3'
stoi("0xff")                          # 255
stoi("1_000")                         # 1000
format_f32(1.5)                       # '1.5e0'
parse_f32("1.5")                      # 1.5
```

```python
from jolly.table import Table

t = Table()
t["apple"] = 3
t.set("pear", 5)
"apple" in t          # True
del t["pear"]
list(t.items())       # [('apple', 3)]
```

```python
import io
from jolly.jml import JmlDoc, jml_dump

doc = JmlDoc()
doc["window"].child("width").value = 1280.0
out = io.StringIO()
jml_dump(doc, out)
out.getvalue()        # 'window={width=1.28e3,}\n'
```

## What it does not do

The package describes rendering and user-interface state only as data. It
does not open windows, draw anything, run an engine loop or drive graphics
hardware. It also provides no threads, locks or timers. `jml_dump` writes
documents, but nothing in the package reads them back from text.

## Running the tests

```
pip install .[test]
pytest
```