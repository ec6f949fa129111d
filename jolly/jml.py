"""Document model of named, nested tables holding numbers, strings, booleans and arrays."""

from __future__ import annotations

import copy
from enum import IntFlag
from typing import Any, Iterable, Iterator, Optional, TextIO

from jolly.fmt import format_value
from jolly.table import Table

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


class JmlType(IntFlag):
    """Kind of value held by a JmlValue."""

    UNK = 0
    NUM = 1 << 0
    STR = 1 << 1
    BOOLEAN = 1 << 2
    ARR = 1 << 3
    TBL = 1 << 4


def jml_table_hash(key: JmlTable) -> int:
    """FNV-1a hash of a table key, continued from the hash of its parent."""
    h = jml_table_hash(key.parent) if key.parent is not None else _FNV_OFFSET
    for byte in key.name.encode("utf-8"):
        signed = byte if byte < 0x80 else byte | 0xFFFFFF00
        h = ((h ^ signed) * _FNV_PRIME) & _MASK32
    return h


class JmlTable:
    """Key of an entry: a name within an optional parent table.

    The owning document is carried along but takes no part in equality.
    """

    __slots__ = ("name", "parent", "doc")

    def __init__(self, name: str, parent: Optional[JmlTable] = None,
                 doc: Optional[JmlDoc] = None):
        self.name = name
        self.parent = parent
        self.doc = doc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JmlTable):
            return NotImplemented
        if (self.parent is None) != (other.parent is None):
            return False
        if self.parent is not None and self.parent != other.parent:
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return jml_table_hash(self)

    def path(self) -> str:
        """Dotted path from the root table to this one."""
        if self.parent is None:
            return self.name
        return f"{self.parent.path()}.{self.name}"

    def __repr__(self) -> str:
        return f"JmlTable({self.path()!r})"


def _classify(value: Any) -> tuple[JmlType, Any]:
    if value is None:
        return JmlType.UNK, None
    if isinstance(value, bool):
        return JmlType.BOOLEAN, value
    if isinstance(value, (int, float)):
        return JmlType.NUM, float(value)
    if isinstance(value, str):
        return JmlType.STR, value
    if isinstance(value, (list, tuple)):
        items = [item if isinstance(item, JmlValue) else JmlValue(item) for item in value]
        return JmlType.ARR, items
    if isinstance(value, JmlTable):
        return JmlType.TBL, value
    raise TypeError(f"unsupported value type {type(value).__name__}")


class JmlValue:
    """A single typed value of a document."""

    def __init__(self, value: Any = None):
        self._type = JmlType.UNK
        self._value: Any = None
        self.value = value

    @property
    def type(self) -> JmlType:
        return self._type

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._type, self._value = _classify(value)

    def raw(self, kind: JmlType) -> Any:
        """Return the stored value itself; raise TypeError if it is not of kind."""
        if kind != self._type:
            raise TypeError(f"value is {self._type!r}, not {kind!r}")
        return self._value

    def get(self, kind: JmlType) -> Any:
        """Return a copy of the stored value; raise TypeError if it is not of kind."""
        raw = self.raw(kind)
        if isinstance(raw, list):
            return list(raw)
        if isinstance(raw, JmlTable):
            return copy.copy(raw)
        return raw

    def _items(self) -> list[JmlValue]:
        return self.raw(JmlType.ARR)

    def at(self, index: int, kind: JmlType) -> Any:
        """Return a copy of array element index, which must be of kind."""
        return self._items()[index].get(kind)

    def child(self, key: str) -> JmlValue:
        """Return the entry key of this table, creating it as a table if absent."""
        table = self.raw(JmlType.TBL)
        doc = table.doc
        if doc is None:
            raise ValueError(f"{table!r} is not attached to a document")
        value = doc[JmlTable(key, table)]
        if value.type is JmlType.UNK:
            value.value = JmlTable(key, table, doc)
        return value

    def __len__(self) -> int:
        return len(self._items())

    def __iter__(self) -> Iterator[JmlValue]:
        return iter(self._items())

    def __repr__(self) -> str:
        return f"JmlValue({self._type!r}, {self._value!r})"


class JmlDoc:
    """A document: a table from keys to values."""

    def __init__(self):
        self.data = Table(hasher=jml_table_hash)

    @staticmethod
    def _key(key: str | JmlTable) -> JmlTable:
        return key if isinstance(key, JmlTable) else JmlTable(key)

    def get(self, key: str | JmlTable) -> JmlValue:
        """Return the value under key; raise KeyError if it is absent."""
        return self.data.get(self._key(key))

    def __getitem__(self, key: str | JmlTable) -> JmlValue:
        """Return the value under key, creating it if absent.

        A missing top-level name is created as a table.
        """
        if isinstance(key, JmlTable):
            return self.data.get_or_create(key, JmlValue)
        value = self.data.get_or_create(JmlTable(key), JmlValue)
        if value.type is JmlType.UNK:
            value.value = JmlTable(key, None, self)
        return value


def jml_vector(items: Iterable[Any]) -> list[JmlValue]:
    """Build an array value from strings or numbers."""
    result = []
    for item in items:
        if isinstance(item, bool) or not isinstance(item, (str, int, float)):
            raise TypeError(f"array items must be strings or numbers, not {type(item).__name__}")
        result.append(JmlValue(item))
    return result


def _dump_item(value: JmlValue, doc: JmlDoc,
               hierarchy: dict[JmlTable, list[JmlTable]], stream: TextIO) -> None:
    kind = value.type
    if kind is JmlType.BOOLEAN or kind is JmlType.NUM:
        stream.write(format_value(value.value))
    elif kind is JmlType.STR:
        stream.write(f'"{value.value}"')
    elif kind is JmlType.ARR:
        stream.write("[")
        for item in value:
            _dump_item(item, doc, hierarchy, stream)
            stream.write(",")
        stream.write("]")
    elif kind is JmlType.TBL:
        stream.write("{")
        for child in hierarchy.get(value.value, []):
            stream.write(child.name)
            stream.write("=")
            _dump_item(doc.get(child), doc, hierarchy, stream)
            stream.write(",")
        stream.write("}")


def jml_dump(doc: JmlDoc, stream: TextIO) -> None:
    """Write every top-level entry of doc as a 'name=value' line."""
    hierarchy: dict[JmlTable, list[JmlTable]] = {}
    roots: list[JmlTable] = []
    for key in doc.data.keys():
        if key.parent is None:
            roots.append(key)
        else:
            hierarchy.setdefault(key.parent, []).append(key)

    for key in roots:
        stream.write(key.name)
        stream.write("=")
        _dump_item(doc.get(key), doc, hierarchy, stream)
        stream.write("\n")