import io

import pytest

from jolly.fmt import format_value
from jolly.jml import (
    JmlDoc,
    JmlTable,
    JmlType,
    JmlValue,
    jml_dump,
    jml_table_hash,
    jml_vector,
)


def dump(doc):
    stream = io.StringIO()
    jml_dump(doc, stream)
    return stream.getvalue()


def test_hash_of_empty_root_name_is_fnv_offset():
    assert jml_table_hash(JmlTable("")) == 0x811C9DC5


def test_hash_of_single_letter_matches_fnv1a():
    assert jml_table_hash(JmlTable("a")) == 0xE40C292C


def test_hash_continues_from_parent():
    parent = JmlTable("a")
    assert jml_table_hash(JmlTable("b", parent)) == jml_table_hash(JmlTable("ab"))


def test_dunder_hash_matches_function():
    key = JmlTable("name", JmlTable("root"))
    assert hash(key) == jml_table_hash(key)


def test_table_equality_ignores_document():
    assert JmlTable("a", None, JmlDoc()) == JmlTable("a")


def test_table_equality_checks_parent():
    assert JmlTable("x", JmlTable("a")) != JmlTable("x", JmlTable("b"))
    assert JmlTable("x", JmlTable("a")) != JmlTable("x")
    assert JmlTable("x", JmlTable("a")) == JmlTable("x", JmlTable("a"))


def test_value_types_are_classified():
    assert JmlValue(True).type is JmlType.BOOLEAN
    assert JmlValue(2).type is JmlType.NUM
    assert JmlValue("s").type is JmlType.STR
    assert JmlValue([1.0]).type is JmlType.ARR
    assert JmlValue(JmlTable("t")).type is JmlType.TBL
    assert JmlValue().type is JmlType.UNK


def test_numbers_are_stored_as_floats():
    assert JmlValue(3).get(JmlType.NUM) == 3.0
    assert isinstance(JmlValue(3).get(JmlType.NUM), float)


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        JmlValue(object())


def test_raw_with_wrong_kind_raises():
    with pytest.raises(TypeError):
        JmlValue("s").raw(JmlType.NUM)


def test_get_returns_copy_of_array():
    value = JmlValue(jml_vector(["a", "b"]))
    items = value.get(JmlType.ARR)
    items.clear()
    assert len(value) == 2


def test_array_access():
    value = JmlValue(jml_vector([1.5, 2.5]))
    assert value.at(1, JmlType.NUM) == 2.5
    assert [item.get(JmlType.NUM) for item in value] == [1.5, 2.5]
    with pytest.raises(TypeError):
        value.at(0, JmlType.STR)


def test_len_of_non_array_raises():
    with pytest.raises(TypeError):
        len(JmlValue("s"))


def test_jml_vector_rejects_other_types():
    with pytest.raises(TypeError):
        jml_vector([True])


def test_doc_creates_missing_entries_as_tables():
    doc = JmlDoc()
    value = doc["config"]
    assert value.type is JmlType.TBL
    assert value.raw(JmlType.TBL) == JmlTable("config")
    assert doc["config"] is value


def test_doc_get_missing_raises():
    with pytest.raises(KeyError):
        JmlDoc().get("absent")


def test_child_values_are_reachable_from_doc():
    doc = JmlDoc()
    doc["window"].child("title").value = "main"
    key = JmlTable("title", JmlTable("window"))
    assert doc.get(key).get(JmlType.STR) == "main"


def test_child_of_non_table_raises():
    with pytest.raises(TypeError):
        JmlValue(1.0).child("x")


def test_dump_string_and_bool():
    doc = JmlDoc()
    doc["name"].value = "x"
    doc["flag"].value = True
    assert dump(doc) == 'name="x"\nflag=true\n'


def test_dump_number_uses_value_formatting():
    doc = JmlDoc()
    doc["n"].value = 1.5
    assert dump(doc) == f"n={format_value(1.5)}\n"


def test_dump_array():
    doc = JmlDoc()
    doc["arr"].value = jml_vector(["a", "b"])
    assert dump(doc) == 'arr=["a","b",]\n'


def test_dump_nested_table():
    doc = JmlDoc()
    window = doc["window"]
    window.child("title").value = "t"
    window.child("size").child("w").value = False
    assert dump(doc) == 'window={title="t",size={w=false,},}\n'


def test_dump_empty_table():
    doc = JmlDoc()
    doc["empty"]
    assert dump(doc) == "empty={}\n"