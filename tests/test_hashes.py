import pytest

from mynosql.hashes import HashTable, djb2


def test_hash_api_from_source():
    table = HashTable()
    table.set("field1", "val1")
    table.set("field2", "val2")
    assert table.get("field1") == "val1"
    assert table.get("field2") == "val2"
    table.delete("field1")
    assert table.get("field1") is None
    assert table.get("field2") == "val2"


def test_djb2_of_empty_text_is_seed():
    assert djb2("", 1_000_000) == 5381


@pytest.mark.parametrize("text", ["a", "field1", "héllo", "a much longer field name"])
@pytest.mark.parametrize("size", [1, 7, 101, 202])
def test_djb2_reduces_full_hash(text, size):
    result = djb2(text, size)
    assert 0 <= result < size
    assert result == djb2(text, 2**64) % size


def test_default_table_size():
    table = HashTable()
    assert table.table_size() == 101
    assert table.load_factor() == 0.0


def test_update_does_not_add_field():
    table = HashTable()
    table.set("f", "1")
    table.set("f", "2")
    assert len(table) == 1
    assert table.get("f") == "2"


def test_chained_fields_in_one_bucket():
    table = HashTable(1)
    table.set("a", "1")
    table.set("b", "2")
    table.set("c", "3")
    table.set("b", "20")
    assert [table.get(f) for f in "abc"] == ["1", "20", "3"]
    table.delete("b")
    assert table.get("b") is None
    assert table.get("a") == "1"
    assert table.get("c") == "3"


def test_grows_past_threshold_and_keeps_fields():
    table = HashTable()
    for number in range(70):
        table.set(f"field{number}", str(number))
    assert table.table_size() == 101
    table.set("field70", "70")
    assert table.table_size() == 202
    assert len(table) == 71
    assert all(table.get(f"field{n}") == str(n) for n in range(71))
    assert table.load_factor() <= 0.7


def test_delete_missing_raises():
    table = HashTable()
    table.set("x", "1")
    with pytest.raises(KeyError):
        table.delete("y")
    assert len(table) == 1


def test_invalid_table_size():
    with pytest.raises(ValueError):
        HashTable(0)