import random

import pytest

from mynosql.database import Database
from mynosql.keyspace import DataType


@pytest.fixture
def db():
    return Database(random.Random(42))


def test_string_api(db):
    db.set("key1", "value1")
    assert db.get("key1") == "value1"
    db.set("key2", "value2")
    assert db.get("key2") == "value2"
    rows = db.srange(0, -1)
    assert len(rows) >= 2
    assert rows == [(0, "key2", "value2"), (1, "key1", "value1")]
    db.delete("key1", DataType.STRING)
    assert db.get("key1") is None


def test_set_empty_value_rejected(db):
    with pytest.raises(ValueError):
        db.set("key", "")


def test_delete_missing_raises(db):
    with pytest.raises(KeyError):
        db.delete("absent", DataType.LIST)


def test_list_api(db):
    db.lpush("list1", "a")
    db.rpush("list1", "b")
    db.rpush("list1", "c")
    assert db.llen("list1") == 3
    assert db.lrange("list1", 0, -1) == [(0, "a"), (1, "b"), (2, "c")]
    assert db.lpop("list1") == "a"
    assert db.llen("list1") == 2
    assert db.rpop("list1") == "c"
    assert db.llen("list1") == 1


def test_list_missing(db):
    assert db.llen("none") == 0
    assert db.lrange("none", 0, -1) == []
    with pytest.raises(KeyError):
        db.lpop("none")


def test_sorted_set_api(db):
    assert db.zadd("zset1", 1.0, "one") is True
    assert db.zadd("zset1", 2.0, "two") is True
    assert db.zadd("zset1", 3.0, "three") is True
    assert db.zcard("zset1") == 3
    assert db.zcount("zset1", 1.0, 2.0) == 2
    assert db.zrange("zset1", 0, -1) == [(0, "one"), (1, "two"), (2, "three")]
    assert db.zrangebyscore("zset1", 1.0, 3.0) == [
        (0, 1.0, "one"),
        (1, 2.0, "two"),
        (2, 3.0, "three"),
    ]
    assert db.zrank("zset1", "one") == 0
    assert db.zrem("zset1", "one") is True
    assert db.zcard("zset1") == 2
    assert db.zremrangebyscore("zset1", 2.0, 2.0) == 1
    assert db.zrange("zset1", 0, -1) == [(0, "three")]


def test_sorted_set_missing_key(db):
    assert db.zcard("none") == 0
    assert db.zcount("none", 0.0, 1.0) == 0
    assert db.zrange("none", 0, -1) == []
    with pytest.raises(KeyError):
        db.zrank("none", "x")
    with pytest.raises(KeyError):
        db.zrem("none", "x")
    with pytest.raises(KeyError):
        db.zremrangebyscore("none", 0.0, 1.0)


def test_hash_api(db):
    db.hset("hash1", "field1", "val1")
    db.hset("hash1", "field2", "val2")
    assert db.hget("hash1", "field1") == "val1"
    assert db.hget("hash1", "field2") == "val2"
    db.hdel("hash1", "field1")
    assert db.hget("hash1", "field1") is None


def test_hash_missing(db):
    assert db.hget("none", "f") is None
    with pytest.raises(KeyError):
        db.hdel("none", "f")
    db.hset("h", "f", "v")
    with pytest.raises(KeyError):
        db.hdel("h", "other")


def test_types_have_separate_key_spaces(db):
    db.set("shared", "text")
    db.rpush("shared", "item")
    db.hset("shared", "f", "v")
    db.delete("shared", DataType.LIST)
    assert db.get("shared") == "text"
    assert db.llen("shared") == 0
    assert db.hget("shared", "f") == "v"