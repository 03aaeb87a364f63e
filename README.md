# mynosql

A small in-memory key-value store. It has four value types. Each type keeps
its own key space, so the same key can name a string, a list, a sorted set and
a hash at once.

- **strings**: `set`, `get`, `srange`
- **lists** (double-ended): `lpush`, `rpush`, `lpop`, `rpop`, `llen`, `lrange`
- **sorted sets** (a skip list ordered by score): `zadd`, `zcard`, `zcount`,
  `zrange`, `zrangebyscore`, `zrank`, `zrem`, `zremrangebyscore`
- **hashes** (a chained hash table that uses djb2 and grows by doubling):
  `hset`, `hget`, `hdel`

Any key of any type can be removed with `Database.delete(key, data_type)`.

## Installation

```
pip install .
```

It has no runtime dependencies. Python 3.10 or later is required.

## Usage

```python
import random

from mynosql.database import Database
from mynosql.keyspace import DataType

db = Database(random.Random(0))

db.set("key1", "value1")
db.get("key1")                     # "value1"

db.lpush("list1", "a")
db.rpush("list1", "b")
db.rpush("list1", "c")
db.llen("list1")                   # 3
db.lrange("list1", 0, -1)          # [(0, "a"), (1, "b"), (2, "c")]
db.lpop("list1")                   # "a"

db.zadd("zset1", 1.0, "one")       # True
db.zadd("zset1", 2.0, "two")       # True
db.zcount("zset1", 1.0, 2.0)       # 2
db.zrank("zset1", "one")           # 0

db.hset("hash1", "field1", "val1")
db.hget("hash1", "field1")         # "val1"
db.hdel("hash1", "field1")

db.delete("key1", DataType.STRING)
```

## Behaviour worth knowing

- Range operations (`srange`, `lrange`, `zrange`) take inclusive bounds;
  negative bounds count from the end. They return lists of tuples:
  `(index, key, value)` for strings, `(index, value)` for lists and
  `(index, name)` for sorted sets. An empty or inverted range gives `[]`.
- `srange` lists strings from the most recently added key to the oldest.
  Overwriting a key keeps its place.
- `set` raises `ValueError` if the key or the value is empty.
- `lpop` and `rpop` return the removed value. They raise `KeyError` if there
  is no such list and `IndexError` if the list is empty.
- In a sorted set each score is held by at most one name. `zadd` returns
  `False` and changes nothing when the score is already taken.
  `zrangebyscore` returns `(position, score, name)` rows.
- `zrank` raises `KeyError` if the set or the member is missing. `zrem`
  returns whether the member was removed. `zremrangebyscore` returns how many
  members it removed. Both raise `KeyError` if the set does not exist.
- `hget` returns `None` for a missing hash or field. `hdel` raises `KeyError`
  if either is missing. `delete` raises `KeyError` for an unknown key.
- `llen`, `zcard` and `zcount` return 0 for keys that do not exist.

## Using the parts directly

The value types can also be used on their own:

- `mynosql.lists.ValueList` has `push_left`, `push_right`, `pop_left`,
  `pop_right` and `range`. It is iterable and has a length.
- `mynosql.sortedset.SortedSet` has `add`, `count`, `range`,
  `range_by_score`, `rank`, `remove` and `remove_range_by_score`. Iterating
  over it yields `(name, score)` pairs in ascending score order.
- `mynosql.hashes.HashTable` has `set`, `get`, `delete`, `load_factor` and
  `table_size`. It starts with 101 buckets and doubles its bucket count when
  the load factor goes above 0.7. `mynosql.hashes.djb2(text, table_size)`
  is the hash function it uses.
- `mynosql.keyspace.KeySpace` is the key registry for one type, and
  `mynosql.keyspace.DataType` names the four types.
- `mynosql.strings` provides `set_string`, `get_string` and `string_range`,
  which work on a `KeySpace`.

Sorted sets choose their skip-list levels at random. Pass a seeded
`random.Random` to `Database` or `SortedSet` to get the same structure on
every run.

## What it does not do

Everything lives in memory in one Python process. There is no persistence to
disk, no network server, no command-line client and no expiry of keys.

## Running the tests

```
pip install .[test]
pytest
```